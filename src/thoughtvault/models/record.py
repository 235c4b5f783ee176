import uuid
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from thoughtvault.models.base import as_utc, utcnow


class SectionKey(str, Enum):
    """The eight canonical categories of a thought asset, in schema order."""
    SUBJECT = "subject"
    BACKGROUND = "background"
    HYPOTHESIS = "hypothesis"
    ANALYSIS = "analysis"
    DECISION = "decision"
    DEVELOPMENT = "development"
    INSIGHTS = "insights"
    OUTPUT = "output"


def new_record_id() -> str:
    return uuid.uuid4().hex


class ThoughtRecord(BaseModel):
    """
    Structured distillation of one conversation.

    Records are immutable once built; storage backends and exports only read them.
    ``created_at`` serializes as ``createdAt`` to stay compatible with saved manifests.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(default_factory=new_record_id)
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")

    subject: str = ""
    background: str = ""
    hypothesis: str = ""
    analysis: str = ""
    decision: str = ""
    development: str = ""
    insights: str = ""
    output: str = ""

    @field_validator("created_at")
    @classmethod
    def normalize_created_at(cls, value: datetime) -> datetime:
        return as_utc(value)

    def get(self, key: SectionKey) -> str:
        return getattr(self, key.value)

    def sections(self) -> list[tuple[SectionKey, str]]:
        """(key, text) pairs in schema order, empty fields included."""
        return [(key, self.get(key)) for key in SectionKey]
