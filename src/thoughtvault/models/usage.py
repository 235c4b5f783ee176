from datetime import datetime
from sqlmodel import Field, SQLModel
from thoughtvault.models.base import utcnow

class UsageCount(SQLModel, table=True):
    user_id: str = Field(primary_key=True)
    count: int = Field(default=0)
    first_used: datetime = Field(default_factory=utcnow, nullable=False)
    last_used: datetime = Field(default_factory=utcnow, nullable=False)
