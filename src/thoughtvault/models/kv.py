from sqlmodel import Field
from thoughtvault.models.base import TimestampMixin

class KeyValue(TimestampMixin, table=True):
    key: str = Field(primary_key=True)
    value: str # JSON document, opaque to the table
