from thoughtvault.models.record import SectionKey, ThoughtRecord
from thoughtvault.models.kv import KeyValue
from thoughtvault.models.usage import UsageCount

__all__ = [
    "SectionKey", "ThoughtRecord",
    "KeyValue",
    "UsageCount",
]
