from pathlib import Path
from typing import List, Optional, Protocol
from sqlalchemy.engine import Engine
from thoughtvault.models.record import ThoughtRecord
from thoughtvault.storage.directory import DirectoryStore
from thoughtvault.storage.local import LocalStore
from thoughtvault.storage.files import is_writable_dir
from thoughtvault.logging import logger


class RecordStore(Protocol):
    def save(self, record: ThoughtRecord) -> bool: ...

    def load_all(self) -> List[ThoughtRecord]: ...

    def delete(self, record_id: str) -> bool: ...

    def describe(self) -> str: ...


def open_store(asset_dir: Optional[Path], engine: Engine) -> RecordStore:
    """Pick the directory store when a writable folder is configured, else local storage."""
    if asset_dir is not None:
        if is_writable_dir(asset_dir):
            return DirectoryStore(asset_dir)
        logger.warning(f"Asset folder {asset_dir} is not a writable directory; using local storage")
    return LocalStore(engine)


__all__ = [
    "RecordStore",
    "DirectoryStore",
    "LocalStore",
    "open_store",
]
