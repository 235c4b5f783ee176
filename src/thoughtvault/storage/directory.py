"""
Directory-backed record store.

Each record is written as a Markdown file named ``<date>-<id>.md``. A manifest
(``summaries.json``) lists ``{id, createdAt, subject}`` for every stored record
so the folder can be listed without re-parsing each file. Loading a record
re-parses its Markdown through the section extractor, keeping the id and
creation time from the manifest.
"""
import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from thoughtvault.models.base import as_utc
from thoughtvault.models.record import ThoughtRecord
from thoughtvault.storage.files import MANIFEST_NAME, atomic_write_text, record_filename
from thoughtvault.summary import extract_sections, generate_markdown
from thoughtvault.logging import logger


class ManifestError(Exception):
    """The manifest exists but cannot be read as a list of entries."""


class ManifestEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    created_at: datetime = Field(alias="createdAt")
    subject: str = "Untitled"

    @field_validator("created_at")
    @classmethod
    def normalize_created_at(cls, value: datetime) -> datetime:
        return as_utc(value)

    @property
    def filename(self) -> str:
        return record_filename(self.id, self.created_at)


_manifest_adapter = TypeAdapter(List[ManifestEntry])


class DirectoryStore:
    def __init__(self, root: Path):
        self.root = Path(root)

    @property
    def manifest_path(self) -> Path:
        return self.root / MANIFEST_NAME

    def describe(self) -> str:
        return f"folder {self.root}"

    def read_manifest(self) -> List[ManifestEntry]:
        """Return manifest entries; a missing manifest is an empty folder."""
        if not self.manifest_path.exists():
            return []
        try:
            return _manifest_adapter.validate_json(self.manifest_path.read_bytes())
        except ValidationError as e:
            raise ManifestError(f"Malformed manifest {self.manifest_path}: {e}") from e

    def write_manifest(self, entries: List[ManifestEntry]):
        payload = [entry.model_dump(mode="json", by_alias=True) for entry in entries]
        atomic_write_text(self.manifest_path, json.dumps(payload, ensure_ascii=False, indent=2))

    def save(self, record: ThoughtRecord) -> bool:
        try:
            entries = self.read_manifest()
            self.root.mkdir(parents=True, exist_ok=True)
            path = self.root / record_filename(record.id, record.created_at)
            atomic_write_text(path, generate_markdown(record))

            updated = [e for e in entries if e.id != record.id]
            updated.insert(0, ManifestEntry(
                id=record.id,
                created_at=record.created_at,
                subject=record.subject or "Untitled",
            ))
            self.write_manifest(updated)
        except (OSError, ManifestError) as e:
            logger.error(f"Failed to save record {record.id} to {self.root}: {e}")
            return False

        logger.info(f"Saved record {record.id} to {path.name}")
        return True

    def load(self, entry: ManifestEntry) -> Optional[ThoughtRecord]:
        try:
            content = (self.root / entry.filename).read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to load record {entry.id}: {e}")
            return None
        return extract_sections(content, record_id=entry.id, created_at=entry.created_at)

    def load_all(self) -> List[ThoughtRecord]:
        try:
            entries = self.read_manifest()
        except (OSError, ManifestError) as e:
            logger.error(f"Failed to read manifest in {self.root}: {e}")
            return []

        records = [r for r in (self.load(entry) for entry in entries) if r is not None]
        records.sort(key=lambda r: r.created_at, reverse=True)
        return records

    def delete(self, record_id: str) -> bool:
        try:
            entries = self.read_manifest()
            entry = next((e for e in entries if e.id == record_id), None)
            if entry is None:
                return False

            self.write_manifest([e for e in entries if e.id != record_id])
        except (OSError, ManifestError) as e:
            logger.error(f"Failed to delete record {record_id}: {e}")
            return False

        # The record is gone once the manifest is committed.
        try:
            (self.root / entry.filename).unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Left stray file {entry.filename} in {self.root}: {e}")

        logger.info(f"Deleted record {record_id} from {self.root}")
        return True
