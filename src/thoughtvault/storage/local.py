"""
Key-value fallback store.

All records live as one JSON list under a single key, serialized directly from
the record model (no Markdown round-trip). Used when no writable asset folder
is available.
"""
import json
from typing import List
from pydantic import TypeAdapter, ValidationError
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from thoughtvault.models.kv import KeyValue
from thoughtvault.models.record import ThoughtRecord
from thoughtvault.logging import logger

RECORDS_KEY = "chat-summaries"

_records_adapter = TypeAdapter(List[ThoughtRecord])


class LocalStore:
    def __init__(self, engine: Engine, key: str = RECORDS_KEY):
        self.engine = engine
        self.key = key

    def describe(self) -> str:
        return "local storage"

    def _read(self, session: Session) -> List[ThoughtRecord]:
        row = session.get(KeyValue, self.key)
        if row is None:
            return []
        return _records_adapter.validate_json(row.value)

    def _write(self, session: Session, records: List[ThoughtRecord]):
        value = json.dumps(
            [r.model_dump(mode="json", by_alias=True) for r in records],
            ensure_ascii=False,
        )
        row = session.get(KeyValue, self.key)
        if row is None:
            row = KeyValue(key=self.key, value=value)
        else:
            row.value = value
        session.add(row)
        session.commit()

    def save(self, record: ThoughtRecord) -> bool:
        try:
            with Session(self.engine) as session:
                records = [r for r in self._read(session) if r.id != record.id]
                records.insert(0, record)
                self._write(session, records)
        except (SQLAlchemyError, ValidationError) as e:
            logger.error(f"Failed to save record {record.id} to local storage: {e}")
            return False

        logger.info(f"Saved record {record.id} to local storage")
        return True

    def load_all(self) -> List[ThoughtRecord]:
        try:
            with Session(self.engine) as session:
                records = self._read(session)
        except (SQLAlchemyError, ValidationError) as e:
            logger.error(f"Failed to load records from local storage: {e}")
            return []

        return sorted(records, key=lambda r: r.created_at, reverse=True)

    def delete(self, record_id: str) -> bool:
        try:
            with Session(self.engine) as session:
                records = self._read(session)
                remaining = [r for r in records if r.id != record_id]
                if len(remaining) == len(records):
                    return False
                self._write(session, remaining)
        except (SQLAlchemyError, ValidationError) as e:
            logger.error(f"Failed to delete record {record_id} from local storage: {e}")
            return False

        logger.info(f"Deleted record {record_id} from local storage")
        return True
