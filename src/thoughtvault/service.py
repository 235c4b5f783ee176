"""
Thought asset service.

Ties the summarizer, the section extractor and a record store together. The
service is built explicitly by each entry point (CLI, Streamlit session) and
passed around; nothing here is a process-wide singleton.
"""
from typing import List, Optional
from thoughtvault.config import Settings
from thoughtvault.db import create_db_engine, init_db
from thoughtvault.llm.openai_client import SummaryClient
from thoughtvault.models.record import ThoughtRecord
from thoughtvault.storage import RecordStore, LocalStore, open_store
from thoughtvault.storage.files import export_filename
from thoughtvault.summary import extract_sections, generate_markdown
from thoughtvault.usage import UsageLimitReached, UsageTracker
from thoughtvault.logging import logger


class ThoughtService:
    def __init__(
        self,
        client: SummaryClient,
        store: RecordStore,
        usage: Optional[UsageTracker] = None,
        fallback: Optional[RecordStore] = None,
    ):
        self.client = client
        self.store = store
        self.usage = usage
        self.fallback = fallback

    def analyze(self, transcript: str, user_id: Optional[str] = None) -> ThoughtRecord:
        """
        Summarize a transcript into a new record.

        Raises:
            ValueError: if the transcript is blank.
            UsageLimitReached: if the user has used up their summaries.
        """
        if not transcript or not transcript.strip():
            raise ValueError("No text input provided")

        if self.usage and user_id:
            status = self.usage.status(user_id)
            if status.is_limit_reached:
                raise UsageLimitReached(status)

        markdown = self.client.summarize(transcript)
        record = extract_sections(markdown)
        logger.info(f"Extracted record {record.id} (subject: {record.subject[:60]!r})")

        if self.usage and user_id:
            self.usage.increment(user_id)
        return record

    def stores(self) -> List[RecordStore]:
        """Primary store first, then the fallback if one is configured."""
        return [self.store] + ([self.fallback] if self.fallback is not None else [])

    def save(self, record: ThoughtRecord) -> Optional[RecordStore]:
        """
        Persist to the primary store, retrying into the fallback store if that fails.

        Returns the store that accepted the record, or None if every store failed.
        """
        if self.store.save(record):
            return self.store
        if self.fallback is not None:
            logger.warning(f"Primary store failed for {record.id}; saving to {self.fallback.describe()}")
            if self.fallback.save(record):
                return self.fallback
        return None

    def list_records(self) -> List[ThoughtRecord]:
        """Records from every store, newest first. The primary copy wins on duplicate ids."""
        seen = set()
        records = []
        for store in self.stores():
            for record in store.load_all():
                if record.id not in seen:
                    seen.add(record.id)
                    records.append(record)
        records.sort(key=lambda r: r.created_at, reverse=True)
        return records

    def get_record(self, record_id: str) -> Optional[ThoughtRecord]:
        return next((r for r in self.list_records() if r.id == record_id), None)

    def delete(self, record_id: str) -> bool:
        """Remove the record from every store holding it."""
        deleted = [store.delete(record_id) for store in self.stores()]
        return any(deleted)

    def export_markdown(self, record: ThoughtRecord) -> str:
        return generate_markdown(record)

    def export_filename(self, record: ThoughtRecord) -> str:
        return export_filename(record)


def build_service(settings: Settings) -> ThoughtService:
    """Wire the default service from settings: OpenAI client, SQLite database, store selection."""
    engine = create_db_engine(settings.DATA_DIR)
    init_db(engine)

    api_key = settings.OPENAI_API_KEY.get_secret_value() if settings.OPENAI_API_KEY else None
    client = SummaryClient(
        api_key=api_key,
        model=settings.OPENAI_MODEL_SUMMARY,
        max_output_tokens=settings.OPENAI_MAX_OUTPUT_TOKENS,
        timeout=settings.LLM_TIMEOUT_SECONDS,
    )
    store = open_store(settings.ASSET_DIR, engine)
    fallback = LocalStore(engine) if not isinstance(store, LocalStore) else None
    return ThoughtService(
        client=client,
        store=store,
        usage=UsageTracker(engine, settings.FREE_USAGE_LIMIT),
        fallback=fallback,
    )
