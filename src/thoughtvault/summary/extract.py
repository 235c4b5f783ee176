from datetime import datetime
from typing import Dict, List, Optional
from thoughtvault.models.record import SectionKey, ThoughtRecord
from thoughtvault.summary.headings import classify_heading

HEADING_PREFIX = "## "
DEFAULT_SUBJECT = "Conversation Analysis"


def heading_title(line: str) -> Optional[str]:
    """Return the title of an H2 heading line, or None for any other line."""
    stripped = line.strip()
    if stripped.startswith(HEADING_PREFIX):
        return stripped[len(HEADING_PREFIX):]
    return None


def extract_sections(
    markdown: str,
    *,
    record_id: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> ThoughtRecord:
    """
    Parse H2-sectioned Markdown into a ThoughtRecord.

    Body lines are collected under the most recent recognized heading and
    committed (trimmed) when the next heading or the end of the document is
    reached. Lines before the first heading, or under an unrecognized heading,
    are dropped. A key seen twice keeps its last non-empty body.

    Never raises on malformed input: a document without recognizable headings
    yields a record holding only the default subject.

    Args:
        markdown: Document text, typically an LLM reply or a saved asset file.
        record_id: Identifier to keep (e.g. when reloading from disk).
        created_at: Creation time to keep.
    """
    fields: Dict[SectionKey, str] = {}
    active: Optional[SectionKey] = None
    buffer: List[str] = []

    def commit():
        if active is None:
            return
        content = "\n".join(buffer).strip()
        if content:
            fields[active] = content

    for line in markdown.split("\n"):
        title = heading_title(line)
        if title is not None:
            commit()
            active = classify_heading(title)
            buffer = []
        elif active is not None:
            buffer.append(line)

    commit()

    values = {key.value: fields.get(key, "") for key in SectionKey}
    if not values[SectionKey.SUBJECT.value]:
        values[SectionKey.SUBJECT.value] = DEFAULT_SUBJECT

    if record_id is not None:
        values["id"] = record_id
    if created_at is not None:
        values["created_at"] = created_at

    return ThoughtRecord(**values)
