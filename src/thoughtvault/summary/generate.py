from thoughtvault.models.record import ThoughtRecord
from thoughtvault.summary.headings import heading_line

SECTION_SEPARATOR = "\n\n"


def generate_markdown(record: ThoughtRecord) -> str:
    """
    Render a record as Markdown, one H2 section per non-empty field.

    Sections follow schema order and use the canonical headings, so the output
    parses back through extract_sections. Field text is inserted verbatim.
    An all-empty record renders as an empty string.
    """
    blocks = [
        f"{heading_line(key)}\n\n{text}"
        for key, text in record.sections()
        if text
    ]
    return SECTION_SEPARATOR.join(blocks)
