from thoughtvault.summary.headings import classify_heading, HEADING_KEYWORDS, SECTION_HEADINGS
from thoughtvault.summary.extract import extract_sections, DEFAULT_SUBJECT
from thoughtvault.summary.generate import generate_markdown

__all__ = [
    "classify_heading",
    "HEADING_KEYWORDS",
    "SECTION_HEADINGS",
    "extract_sections",
    "DEFAULT_SUBJECT",
    "generate_markdown",
]
