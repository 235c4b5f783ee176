from datetime import datetime, timezone
from thoughtvault.models.record import SectionKey, ThoughtRecord
from thoughtvault.summary import extract_sections, generate_markdown

CREATED = datetime(2024, 3, 14, 9, 26, 53, tzinfo=timezone.utc)


def full_record() -> ThoughtRecord:
    return ThoughtRecord(
        id="rec-1",
        created_at=CREATED,
        subject="Choosing a storage layer",
        background="The prototype kept everything in memory.",
        hypothesis="1. SQLite is enough\n2. **[AI]** Files are easier to inspect",
        analysis="Compared SQLite and flat files.\n\nFiles win on portability.",
        decision="Use Markdown files plus a JSON manifest.",
        development="Sync the folder with a notes app later.",
        insights="Inspectable storage builds trust.",
        output="- `storage/directory.py`\n- `storage/local.py`",
    )


def test_generate_full_record():
    md = generate_markdown(full_record())
    assert md.startswith("## 🎯 Subject\n\nChoosing a storage layer\n\n## 📋 Background\n\n")
    assert md.count("## ") == 8
    # Canonical order
    positions = [md.index(h) for h in [
        "🎯 Subject", "📋 Background", "💭 Hypothesis & Motivation", "🔍 Analysis",
        "✅ Decision", "🚀 Development", "💡 Insights", "📤 Output",
    ]]
    assert positions == sorted(positions)
    assert md.endswith("## 📤 Output\n\n- `storage/directory.py`\n- `storage/local.py`")


def test_empty_fields_are_omitted():
    record = ThoughtRecord(subject="Only a subject")
    md = generate_markdown(record)
    assert md == "## 🎯 Subject\n\nOnly a subject"
    assert md.count("##") == 1


def test_sections_separated_by_blank_line():
    record = ThoughtRecord(subject="S", output="O")
    assert generate_markdown(record) == "## 🎯 Subject\n\nS\n\n## 📤 Output\n\nO"


def test_empty_record_renders_empty_string():
    assert generate_markdown(ThoughtRecord()) == ""


def test_content_is_verbatim():
    record = ThoughtRecord(analysis="<b>not escaped</b> & *kept*")
    assert "<b>not escaped</b> & *kept*" in generate_markdown(record)


def test_round_trip_preserves_every_field():
    original = full_record()
    restored = extract_sections(
        generate_markdown(original),
        record_id=original.id,
        created_at=original.created_at,
    )
    assert restored == original
    for key in SectionKey:
        assert restored.get(key) == original.get(key)


def test_round_trip_partial_record():
    original = ThoughtRecord(subject="Partial", insights="Only insights here")
    restored = extract_sections(generate_markdown(original), record_id=original.id, created_at=original.created_at)
    assert restored == original
