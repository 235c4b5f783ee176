import os
import re
import tempfile
from datetime import datetime
from pathlib import Path
from thoughtvault.models.base import as_utc
from thoughtvault.models.record import ThoughtRecord

MANIFEST_NAME = "summaries.json"


def sanitize_filename(name: str) -> str:
    """Sanitize filename to be safe for filesystem."""
    # Remove non-alphanumeric (except ._-)
    s = re.sub(r'[^a-zA-Z0-9._-]', '_', name)
    return s.strip('_')


def utc_date(moment: datetime) -> str:
    """ISO date (YYYY-MM-DD) of a timestamp in UTC; naive values are taken as UTC."""
    return as_utc(moment).date().isoformat()


def record_filename(record_id: str, created_at: datetime) -> str:
    """Deterministic Markdown filename for a stored record."""
    return f"{utc_date(created_at)}-{sanitize_filename(record_id)}.md"


def export_filename(record: ThoughtRecord) -> str:
    return f"thought-asset-{utc_date(record.created_at)}.md"


def atomic_write_text(path: Path, content: str):
    """
    Write text so that readers see either the old file or the complete new one.

    Content goes to a temporary file in the same directory, is flushed to disk,
    then renamed over the target. On failure the temporary file is removed and
    the original is left untouched.
    """
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def is_writable_dir(path: Path) -> bool:
    """Check a directory exists and accepts new files."""
    if not path.is_dir():
        return False
    test_file = path / ".write_test"
    try:
        test_file.touch()
        test_file.unlink()
    except OSError:
        return False
    return True
