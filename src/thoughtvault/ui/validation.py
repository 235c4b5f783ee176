from typing import List, Optional
from pathlib import Path
from thoughtvault.config import Settings
from thoughtvault.storage.files import is_writable_dir

def validate_api_key(settings: Settings) -> List[str]:
    """The summarizer cannot run without an API key."""
    if settings.OPENAI_API_KEY is None or not settings.OPENAI_API_KEY.get_secret_value():
        return ["OPENAI_API_KEY is not set. Add it to your environment or .env file."]
    return []

def validate_data_dir(settings: Settings) -> List[str]:
    """Validate the data directory can hold the local database."""
    errors = []
    data_dir = Path(settings.DATA_DIR)
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        errors.append(f"Cannot create data directory {data_dir}: {e}")
        return errors

    if not is_writable_dir(data_dir):
        errors.append(f"Cannot write to data directory {data_dir}")
    return errors

def asset_dir_warning(settings: Settings) -> Optional[str]:
    """Non-fatal: an unusable asset folder only means records go to local storage."""
    if settings.ASSET_DIR is not None and not is_writable_dir(Path(settings.ASSET_DIR)):
        return f"Asset folder {settings.ASSET_DIR} is not writable; records will be kept in local storage."
    return None

def run_all_checks(settings: Settings) -> List[str]:
    """Run all blocking validation checks."""
    errors = []
    errors.extend(validate_api_key(settings))
    errors.extend(validate_data_dir(settings))
    return errors
