import sys
import typer
from pathlib import Path
from typing import Optional
from thoughtvault.config import settings
from thoughtvault.logging import logger, get_trace_id
from thoughtvault.storage.files import is_writable_dir

app = typer.Typer(no_args_is_help=True)

@app.callback()
def main():
    """
    ThoughtVault CLI: turn chat transcripts into structured thought assets.
    """
    pass

def get_service():
    from thoughtvault.service import build_service
    return build_service(settings)

@app.command(name="doctor")
def doctor():
    """
    Check system configuration and environment health.
    """
    logger.info("Running doctor check...")

    print("\n🩺 ThoughtVault Doctor\n")

    # Check 1: Environment / Interpreter
    print(f"Python: {sys.version.split()[0]}")
    print(f"Prefix: {sys.prefix}")
    print(f"Trace ID: {get_trace_id()}")

    # Check 2: Configuration
    print("\n[Configuration]")
    print(f"OPENAI_MODEL_SUMMARY:     {settings.OPENAI_MODEL_SUMMARY}")
    print(f"LLM_TIMEOUT_SECONDS:      {settings.LLM_TIMEOUT_SECONDS}")
    print(f"FREE_USAGE_LIMIT:         {settings.FREE_USAGE_LIMIT}")

    # Mask API Key
    api_key_status = "✅ Set" if settings.OPENAI_API_KEY and settings.OPENAI_API_KEY.get_secret_value() else "❌ Missing"
    print(f"OPENAI_API_KEY:           {api_key_status}")

    # Check 3: Storage
    data_dir = Path(settings.DATA_DIR)
    if data_dir.exists() and data_dir.is_dir():
        print(f"\n[Data Directory]          ✅ Found: {data_dir.absolute()}")
    else:
        print(f"\n[Data Directory]          ❌ Missing: {data_dir.absolute()} (created on first use)")

    if settings.ASSET_DIR is None:
        print("[Asset Folder]            ➖ Not set (records go to local storage)")
    elif is_writable_dir(Path(settings.ASSET_DIR)):
        print(f"[Asset Folder]            ✅ Writable: {Path(settings.ASSET_DIR).absolute()}")
    else:
        print(f"[Asset Folder]            ❌ Not writable: {Path(settings.ASSET_DIR).absolute()} (falling back to local storage)")

    print("\nDoctor check complete.")


@app.command("summarize")
def summarize(
    source: Optional[Path] = typer.Argument(None, help="Transcript file. Reads stdin when omitted."),
    save: bool = typer.Option(True, "--save/--no-save", help="Persist the resulting record."),
    user: Optional[str] = typer.Option(None, "--user", help="User ID for usage counting."),
):
    """Summarize a chat transcript into a thought asset and print it as Markdown."""
    from thoughtvault.usage import UsageLimitReached

    try:
        transcript = source.read_text(encoding="utf-8") if source else sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read transcript: {e}")
        print(f"❌ Failed to read transcript: {e}")
        raise typer.Exit(code=1)

    service = get_service()
    try:
        record = service.analyze(transcript, user_id=user)
    except UsageLimitReached as e:
        print(f"❌ {e}")
        raise typer.Exit(code=2)
    except Exception as e:
        logger.error(f"Summarize failed: {e}")
        print(f"❌ Failed: {e}")
        raise typer.Exit(code=1)

    print(service.export_markdown(record))
    if save:
        store = service.save(record)
        if store is not None:
            print(f"\n✅ Saved {record.id} to {store.describe()}.")
        else:
            print(f"\n❌ Could not save {record.id}.")
            raise typer.Exit(code=1)


@app.command("list")
def list_records():
    """List stored thought assets, newest first."""
    service = get_service()
    records = service.list_records()
    if not records:
        print("No thought assets found.")
        return

    sources = ", ".join(store.describe() for store in service.stores())
    print(f"Found {len(records)} thought assets in {sources}:")
    for i, record in enumerate(records, 1):
        subject = record.subject.splitlines()[0] if record.subject else ""
        print(f"{i}. [{record.id}] {record.created_at:%Y-%m-%d %H:%M} {subject}")


@app.command("show")
def show(record_id: str):
    """Print a stored thought asset as Markdown."""
    service = get_service()
    record = service.get_record(record_id)
    if record is None:
        print(f"❌ No thought asset with ID {record_id}")
        raise typer.Exit(code=1)
    print(service.export_markdown(record))


@app.command("export")
def export(
    record_id: str,
    out: Optional[Path] = typer.Option(None, "--out", help="Target file or directory."),
):
    """Write a stored thought asset to a Markdown file."""
    from thoughtvault.storage.files import atomic_write_text

    service = get_service()
    record = service.get_record(record_id)
    if record is None:
        print(f"❌ No thought asset with ID {record_id}")
        raise typer.Exit(code=1)

    target = out or Path(service.export_filename(record))
    if target.is_dir():
        target = target / service.export_filename(record)
    try:
        atomic_write_text(target, service.export_markdown(record))
    except OSError as e:
        logger.error(f"Export failed: {e}")
        print(f"❌ Failed: {e}")
        raise typer.Exit(code=1)
    print(f"✅ Exported to {target}")


@app.command("delete")
def delete(record_id: str):
    """Delete a stored thought asset."""
    service = get_service()
    if not service.delete(record_id):
        print(f"❌ Could not delete {record_id}")
        raise typer.Exit(code=1)
    print(f"✅ Deleted {record_id}")


usage_app = typer.Typer(help="Usage counter commands.")
app.add_typer(usage_app, name="usage")

@usage_app.command("status")
def usage_status(user: str):
    """Show how many summaries a user has run."""
    service = get_service()
    status = service.usage.status(user)
    flag = "🚫 limit reached" if status.is_limit_reached else "✅ ok"
    print(f"{user}: {status.count}/{status.limit} ({flag})")

@usage_app.command("reset")
def usage_reset(user: str):
    """Reset a user's usage counter."""
    service = get_service()
    if service.usage.reset(user):
        print(f"✅ Usage reset for {user}")
    else:
        print(f"No usage recorded for {user}")


db_app = typer.Typer(help="Database management commands.")
app.add_typer(db_app, name="db")

@db_app.command("init")
def init():
    """Initialize the database tables."""
    from thoughtvault.db import create_db_engine, init_db
    try:
        init_db(create_db_engine(Path(settings.DATA_DIR)))
        logger.info("Database initialized successfully.")
        print("✅ Database initialized.")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        print(f"❌ Failed: {e}")
        raise typer.Exit(code=1)

if __name__ == "__main__":
    app()
