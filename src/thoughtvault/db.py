from pathlib import Path
from typing import Optional
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine
from thoughtvault.logging import logger

DB_NAME = "thoughtvault.db"


def db_url(data_dir: Path) -> str:
    return f"sqlite:///{data_dir / DB_NAME}"


def create_db_engine(data_dir: Optional[Path] = None, url: Optional[str] = None) -> Engine:
    """Create an engine for the local database.

    Pass ``url`` directly (e.g. ``sqlite://`` for tests) or a data directory,
    which is created if missing.
    """
    if url is None:
        if data_dir is None:
            raise ValueError("Either data_dir or url is required")
        data_dir.mkdir(parents=True, exist_ok=True)
        url = db_url(data_dir)
    return create_engine(url, echo=False)


def init_db(engine: Engine):
    # Import all models here so SQLModel knows about them
    # This is critical for create_all to work
    from thoughtvault.models import kv, usage  # noqa: F401

    logger.info(f"Initializing database at {engine.url}")
    SQLModel.metadata.create_all(engine)
