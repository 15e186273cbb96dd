from pathlib import Path
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlmodel import SQLModel, create_engine, Session
from sentencelab.core.config import settings
import logging

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(engine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(db_url: str, echo: bool = False):
    """Create an engine for db_url with dialect-appropriate options."""
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite":
        database = url.database
        if database and database != ":memory:":
            Path(database).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(
            db_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )
        enable_sqlite_foreign_keys(engine)
        return engine

    return create_engine(
        db_url,
        echo=echo,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=5,
        max_overflow=10,
    )


db_url = settings.database_url
logger.info(f"Connecting to database: {db_url[:20]}...")  # Log partial URL for debugging

engine = build_engine(db_url, echo=settings.database_echo)


def get_session():
    """Dependency for getting database sessions."""
    with Session(engine) as session:
        yield session


def init_db():
    """Initialize database tables."""
    # Import models so they are registered on SQLModel.metadata
    from sentencelab import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
