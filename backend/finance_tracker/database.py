import logging
from sqlalchemy import create_engine, event, text, inspect
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from .models import Base

logger = logging.getLogger(__name__)

# Global state for the open database
_current_engine: Engine | None = None
_current_session_factory: sessionmaker | None = None


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    """Enable foreign keys for SQLite."""
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def _is_memory_url(db_url: str) -> bool:
    return db_url.startswith("sqlite") and (
        ":memory:" in db_url or db_url.rstrip("/") in ("sqlite:", "sqlite+pysqlite:")
    )


def open_database(db_url: str) -> None:
    """
    Open the ledger database.

    Creates the tables if they don't exist and upgrades older schemas.
    An in-memory SQLite URL shares one connection across threads so the
    request handlers and the caller see the same data.
    """
    global _current_engine, _current_session_factory

    if _current_engine is not None:
        close_database()

    kwargs: dict = {"echo": False}
    if db_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if _is_memory_url(db_url):
            kwargs["poolclass"] = StaticPool

    _current_engine = create_engine(db_url, **kwargs)
    _current_session_factory = sessionmaker(bind=_current_engine)

    # Create tables if they don't exist
    Base.metadata.create_all(_current_engine)

    # Migrate existing tables: add missing columns
    _migrate_schema(_current_engine)

    logger.info("Opened database %s", _current_engine.url.render_as_string(hide_password=True))


def _migrate_schema(engine: Engine) -> None:
    """Add any missing columns to existing tables."""
    inspector = inspect(engine)

    # Optional transaction columns added in place when an existing table lacks them
    # Format: (table_name, column_name, column_type_sql)
    migrations = [
        ("transactions", "installments", "INTEGER NOT NULL DEFAULT 1"),
        ("transactions", "current_installment", "INTEGER NOT NULL DEFAULT 1"),
        ("transactions", "notes", "VARCHAR(500)"),
    ]

    with engine.connect() as conn:
        for table, column, col_type in migrations:
            if not inspector.has_table(table):
                continue
            existing = [c["name"] for c in inspector.get_columns(table)]
            if column not in existing:
                logger.info("Adding missing column %s.%s", table, column)
                conn.execute(text(
                    f"ALTER TABLE {table} ADD COLUMN {column} {col_type}"
                ))
                conn.commit()


def close_database() -> None:
    """Close the open database."""
    global _current_engine, _current_session_factory

    if _current_engine is not None:
        _current_engine.dispose()
        _current_engine = None
        _current_session_factory = None
        logger.info("Closed database")


def get_session() -> Session:
    """Get a session for the open database."""
    if _current_session_factory is None:
        raise RuntimeError("No database is currently open")
    return _current_session_factory()


def get_db():
    """FastAPI dependency for database sessions."""
    session = get_session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def is_database_open() -> bool:
    """Check if a database is currently open."""
    return _current_engine is not None
