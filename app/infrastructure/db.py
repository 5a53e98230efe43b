"""
Database engine, schema and connection bootstrap.

The engine (and its connection pool) is created once per process and
shared by every repository adapter.
"""

import logging
import time

from sqlalchemy import (
    Column,
    DateTime,
    MetaData,
    SmallInteger,
    String,
    Table,
    Uuid,
    create_engine,
    text,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError

from app.core.config import Settings

logger = logging.getLogger(__name__)

metadata = MetaData()

users_table = Table(
    "users",
    metadata,
    Column("id", Uuid(as_uuid=True), primary_key=True),
    Column("firstname", String(255), nullable=False),
    Column("lastname", String(255), nullable=False),
    Column("email", String(320), nullable=False, unique=True),
    Column("age", SmallInteger, nullable=False),
    Column("created", DateTime(timezone=True), nullable=False),
)


def create_db_engine(settings: Settings) -> Engine:
    """Build a pooled SQLAlchemy engine from application settings."""
    url = settings.get_database_url()
    if url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True)
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_recycle=settings.db_pool_recycle_seconds,
    )


def wait_for_database(engine: Engine, attempts: int = 10, delay: float = 2.0) -> None:
    """Block until the database accepts a connection.

    Args:
        engine: Engine to connect with.
        attempts: Number of tries before giving up.
        delay: Seconds to sleep between tries.

    Raises:
        OperationalError: The last connection error once attempts run out.
    """
    for attempt in range(1, attempts + 1):
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return
        except OperationalError:
            if attempt == attempts:
                logger.error("Database unreachable after %d attempts.", attempts)
                raise
            logger.warning(
                "Attempt %d: unable to connect to database. Retrying in %.1f seconds...",
                attempt,
                delay,
            )
            time.sleep(delay)


def create_schema(engine: Engine) -> None:
    """Create the users table (and its unique email index) if missing."""
    metadata.create_all(engine)
    logger.info("Database schema is up to date.")
