"""
Shared SQLAlchemy base and helpers.
"""
from sqlalchemy.orm import declarative_base
from datetime import datetime, date, UTC

# SQLite compilation shims for PostgreSQL-only types used when tests run
# against an in-memory SQLite database.
from .. import sqlite_compiler_shims  # noqa: F401


def now_utc():
    """Return an aware UTC datetime for default/updated timestamps."""
    return datetime.now(UTC)


def today_utc() -> date:
    return now_utc().date()


Base = declarative_base()
