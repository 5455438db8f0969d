"""Database layer root."""

from .engine import (
    MEMORY_PATH,
    create_sqlite_engine,
    make_session_factory,
    session_scope,
)
from .models import Base, KeyValueEntry

__all__ = [
    "MEMORY_PATH",
    "create_sqlite_engine",
    "make_session_factory",
    "session_scope",
    "Base",
    "KeyValueEntry",
]
