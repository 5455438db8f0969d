"""Database engine & session management for the SQL key-value store.

Engines are created explicitly and handed to the store that uses them; there
is no process-wide engine singleton.
"""
from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Callable, Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session as SASession, sessionmaker
from sqlalchemy.pool import StaticPool

from conference_site.db.models import Base
from conference_site.utils.logging import get_logger

LOG = get_logger("conference_site.db")

MEMORY_PATH = ":memory:"


def create_sqlite_engine(db_path: str) -> Engine:
    """Create an engine for `db_path` and make sure the schema exists.

    `:memory:` engines share one connection so every session sees the same
    database.
    """
    if db_path == MEMORY_PATH:
        engine = create_engine(
            "sqlite://",
            future=True,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        parent_dir = os.path.dirname(os.path.abspath(db_path)) or "."
        os.makedirs(parent_dir, exist_ok=True)
        if not os.access(parent_dir, os.W_OK):
            raise RuntimeError(f"content DB directory not writable: {parent_dir}")
        LOG.info("Initializing content database engine at %s", db_path)
        engine = create_engine(f"sqlite:///{db_path}", future=True)
    _safe_create_schema(engine)
    return engine


def _safe_create_schema(engine: Engine) -> None:
    """Run metadata.create_all, tolerating the multi-worker startup race.

    Several gunicorn workers may reach DDL at once; SQLite then reports
    'table ... already exists', which is benign.
    """
    try:
        Base.metadata.create_all(engine)
    except OperationalError as e:  # pragma: no cover - concurrency edge
        msg = str(e).lower()
        if "already exists" in msg:
            LOG.warning("Schema create encountered existing tables (benign race)")
        else:
            raise


def make_session_factory(engine: Engine) -> Callable[[], SASession]:
    return sessionmaker(bind=engine, expire_on_commit=False, class_=SASession)


@contextmanager
def session_scope(factory: Callable[[], SASession]) -> Iterator[SASession]:
    sess = factory()
    try:
        yield sess
        sess.commit()
    except Exception:
        sess.rollback()
        raise
    finally:
        sess.close()


__all__ = [
    "MEMORY_PATH",
    "create_sqlite_engine",
    "make_session_factory",
    "session_scope",
]
