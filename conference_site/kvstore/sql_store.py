"""SQLAlchemy-backed key-value store (one row per key)."""
from __future__ import annotations

from typing import Callable, Optional

from sqlalchemy import select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session as SASession

from conference_site.db.engine import make_session_factory, session_scope
from conference_site.db.models import KeyValueEntry
from conference_site.kvstore.base import StoreError
from conference_site.utils.logging import get_logger

LOG = get_logger("kvstore.sql")


class SqlKeyValueStore:
    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._factory: Callable[[], SASession] = make_session_factory(engine)

    @property
    def engine(self) -> Engine:
        return self._engine

    def get(self, key: str) -> Optional[str]:
        try:
            with session_scope(self._factory) as session:
                record = session.execute(
                    select(KeyValueEntry).where(KeyValueEntry.key == key)
                ).scalar_one_or_none()
                return record.value if record else None
        except SQLAlchemyError as exc:
            LOG.error("kv get failed key=%s error=%s", key, exc)
            raise StoreError(f"read failed for key {key!r}") from exc

    def set(self, key: str, value: str) -> None:
        try:
            with session_scope(self._factory) as session:
                record = session.get(KeyValueEntry, key)
                if record:
                    record.value = value
                    return
                session.add(KeyValueEntry(key=key, value=value))
        except SQLAlchemyError as exc:
            LOG.error("kv set failed key=%s error=%s", key, exc)
            raise StoreError(f"write failed for key {key!r}") from exc

    def ping(self) -> bool:
        try:
            with session_scope(self._factory) as session:
                session.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as exc:
            LOG.debug("kv ping failed: %s", exc)
            return False


__all__ = ["SqlKeyValueStore"]
