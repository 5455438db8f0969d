"""Client-side holder of the site content with a coalescing save queue.

Edits are applied locally first. While admin mode is on, each edit replaces
a single pending slot and a drain loop sends the latest pending document
with at most one save request in flight; edits arriving meanwhile collapse
into the next request. Failed saves are reported through `status`/`error`
and are not retried.
"""
from __future__ import annotations

import enum
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional

from conference_site.client.api_client import ContentApiClient, ContentClientError
from conference_site.services.content_defaults import SiteContent, default_content
from conference_site.services.content_normalizer import clone_site_content
from conference_site.utils.logging import get_logger

LOG = get_logger("client.editor")

LOAD_FAILED = "Не удалось загрузить данные"
SAVE_FAILED = "Не удалось сохранить изменения"


class ContentStatus(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    SAVING = "saving"
    ERROR = "error"


@dataclass(frozen=True)
class EditorSnapshot:
    content: SiteContent
    status: ContentStatus
    error: Optional[str]


Updater = Callable[[SiteContent], Optional[SiteContent]]
Listener = Callable[[EditorSnapshot], None]


class ContentEditor:
    def __init__(
        self,
        api: ContentApiClient,
        *,
        admin_mode: bool = False,
        initial: Optional[SiteContent] = None,
    ) -> None:
        self._api = api
        self._lock = threading.Lock()
        self._content: SiteContent = clone_site_content(initial) if initial is not None else default_content()
        self._status = ContentStatus.IDLE
        self._error: Optional[str] = None
        self._admin_mode = admin_mode
        self._pending: Optional[SiteContent] = None
        self._saving = False
        # Bumped by reload / admin-off; responses from older requests are dropped.
        self._generation = 0
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------ state
    @property
    def content(self) -> SiteContent:
        with self._lock:
            return clone_site_content(self._content)

    @property
    def status(self) -> ContentStatus:
        return self._status

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def admin_mode(self) -> bool:
        return self._admin_mode

    @property
    def is_saving(self) -> bool:
        return self._saving

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def snapshot(self) -> EditorSnapshot:
        with self._lock:
            return EditorSnapshot(clone_site_content(self._content), self._status, self._error)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    # ---------------------------------------------------------------- loading
    def load(self) -> bool:
        """Fetch the stored content; on failure keep the current copy and flag an error."""
        with self._lock:
            generation = self._generation
            self._status = ContentStatus.LOADING
            self._error = None
        self._notify()
        try:
            fetched = self._api.fetch_content()
        except ContentClientError as exc:
            LOG.warning("Failed to load site content: %s", exc)
            with self._lock:
                if generation != self._generation:
                    return False
                self._status = ContentStatus.ERROR
                self._error = str(exc) or LOAD_FAILED
            self._notify()
            return False
        with self._lock:
            if generation != self._generation:
                return False
            self._content = clone_site_content(fetched)
            self._status = ContentStatus.IDLE
        self._notify()
        return True

    def reload(self) -> bool:
        """Drop unsaved edits and load the persisted content again."""
        with self._lock:
            self._pending = None
            self._generation += 1
        return self.load()

    # ---------------------------------------------------------------- editing
    def update(self, updater: Updater) -> SiteContent:
        """Apply `updater` to a copy of the content and queue the result for saving.

        The updater may return a new document or mutate the copy in place
        and return None.
        """
        draft = self.content
        result = updater(draft)
        updated = clone_site_content(draft if result is None else result)
        with self._lock:
            self._content = updated
            queue = self._admin_mode
            if queue:
                self._pending = clone_site_content(updated)
        self._notify()
        if queue:
            self.flush()
        return clone_site_content(updated)

    def set_admin_mode(self, enabled: bool) -> None:
        with self._lock:
            self._admin_mode = bool(enabled)
            if not enabled:
                if self._pending is not None:
                    LOG.info("Admin mode disabled; discarding unsaved content edit")
                self._pending = None
                self._generation += 1
                if self._status in (ContentStatus.SAVING, ContentStatus.ERROR):
                    self._status = ContentStatus.IDLE
                    self._error = None
        self._notify()

    # ----------------------------------------------------------------- saving
    def flush(self) -> None:
        with self._lock:
            if self._saving:
                return
            if not self._admin_mode:
                self._pending = None
                return
            if self._pending is None:
                return
            self._saving = True
        try:
            self._drain()
        except BaseException:
            with self._lock:
                self._saving = False
                if self._status is ContentStatus.SAVING:
                    self._status = ContentStatus.ERROR
                    self._error = SAVE_FAILED
            raise

    def _drain(self) -> None:
        # Exit and release of the in-flight flag happen under one lock so an
        # edit queued concurrently is never left without a running drain.
        while True:
            with self._lock:
                if not self._admin_mode:
                    self._pending = None
                next_content = self._pending
                if next_content is None:
                    self._saving = False
                    return
                self._pending = None
                generation = self._generation
                self._status = ContentStatus.SAVING
                self._error = None
            self._notify()
            try:
                saved = self._api.save_content(next_content)
            except ContentClientError as exc:
                LOG.warning("Failed to save site content: %s", exc)
                with self._lock:
                    if generation == self._generation:
                        self._status = ContentStatus.ERROR
                        self._error = str(exc) or SAVE_FAILED
            else:
                with self._lock:
                    if generation == self._generation:
                        # A newer pending edit stays on screen until its own save returns.
                        if self._pending is None:
                            self._content = clone_site_content(saved)
                        self._status = ContentStatus.IDLE
            self._notify()


__all__ = ["ContentStatus", "EditorSnapshot", "ContentEditor"]
