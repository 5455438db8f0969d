"""Route registration, called from startup wiring."""
from __future__ import annotations

from typing import Any

from .admin_session import register_admin_session
from .content_api import register_content_api
from .health import register_health


def register_all(app: Any) -> None:
    register_content_api(app)
    register_admin_session(app)
    register_health(app)


__all__ = ["register_all"]
