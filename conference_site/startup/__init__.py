"""Startup helpers."""

from .wiring import create_app

__all__ = ["create_app"]
