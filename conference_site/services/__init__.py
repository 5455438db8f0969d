"""Service exports."""

from .content_defaults import (
    SiteContent,
    default_content,
    empty_day,
    empty_pricing_option,
    empty_session,
    empty_speaker,
)
from .content_normalizer import normalize_content, clone_site_content
from .content_schema import ContentValidationError, validate_site_content
from .content_service import PersistenceError, read_site_content, write_site_content

__all__ = [
    "SiteContent",
    "default_content",
    "empty_day",
    "empty_pricing_option",
    "empty_session",
    "empty_speaker",
    "normalize_content",
    "clone_site_content",
    "ContentValidationError",
    "validate_site_content",
    "PersistenceError",
    "read_site_content",
    "write_site_content",
]
