"""Editing client: API access and the save-queue state holder."""

from .api_client import ApiError, ContentApiClient, ContentClientError, NetworkError
from .editor import ContentEditor, ContentStatus, EditorSnapshot

__all__ = [
    "ApiError",
    "ContentApiClient",
    "ContentClientError",
    "NetworkError",
    "ContentEditor",
    "ContentStatus",
    "EditorSnapshot",
]
