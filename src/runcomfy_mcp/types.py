# SPDX-License-Identifier: MIT
"""TypedDict result shapes returned by tools."""

from typing import Any, Literal, NotRequired, TypedDict

MediaKind = Literal["image", "video"]
ReturnMode = Literal["path", "resource_link", "embedded"]


class ModelEntry(TypedDict):
    """Serialized model descriptor."""

    model_id: str
    author: str
    object: str
    task: str | None
    playground_type: str


class CatalogResult(TypedDict):
    """Result from listing catalog models."""

    source: str
    fetched_at_ms: int
    cached: bool
    count: int
    models: list[ModelEntry]
    aliases: dict[str, Any]
    note: str
    last_error: str | None
    warning: NotRequired[str]


class DownloadResult(TypedDict):
    """Result from downloading a media file."""

    ok: bool
    url: str
    saved_path: str
    filename: str
    bytes: int
    mime_type: str | None
    return_mode: ReturnMode
    request_id: str | None
    kind: MediaKind | None
