# SPDX-License-Identifier: MIT
"""Media candidate decoding for job results.

A completed job's ``output`` object may carry ``image``/``video`` (one URL)
and ``images``/``videos`` (a list of URLs). Each field is decoded into a
tagged variant, then flattened into an ordered candidate list.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from .types import MediaKind

# Decoding order: singular fields first, then arrays
_FIELDS: tuple[tuple[str, MediaKind, bool], ...] = (
    ("image", "image", False),
    ("video", "video", False),
    ("images", "image", True),
    ("videos", "video", True),
)


@dataclass(frozen=True)
class MediaCandidate:
    kind: MediaKind
    url: str


@dataclass(frozen=True)
class NoMedia:
    """Field absent or holding nothing usable."""


@dataclass(frozen=True)
class Single:
    kind: MediaKind
    url: str


@dataclass(frozen=True)
class Many:
    kind: MediaKind
    urls: tuple[str, ...]


MediaField = NoMedia | Single | Many


def _as_url(value: Any) -> str | None:
    """Accept a bare URL string or an object carrying ``url``."""
    if isinstance(value, str) and value:
        return value
    if isinstance(value, dict):
        url = value.get("url")
        if isinstance(url, str) and url:
            return url
    return None


def decode_field(kind: MediaKind, value: Any, many: bool) -> MediaField:
    """Decode one output field into a tagged variant."""
    if many:
        if not isinstance(value, list):
            return NoMedia()
        urls = tuple(u for u in (_as_url(v) for v in value) if u)
        return Many(kind, urls) if urls else NoMedia()

    url = _as_url(value)
    return Single(kind, url) if url else NoMedia()


def decode_output(output: Any) -> list[MediaField]:
    """Decode every known media field of a result ``output``, in order."""
    if not isinstance(output, dict):
        return []
    return [decode_field(kind, output.get(name), many) for name, kind, many in _FIELDS]


def media_candidates(output: Any) -> list[MediaCandidate]:
    """Flatten decoded fields into candidates, preserving field and element order."""
    candidates: list[MediaCandidate] = []
    for field in decode_output(output):
        match field:
            case Single(kind=kind, url=url):
                candidates.append(MediaCandidate(kind, url))
            case Many(kind=kind, urls=urls):
                candidates.extend(MediaCandidate(kind, u) for u in urls)
            case NoMedia():
                pass
    return candidates


def select_candidate(
    candidates: list[MediaCandidate],
    kind: MediaKind | None = None,
    index: float = 0,
) -> MediaCandidate | None:
    """Pick one candidate.

    Filters by ``kind`` when given, then takes ``index`` (floored, clamped to
    >= 0). An out-of-range index falls back to the first filtered candidate,
    then to the first candidate of any kind.
    """
    if not candidates:
        return None

    filtered = [c for c in candidates if c.kind == kind] if kind else candidates
    if isinstance(index, int):
        i = max(0, index)
    else:
        i = max(0, math.floor(index)) if math.isfinite(index) else 0

    if i < len(filtered):
        return filtered[i]
    if filtered:
        return filtered[0]
    return candidates[0]
