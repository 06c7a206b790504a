# SPDX-License-Identifier: MIT
"""Model descriptor extraction from the RunComfy models page.

The page carries no API: its model list is embedded in the HTML as JSON-ish
fragments. Extraction is best effort and lives behind the
:class:`FragmentExtractor` protocol so the scanning strategy can change
without touching the cache.
"""

from __future__ import annotations

import re
from typing import Protocol, runtime_checkable

from pydantic import BaseModel

RUNNABLE_PLAYGROUND_TYPE = "model"


class ModelDescriptor(BaseModel, frozen=True):
    """One runnable catalog entry, keyed by ``author/object``."""

    model_id: str
    author: str
    object: str
    task: str | None = None
    playground_type: str = RUNNABLE_PLAYGROUND_TYPE


@runtime_checkable
class FragmentExtractor(Protocol):
    """Turns raw page text into an ordered, deduplicated descriptor list.

    Implementations must be pure. An empty list means nothing usable was
    found; deciding what to do about that is the caller's job.
    """

    def extract(self, html: str) -> list[ModelDescriptor]: ...


class RegexFragmentExtractor:
    """Scan for ``"author"…"object"…"task"…"playground_type"`` fragments.

    Fields must appear in that order; the lazy gaps keep each match inside a
    single fragment. When the raw text yields nothing, escaped quotes are
    normalized and the scan runs once more, which covers pages that embed
    their data as a JSON string literal.
    """

    ENTRY_RE = re.compile(
        r'"author":"(?P<author>[^"]*)"'
        r'.*?"object":"(?P<object>[^"]*)"'
        r'.*?"task":"(?P<task>[^"]*)"'
        r'.*?"playground_type":"(?P<playground_type>[^"]*)"',
        re.DOTALL,
    )

    def extract(self, html: str) -> list[ModelDescriptor]:
        models = self._scan(html)
        if not models:
            models = self._scan(html.replace('\\"', '"'))
        return list(models.values())

    def _scan(self, text: str) -> dict[str, ModelDescriptor]:
        models: dict[str, ModelDescriptor] = {}
        for match in self.ENTRY_RE.finditer(text):
            author = match["author"]
            obj = match["object"]
            playground_type = match["playground_type"]
            if not author or not obj:
                continue
            if playground_type != RUNNABLE_PLAYGROUND_TYPE:
                continue

            model_id = f"{author}/{obj}"
            if model_id in models:
                continue  # first occurrence wins

            models[model_id] = ModelDescriptor(
                model_id=model_id,
                author=author,
                object=obj,
                task=match["task"] or None,
                playground_type=playground_type,
            )
        return models


_default_extractor = RegexFragmentExtractor()


def extract_models(html: str) -> list[ModelDescriptor]:
    """Extract descriptors with the default regex strategy."""
    return _default_extractor.extract(html)
