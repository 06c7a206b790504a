# SPDX-License-Identifier: MIT
"""TTL cache over the scraped RunComfy model catalog.

The cache holds one immutable :class:`CatalogSnapshot`. Every refresh
attempt, successful or not, replaces it whole; a failed refresh carries the
previous model list forward so callers keep getting the last good data.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import httpx

from ..exceptions import ExtractionError, RemoteServiceError
from ..types import CatalogResult
from .extractor import FragmentExtractor, ModelDescriptor, RegexFragmentExtractor

logger = logging.getLogger("runcomfy_mcp")

MODEL_ID_NOTE = "Use a full model_id (author/object). Aliases map common short keys to model_id."
STALE_WARNING = "Model list refresh failed; returning last cached list."
EMPTY_WARNING = "Model list refresh failed; returning only aliases."


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class CatalogSnapshot:
    """Complete catalog state at one point in time."""

    fetched_at_ms: int = 0
    models: tuple[ModelDescriptor, ...] = ()
    error: str | None = None


class ModelsCatalog:
    """Fetch-or-serve-cached access to the RunComfy models page.

    Args:
        models_page_url: Page to scrape.
        cache_ttl_ms: How long a non-empty snapshot stays fresh. A failed
            refresh also restarts this window.
        http_client: Client used to fetch the page.
        extractor: Parsing strategy; defaults to :class:`RegexFragmentExtractor`.
        user_agent: Client identifier sent with the page request.
        clock: Returns the current time in epoch milliseconds.
    """

    def __init__(
        self,
        models_page_url: str,
        cache_ttl_ms: int,
        http_client: httpx.AsyncClient,
        extractor: FragmentExtractor | None = None,
        user_agent: str = "runcomfy-mcp/1.0",
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        self._url = models_page_url
        self._ttl_ms = cache_ttl_ms
        self._http = http_client
        self._extractor = extractor or RegexFragmentExtractor()
        self._user_agent = user_agent
        self._clock = clock
        self._snapshot = CatalogSnapshot()

    @property
    def snapshot(self) -> CatalogSnapshot:
        return self._snapshot

    def _is_fresh(self, now_ms: int) -> bool:
        snap = self._snapshot
        return now_ms - snap.fetched_at_ms < self._ttl_ms and len(snap.models) > 0

    async def _fetch_models(self) -> list[ModelDescriptor]:
        resp = await self._http.get(
            self._url,
            headers={
                "User-Agent": self._user_agent,
                "Accept": "text/html,application/xhtml+xml",
            },
        )
        if not resp.is_success:
            raise RemoteServiceError(
                f"RunComfy models page error: {resp.status_code} - {resp.text}",
                status_code=resp.status_code,
                body=resp.text,
            )

        models = self._extractor.extract(resp.text)
        if not models:
            raise ExtractionError(
                "Failed to extract models from RunComfy models page (unexpected format or empty list)."
            )
        return models

    def _result(self, cached: bool, aliases: dict[str, Any], last_error: str | None) -> CatalogResult:
        snap = self._snapshot
        return {
            "source": self._url,
            "fetched_at_ms": snap.fetched_at_ms,
            "cached": cached,
            "count": len(snap.models),
            "models": [m.model_dump() for m in snap.models],
            "aliases": aliases,
            "note": MODEL_ID_NOTE,
            "last_error": last_error,
        }

    async def list_models(self, refresh: bool = False, aliases: dict[str, Any] | None = None) -> CatalogResult:
        """List catalog models, refreshing when forced, stale, or empty.

        Args:
            refresh: Bypass the cache even when the snapshot is fresh
            aliases: Passed through unmodified into the result

        Returns:
            CatalogResult. On a failed refresh, ``models`` is the previous
            list, ``last_error`` is set and ``warning`` says whether the list
            is stale or absent.
        """
        aliases = aliases if aliases is not None else {}
        now_ms = self._clock()

        if not refresh and self._is_fresh(now_ms):
            logger.debug("Serving %d cached models", len(self._snapshot.models))
            return self._result(cached=True, aliases=aliases, last_error=self._snapshot.error)

        previous = self._snapshot.models
        try:
            models = await self._fetch_models()
        except Exception as e:
            error = str(e) or e.__class__.__name__
            self._snapshot = CatalogSnapshot(fetched_at_ms=now_ms, models=previous, error=error)
            logger.warning("Model list refresh failed (%d cached models kept): %s", len(previous), error)

            result = self._result(cached=len(previous) > 0, aliases=aliases, last_error=error)
            result["warning"] = STALE_WARNING if previous else EMPTY_WARNING
            return result

        self._snapshot = CatalogSnapshot(fetched_at_ms=now_ms, models=tuple(models))
        logger.info("Refreshed model catalog: %d models from %s", len(models), self._url)
        return self._result(cached=False, aliases=aliases, last_error=None)
