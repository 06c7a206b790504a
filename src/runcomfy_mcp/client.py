# SPDX-License-Identifier: MIT
"""RunComfy Model API client.

Thin authenticated wrapper over the job endpoints:
- Submitting a generation job for a model
- Checking job status
- Fetching job results
- Cancelling a queued job

The client holds no job state; every job lives on the remote service and is
fetched on demand. Nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .exceptions import ConfigurationError, RemoteServiceError

logger = logging.getLogger("runcomfy_mcp")


class RunComfyClient:
    """Async client for the RunComfy Model API.

    Args:
        api_key: Bearer credential. May be None; every operation then raises
            ConfigurationError before any request is made.
        base_url: API root, e.g. ``https://model-api.runcomfy.net``.
        http_client: Shared httpx client (carries timeout and user agent).
    """

    def __init__(self, api_key: str | None, base_url: str, http_client: httpx.AsyncClient) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._http = http_client

    @property
    def has_credentials(self) -> bool:
        return bool(self._api_key)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _request(self, method: str, endpoint: str, body: dict[str, Any] | None = None) -> dict[str, Any]:
        if not self._api_key:
            raise ConfigurationError(
                "RUNCOMFY_API_KEY environment variable is required for RunComfy Model API requests"
            )

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
        }
        resp = await self._http.request(method, f"{self._base_url}{endpoint}", headers=headers, json=body)

        if not resp.is_success:
            raise RemoteServiceError(
                f"RunComfy API error: {resp.status_code} - {resp.text}",
                status_code=resp.status_code,
                body=resp.text,
            )
        return resp.json()

    # ------------------------------------------------------------------
    # Job submission
    # ------------------------------------------------------------------

    async def run_model(self, model_id: str, body: dict[str, Any]) -> dict[str, Any]:
        """Submit a generation job.

        Args:
            model_id: Full model identifier (``author/object[/variant...]``)
            body: Model inputs, sent as the JSON request body

        Returns:
            Submission payload; includes ``request_id``

        Raises:
            ConfigurationError: If no API key is configured
            RemoteServiceError: If the API returns a non-success status
        """
        result = await self._request("POST", f"/v1/models/{model_id}", body)
        logger.info("Submitted job %s to %s", result.get("request_id"), model_id)
        return result

    async def generate_video(self, model_id: str, prompt: str, **options: Any) -> dict[str, Any]:
        return await self.run_model(model_id, {"prompt": prompt, **options})

    async def generate_image(self, model_id: str, prompt: str, **options: Any) -> dict[str, Any]:
        return await self.run_model(model_id, {"prompt": prompt, **options})

    # ------------------------------------------------------------------
    # Job lifecycle
    # ------------------------------------------------------------------

    async def check_status(self, request_id: str) -> dict[str, Any]:
        """Get job status: in_queue, in_progress, completed, or cancelled."""
        return await self._request("GET", f"/v1/requests/{request_id}/status")

    async def get_result(self, request_id: str) -> dict[str, Any]:
        """Get job result. Media URLs live under ``output``.

        Only meaningful once status is completed; earlier calls return
        whatever the service reports.
        """
        return await self._request("GET", f"/v1/requests/{request_id}/result")

    async def cancel(self, request_id: str) -> dict[str, Any]:
        """Request cancellation of a queued job."""
        result = await self._request("POST", f"/v1/requests/{request_id}/cancel")
        logger.info("Cancelled %s", request_id)
        return result
