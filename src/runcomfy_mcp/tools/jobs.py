# SPDX-License-Identifier: MIT
"""Job lifecycle tools: status, result, cancel."""

from typing import Any

from ..config import get_client


async def check_status(request_id: str) -> dict[str, Any]:
    """Get status of a request (in_queue, in_progress, completed, cancelled).

    Raises:
        ConfigurationError: If RUNCOMFY_API_KEY is not set
    """
    return await get_client().check_status(request_id)


async def get_result(request_id: str) -> dict[str, Any]:
    return await get_client().get_result(request_id)


async def cancel(request_id: str) -> dict[str, Any]:
    return await get_client().cancel(request_id)
