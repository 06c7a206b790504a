# SPDX-License-Identifier: MIT
"""Model catalog tool."""

from ..aliases import all_aliases
from ..config import get_catalog
from ..types import CatalogResult


async def list_models(refresh: bool = False) -> CatalogResult:
    """List scraped catalog models plus curated aliases.

    Never raises on a failed refresh: the last good list (or none) comes back
    with ``last_error`` and ``warning`` set.
    """
    return await get_catalog().list_models(refresh=bool(refresh), aliases=all_aliases())
