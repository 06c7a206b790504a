# SPDX-License-Identifier: MIT
"""Scraped RunComfy model catalog.

Usage::

    from runcomfy_mcp.catalog import ModelsCatalog

    catalog = ModelsCatalog(models_page_url, cache_ttl_ms, http_client)
    result = await catalog.list_models(refresh=False, aliases=aliases)
"""

from .cache import CatalogSnapshot, ModelsCatalog
from .extractor import FragmentExtractor, ModelDescriptor, RegexFragmentExtractor, extract_models

__all__ = [
    "CatalogSnapshot",
    "FragmentExtractor",
    "ModelDescriptor",
    "ModelsCatalog",
    "RegexFragmentExtractor",
    "extract_models",
]
