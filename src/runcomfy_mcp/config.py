# SPDX-License-Identifier: MIT
"""Configuration management for runcomfy-mcp.

This module handles:
- Logging setup
- Environment variable parsing (API key, URLs, TTL, timeout)
- Construction of the shared HTTP client, API client, models catalog and downloader
- Download path configuration with security checks

It is the only module that reads the environment; everything it builds
receives its settings as constructor arguments.
"""

import asyncio
import atexit
import logging
import os
import pathlib
import sys
from functools import lru_cache

import httpx

from .catalog import ModelsCatalog
from .client import RunComfyClient
from .download import MediaDownloader
from .exceptions import ConfigurationError

# ---------- Logging configuration ----------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,  # Log to stderr to avoid interfering with stdio MCP transport
)
logger = logging.getLogger("runcomfy_mcp")

# ---------- Defaults ----------
DEFAULT_BASE_URL = "https://model-api.runcomfy.net"
DEFAULT_MODELS_PAGE_URL = "https://www.runcomfy.com/models/all"
DEFAULT_MODELS_CACHE_TTL_MS = 10 * 60 * 1000
DEFAULT_REQUEST_TIMEOUT = 60.0
DEFAULT_DOWNLOAD_PATH = "runcomfy-downloads"
USER_AGENT = "runcomfy-mcp/1.0"


def _env_number(name: str, default: float) -> float:
    """Read a positive number from the environment.

    Raises:
        ConfigurationError: If the variable is set but not a positive number
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw.strip())
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {raw!r}")
    return value


def get_api_key() -> str | None:
    """Return the RunComfy API key, or None when unset.

    A missing key is not an error here: only Model API calls need it, and the
    client reports its absence before touching the network.
    """
    api_key = os.getenv("RUNCOMFY_API_KEY", "").strip()
    return api_key or None


def get_base_url() -> str:
    return os.getenv("RUNCOMFY_BASE_URL", DEFAULT_BASE_URL).strip().rstrip("/")


def get_models_page_url() -> str:
    return os.getenv("RUNCOMFY_MODELS_PAGE_URL", DEFAULT_MODELS_PAGE_URL).strip()


def get_cache_ttl_ms() -> int:
    return int(_env_number("RUNCOMFY_MODELS_CACHE_TTL_MS", DEFAULT_MODELS_CACHE_TTL_MS))


def get_request_timeout() -> float:
    return _env_number("RUNCOMFY_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)


# ---------- Shared clients (process singletons) ----------
@lru_cache(maxsize=1)
def get_http_client() -> httpx.AsyncClient:
    """Get the shared httpx client used for every outbound request.

    Carries the request deadline and the client identifier header. Credentials
    are added per request by the API client, never here, so media downloads
    from third-party hosts do not leak the API key.
    """
    client = httpx.AsyncClient(
        timeout=httpx.Timeout(get_request_timeout()),
        headers={"User-Agent": USER_AGENT},
        follow_redirects=True,
    )
    _register_cleanup(client)
    return client


def _register_cleanup(client: httpx.AsyncClient) -> None:
    """Register an atexit handler to close the shared httpx client."""

    def _cleanup() -> None:
        try:
            loop = asyncio.get_running_loop()
            loop.create_task(client.aclose())
        except RuntimeError:
            # No running loop left at exit
            asyncio.run(client.aclose())
        logger.debug("Shared httpx client closed")

    atexit.register(_cleanup)


@lru_cache(maxsize=1)
def get_client() -> RunComfyClient:
    """Get the RunComfy Model API client (cached singleton)."""
    return RunComfyClient(api_key=get_api_key(), base_url=get_base_url(), http_client=get_http_client())


@lru_cache(maxsize=1)
def get_catalog() -> ModelsCatalog:
    """Get the models catalog cache (cached singleton, holds the snapshot)."""
    return ModelsCatalog(
        models_page_url=get_models_page_url(),
        cache_ttl_ms=get_cache_ttl_ms(),
        http_client=get_http_client(),
        user_agent=USER_AGENT,
    )


# ---------- Path configuration (runtime) ----------
@lru_cache(maxsize=1)
def get_download_path() -> pathlib.Path:
    """Get and validate the default download directory.

    Uses RUNCOMFY_DOWNLOAD_PATH, falling back to ./runcomfy-downloads. The
    directory is not created here; the downloader creates it on first write.

    Security: Rejects a symlinked download path to prevent directory traversal.

    Returns:
        Absolute download directory path

    Raises:
        ConfigurationError: If the path is malformed, a symlink, or exists but is not a directory
    """
    path_str = os.getenv("RUNCOMFY_DOWNLOAD_PATH", "").strip() or DEFAULT_DOWNLOAD_PATH

    original_path = pathlib.Path(path_str).expanduser()
    if original_path.is_symlink():
        raise ConfigurationError(f"Download directory cannot be a symbolic link: {path_str}")

    try:
        path = original_path.resolve()
    except (ValueError, OSError) as e:
        raise ConfigurationError(f"Invalid download directory path '{path_str}': {e}") from e

    if path.exists() and not path.is_dir():
        raise ConfigurationError(f"RUNCOMFY_DOWNLOAD_PATH: download directory is not a directory: {path}")

    return path


@lru_cache(maxsize=1)
def get_downloader() -> MediaDownloader:
    """Get the media downloader (cached singleton)."""
    return MediaDownloader(client=get_client(), http_client=get_http_client(), default_output_dir=get_download_path())
