# SPDX-License-Identifier: MIT
"""Shared pytest fixtures for RunComfy MCP server tests."""

import pathlib
from collections.abc import Callable

import httpx
import pytest

from runcomfy_mcp import config

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def clear_config_caches():
    """Clear config singletons so tests never share clients or paths."""
    for fn in (
        config.get_http_client,
        config.get_client,
        config.get_catalog,
        config.get_download_path,
        config.get_downloader,
    ):
        fn.cache_clear()
    yield


@pytest.fixture
def tmp_download_path(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create a temporary directory for media downloads."""
    download_path = tmp_path / "downloads"
    download_path.mkdir()
    return download_path


@pytest.fixture
def mock_http():
    """Build an httpx.AsyncClient backed by a handler function.

    Returns a factory ``make(handler) -> (client, requests)`` where
    ``requests`` records every request that reached the transport.
    """

    def make(handler: Handler) -> tuple[httpx.AsyncClient, list[httpx.Request]]:
        requests: list[httpx.Request] = []

        def _handle(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        return httpx.AsyncClient(transport=httpx.MockTransport(_handle)), requests

    return make


# ==================== Catalog page fixtures ====================


def model_fragment(author: str, obj: str, task: str = "text-to-image", playground_type: str = "model") -> str:
    """One catalog entry as it appears in the page data."""
    return (
        f'{{"author":"{author}","object":"{obj}","cover":"https://cdn.example.com/{obj}.webp",'
        f'"task":"{task}","playground_type":"{playground_type}"}}'
    )


@pytest.fixture
def fragment():
    """Expose model_fragment to tests."""
    return model_fragment


@pytest.fixture
def models_page_html() -> str:
    """Models page with three runnable models and one workflow."""
    fragments = [
        model_fragment("wanai", "wan-2-1/i2v-480p", "image-to-video"),
        model_fragment("blackforestlabs", "flux-2/pro/text-to-image"),
        model_fragment("comfy", "upscale-workflow", "upscale", playground_type="workflow"),
        model_fragment("kling", "kling-1-6/standard/image-to-video", "image-to-video"),
    ]
    return "<html><body><script>window.__DATA__=[" + ",".join(fragments) + "]</script></body></html>"


# ==================== Job result fixtures ====================


@pytest.fixture
def image_result() -> dict:
    """Completed result carrying two images."""
    return {
        "request_id": "req_img",
        "status": "completed",
        "output": {"images": ["https://cdn.example.com/out/a.png", "https://cdn.example.com/out/b.png"]},
    }


@pytest.fixture
def mixed_result() -> dict:
    """Completed result carrying a single video, a single image and an image list."""
    return {
        "request_id": "req_mixed",
        "status": "completed",
        "output": {
            "video": "https://cdn.example.com/out/clip.mp4",
            "image": "https://cdn.example.com/out/poster.jpg",
            "images": ["https://cdn.example.com/out/frame1.png"],
        },
    }
