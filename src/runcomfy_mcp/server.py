# SPDX-License-Identifier: MIT
"""RunComfy MCP Server - FastMCP server for the RunComfy Model API.

This module initializes the FastMCP server and registers all tools.
Business logic is organized into submodules under tools/. Exceptions raised
by a tool are returned to the caller by FastMCP as error results.
"""

from typing import Any, Literal

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from .aliases import DEFAULT_EDIT_MODEL, DEFAULT_IMAGE_MODEL, DEFAULT_VIDEO_MODEL
from .config import get_api_key, logger
from .descriptions import (
    CANCEL,
    CHECK_STATUS,
    DOWNLOAD_MEDIA,
    EDIT_IMAGE,
    GENERATE_IMAGE,
    GENERATE_VIDEO,
    GET_RESULT,
    LIST_MODELS,
)
from .tools import generation, jobs, media, models

# Initialize FastMCP server
mcp = FastMCP("runcomfy")


# ==================== GENERATION TOOLS ====================
@mcp.tool(description=GENERATE_VIDEO)
async def runcomfy_generate_video(
    prompt: str,
    model: str = DEFAULT_VIDEO_MODEL,
    image_url: str | None = None,
    duration: float | None = None,
    aspect_ratio: str | None = None,
    seed: int | None = None,
    inputs: dict[str, Any] | None = None,
):
    return await generation.generate_video(prompt, model, image_url, duration, aspect_ratio, seed, inputs)


@mcp.tool(description=GENERATE_IMAGE)
async def runcomfy_generate_image(
    prompt: str,
    model: str = DEFAULT_IMAGE_MODEL,
    aspect_ratio: str | None = None,
    seed: int | None = None,
    inputs: dict[str, Any] | None = None,
):
    return await generation.generate_image(prompt, model, aspect_ratio, seed, inputs)


@mcp.tool(description=EDIT_IMAGE)
async def runcomfy_edit_image(
    prompt: str,
    model: str = DEFAULT_EDIT_MODEL,
    image_url: str | None = None,
    image_urls: list[str] | None = None,
    seed: int | None = None,
    aspect_ratio: str | None = None,
    inputs: dict[str, Any] | None = None,
):
    return await generation.edit_image(prompt, model, image_url, image_urls, seed, aspect_ratio, inputs)


# ==================== JOB TOOLS ====================
@mcp.tool(description=CHECK_STATUS)
async def runcomfy_check_status(request_id: str):
    return await jobs.check_status(request_id)


@mcp.tool(description=GET_RESULT)
async def runcomfy_get_result(request_id: str):
    return await jobs.get_result(request_id)


@mcp.tool(description=CANCEL)
async def runcomfy_cancel(request_id: str):
    return await jobs.cancel(request_id)


# ==================== CATALOG TOOLS ====================
@mcp.tool(description=LIST_MODELS)
async def runcomfy_list_models(refresh: bool = False):
    return await models.list_models(refresh)


# ==================== DOWNLOAD TOOLS ====================
@mcp.tool(description=DOWNLOAD_MEDIA)
async def runcomfy_download_media(
    url: str | None = None,
    request_id: str | None = None,
    kind: Literal["image", "video"] | None = None,
    index: int = 0,
    output_dir: str | None = None,
    filename: str | None = None,
    overwrite: bool = False,
    return_mode: Literal["path", "resource_link", "embedded"] = "path",
):
    return await media.download_media(url, request_id, kind, index, output_dir, filename, overwrite, return_mode)


# ==================== SERVER ENTRYPOINT ====================
def main():
    """Run the MCP server over stdio.

    Settings are read lazily when tools are first called, after .env is loaded.
    """
    load_dotenv()  # Load environment variables at runtime
    if not get_api_key():
        logger.warning(
            "RUNCOMFY_API_KEY is not set. Only runcomfy_list_models and URL downloads will work; "
            "Model API tools will error."
        )
    logger.info("Starting RunComfy MCP server over stdio")
    mcp.run()


if __name__ == "__main__":
    main()
