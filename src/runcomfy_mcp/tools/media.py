# SPDX-License-Identifier: MIT
"""Media download tool.

Downloads a generated file and, depending on ``return_mode``, attaches MCP
content blocks for it:
- path: download metadata only
- resource_link: metadata plus a ``file://`` resource link
- embedded: metadata plus the file content as a base64 blob
"""

import base64
import json
import pathlib

import aiofiles
from mcp.types import BlobResourceContents, EmbeddedResource, ResourceLink, TextContent

from ..config import get_downloader, logger
from ..types import DownloadResult, MediaKind, ReturnMode

MediaContent = TextContent | ResourceLink | EmbeddedResource


def resource_link_for(result: DownloadResult) -> ResourceLink:
    path = pathlib.Path(result["saved_path"])
    return ResourceLink(
        type="resource_link",
        name=result["filename"],
        uri=path.as_uri(),
        mimeType=result["mime_type"],
        size=result["bytes"],
    )


async def embedded_resource_for(result: DownloadResult) -> EmbeddedResource:
    """Read the saved file back and embed it as a base64 blob."""
    path = pathlib.Path(result["saved_path"])
    async with aiofiles.open(path, "rb") as f:
        data = await f.read()
    return EmbeddedResource(
        type="resource",
        resource=BlobResourceContents(
            uri=path.as_uri(),
            mimeType=result["mime_type"] or "application/octet-stream",
            blob=base64.b64encode(data).decode("ascii"),
        ),
    )


async def download_media(
    url: str | None = None,
    request_id: str | None = None,
    kind: MediaKind | None = None,
    index: int = 0,
    output_dir: str | None = None,
    filename: str | None = None,
    overwrite: bool = False,
    return_mode: ReturnMode = "path",
) -> DownloadResult | list[MediaContent]:
    """Download media from a URL or a completed request.

    Returns:
        The DownloadResult for return_mode="path"; otherwise a list of content
        blocks: the DownloadResult as JSON text followed by the resource.

    Raises:
        ResolutionError: If no media URL can be determined
        FilesystemConflictError: If the file exists and overwrite is false
        RemoteServiceError: If the API or media host returns an error
    """
    result = await get_downloader().resolve_and_download(
        url=url,
        request_id=request_id,
        kind=kind,
        index=index,
        output_dir=output_dir,
        filename=filename,
        overwrite=overwrite,
        return_mode=return_mode,
    )

    if return_mode == "path":
        return result

    content: list[MediaContent] = [TextContent(type="text", text=json.dumps(result, indent=2))]
    if return_mode == "resource_link":
        content.append(resource_link_for(result))
    elif return_mode == "embedded":
        content.append(await embedded_resource_for(result))
        logger.debug("Embedded %s (%d bytes)", result["filename"], result["bytes"])
    return content
