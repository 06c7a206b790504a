# SPDX-License-Identifier: MIT
"""Resolve a job's media URL and stream it to local disk."""

from __future__ import annotations

import contextlib
import logging
import mimetypes
import pathlib
import uuid
from urllib.parse import unquote, urlparse

import aiofiles
import aiofiles.os
import anyio
import httpx

from .client import RunComfyClient
from .exceptions import FilesystemConflictError, RemoteServiceError, ResolutionError
from .media import media_candidates, select_candidate
from .security import check_not_symlink, validate_safe_path
from .types import DownloadResult, MediaKind, ReturnMode

logger = logging.getLogger("runcomfy_mcp")

FILENAME_PREFIX = "runcomfy"

# Declared content type -> extension appended to extensionless filenames
EXTENSION_FOR_MIME: dict[str, str] = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/webp": ".webp",
    "image/gif": ".gif",
    "video/mp4": ".mp4",
    "video/webm": ".webm",
    "video/quicktime": ".mov",
}


def parse_content_type(header: str | None) -> str | None:
    """Strip parameters from a Content-Type header (``image/png; charset=x`` -> ``image/png``)."""
    if not header:
        return None
    mime = header.split(";", 1)[0].strip().lower()
    return mime or None


def filename_from_url(url: str) -> str | None:
    """Basename of the URL's path component, or None if it has none."""
    name = pathlib.PurePosixPath(unquote(urlparse(url).path)).name.replace("\\", "_")
    if not name or name in (".", ".."):
        return None
    return name


def synthesize_filename(request_id: str | None, kind: str | None) -> str:
    return "_".join(part for part in (FILENAME_PREFIX, request_id, kind or "media") if part)


def with_extension(filename: str, mime_type: str | None) -> str:
    """Append an extension inferred from ``mime_type`` if ``filename`` has none."""
    if pathlib.PurePosixPath(filename).suffix:
        return filename
    return filename + EXTENSION_FOR_MIME.get(mime_type or "", "")


class MediaDownloader:
    """Turns a URL or a job ``request_id`` into a file on disk.

    Args:
        client: Model API client, used to fetch job results.
        http_client: Client for the media GET. Must not carry API credentials.
        default_output_dir: Directory used when a call gives none.
    """

    def __init__(
        self,
        client: RunComfyClient,
        http_client: httpx.AsyncClient,
        default_output_dir: pathlib.Path,
    ) -> None:
        self._client = client
        self._http = http_client
        self._default_output_dir = default_output_dir

    @staticmethod
    async def _write_atomically(resp: httpx.Response, path: pathlib.Path, overwrite: bool) -> int:
        """Stream ``resp`` into a sibling partial file, then move it onto ``path``.

        Without ``overwrite`` the target is reserved with an exclusive create
        first, so concurrent downloads of the same name cannot both succeed.
        On any failure the partial file (and the reservation) is removed and
        an existing target is left untouched.

        Returns:
            Number of bytes written
        """
        reserved = False
        if not overwrite:
            try:
                async with aiofiles.open(path, "xb"):
                    pass
            except FileExistsError as e:
                raise FilesystemConflictError(f"File already exists: {path} (set overwrite=true to replace it)") from e
            reserved = True

        partial = path.with_name(f".{path.name}.{uuid.uuid4().hex}.part")
        size = 0
        try:
            async with aiofiles.open(partial, "xb") as f:
                async for chunk in resp.aiter_bytes():
                    await f.write(chunk)
                    size += len(chunk)
            await aiofiles.os.replace(partial, path)
        except BaseException:
            with contextlib.suppress(FileNotFoundError):
                await aiofiles.os.remove(partial)
            if reserved:
                with contextlib.suppress(FileNotFoundError):
                    await aiofiles.os.remove(path)
            raise
        return size

    async def resolve_url(
        self,
        url: str | None = None,
        request_id: str | None = None,
        kind: MediaKind | None = None,
        index: float = 0,
    ) -> tuple[str, MediaKind | None]:
        """Resolve the media URL to download and its kind (None if given directly).

        Raises:
            ResolutionError: If neither url nor request_id is given, or the result has no media
        """
        if url:
            return url, kind

        if not request_id:
            raise ResolutionError("Provide either url or request_id to download media")

        result = await self._client.get_result(request_id)
        output = result.get("output") if isinstance(result, dict) else None
        candidate = select_candidate(media_candidates(output), kind=kind, index=index)
        if candidate is None:
            raise ResolutionError(
                f"No image or video URL found in result output for request {request_id} "
                "(is the request completed?)"
            )
        return candidate.url, candidate.kind

    async def resolve_and_download(
        self,
        url: str | None = None,
        request_id: str | None = None,
        kind: MediaKind | None = None,
        index: float = 0,
        output_dir: str | pathlib.Path | None = None,
        filename: str | None = None,
        overwrite: bool = False,
        return_mode: ReturnMode = "path",
    ) -> DownloadResult:
        """Resolve a media URL and stream it to ``output_dir``.

        Filename priority: explicit ``filename``, then the URL basename, then
        ``runcomfy_<request_id>_<kind>``. Extensionless names get one from the
        response Content-Type.

        Returns:
            DownloadResult with saved path, size and MIME type

        Raises:
            ResolutionError: If no media URL can be determined
            RemoteServiceError: If the media host returns a non-success status
            FilesystemConflictError: If the target exists and overwrite is False
            ValueError: If filename contains path components
        """
        target_dir = pathlib.Path(output_dir).expanduser() if output_dir else self._default_output_dir
        if filename:
            validate_safe_path(target_dir, filename)

        media_url, detected_kind = await self.resolve_url(url, request_id, kind, index)

        async with self._http.stream("GET", media_url) as resp:
            if not resp.is_success:
                await resp.aread()
                raise RemoteServiceError(
                    f"Media download error: {resp.status_code} - {resp.text}",
                    status_code=resp.status_code,
                    body=resp.text,
                )

            declared_mime = parse_content_type(resp.headers.get("content-type"))
            name = (
                filename
                or filename_from_url(media_url)
                or synthesize_filename(request_id, kind or detected_kind)
            )
            name = with_extension(name, declared_mime)

            await anyio.to_thread.run_sync(lambda: target_dir.mkdir(parents=True, exist_ok=True))
            path = validate_safe_path(target_dir, name)
            check_not_symlink(target_dir / name, "Download target")
            size = await self._write_atomically(resp, path, overwrite)

        mime_type = declared_mime or mimetypes.guess_type(name)[0]
        logger.info("Wrote %s (%d bytes, %s)", path, size, mime_type)

        return {
            "ok": True,
            "url": media_url,
            "saved_path": str(path),
            "filename": name,
            "bytes": size,
            "mime_type": mime_type,
            "return_mode": return_mode,
            "request_id": request_id,
            "kind": kind or detected_kind,
        }
