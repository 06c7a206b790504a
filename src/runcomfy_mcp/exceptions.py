# SPDX-License-Identifier: MIT
"""Exception hierarchy for runcomfy-mcp.

Components raise these; FastMCP turns anything raised inside a tool into an
error result, so no tool catches them.
"""


class RunComfyError(Exception):
    """Base class for all runcomfy-mcp errors."""


class ConfigurationError(RunComfyError):
    """A required setting is missing or malformed (e.g. no API key)."""


class RemoteServiceError(RunComfyError):
    """The Model API, the catalog page, or a media host returned a non-success status."""

    def __init__(self, message: str, status_code: int, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ExtractionError(RunComfyError):
    """The catalog page yielded no model descriptors."""


class ResolutionError(RunComfyError):
    """No media URL could be determined for a download."""


class FilesystemConflictError(RunComfyError):
    """The download target already exists and overwrite was not requested."""
