# SPDX-License-Identifier: MIT
"""runcomfy-mcp: MCP server for RunComfy video and image generation."""

__version__ = "1.0.0"
