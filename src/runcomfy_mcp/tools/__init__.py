# SPDX-License-Identifier: MIT
"""MCP tools for RunComfy generation, job tracking, catalog and downloads.

This package contains the FastMCP tool implementations organized by category:
- generation: submit video, image and image-edit jobs
- jobs: check status, fetch result, cancel
- models: scraped model catalog with aliases
- media: download generated media to local disk

Tools are registered with FastMCP in ``server.py``.
"""
