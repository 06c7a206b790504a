# SPDX-License-Identifier: MIT
"""Tool descriptions for MCP server. Optimized for token efficiency."""

# ==================== GENERATION TOOL DESCRIPTIONS ====================

GENERATE_VIDEO = """Generate a video with a RunComfy model. Returns request_id (async). Poll runcomfy_check_status() until completed, then runcomfy_get_result() or runcomfy_download_media().

Params: prompt, model (model_id from runcomfy_list_models or alias: wan-2.1|wan-2.1-720p|kling|minimax|svd|animatediff), image_url (public HTTPS input image for image-to-video), duration (seconds), aspect_ratio (16:9|9:16|1:1), seed, inputs (model-specific extras)

Example: runcomfy_generate_video("a cat walking", model="kling", image_url="https://.../cat.png")"""

GENERATE_IMAGE = """Generate an image (text-to-image) with a RunComfy model. Returns request_id (async).

Params: prompt, model (model_id or alias: flux-2-pro), aspect_ratio, seed, inputs (model-specific extras; keys must match the model input schema)

Example: runcomfy_generate_image("sunset over dunes", model="flux-2-pro", aspect_ratio="16:9")"""

EDIT_IMAGE = """Edit an image (image-to-image) with a RunComfy model. Returns request_id (async).

Params: prompt, model (model_id or alias: flux-2-dev-edit|flux-kontext-pro-edit|qwen-edit-next-scene), image_url (single input), image_urls (multiple inputs; preferred when both given), aspect_ratio, seed, inputs

Example: runcomfy_edit_image("make it night", image_url="https://.../day.png")"""


# ==================== JOB TOOL DESCRIPTIONS ====================

CHECK_STATUS = """Poll a RunComfy request. Call repeatedly until status='completed' or 'cancelled'.

Returns: status (in_queue|in_progress|completed|cancelled) plus service metadata"""

GET_RESULT = """Get the result of a completed request. Media URLs are under output (image|video|images|videos).

Params: request_id"""

CANCEL = """Cancel a queued RunComfy request.

Params: request_id"""


# ==================== CATALOG TOOL DESCRIPTIONS ====================

LIST_MODELS = """List models available on RunComfy (scraped from the models page, cached) plus curated aliases.

Params: refresh (bypass cache)

Returns: models (model_id, author, object, task), aliases, cached, fetched_at_ms, last_error. On refresh failure the last good list is returned with a warning."""


# ==================== DOWNLOAD TOOL DESCRIPTIONS ====================

DOWNLOAD_MEDIA = """Download a generated image/video to local disk (RUNCOMFY_DOWNLOAD_PATH or output_dir).

Params: url (direct media URL) OR request_id (completed request), kind (image|video filter), index (0-based among matches), output_dir, filename, overwrite (default false), return_mode (path|resource_link|embedded)

Example: runcomfy_download_media(request_id="...", kind="image", index=0)"""
