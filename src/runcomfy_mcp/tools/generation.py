# SPDX-License-Identifier: MIT
"""Generation tools: submit video, image, and image-edit jobs.

Each tool resolves a model alias, builds the request body, and returns the
submission payload (with ``request_id``) immediately. Jobs run remotely;
use the job tools to follow them.
"""

from typing import Any

from ..aliases import (
    DEFAULT_EDIT_MODEL,
    DEFAULT_IMAGE_MODEL,
    DEFAULT_VIDEO_MODEL,
    IMAGE_MODELS,
    VIDEO_MODELS,
    resolve_model,
)
from ..config import get_client


def _options(inputs: dict[str, Any] | None, **explicit: Any) -> dict[str, Any]:
    """Merge model-specific ``inputs`` with explicit arguments; unset arguments are not sent."""
    options = dict(inputs) if isinstance(inputs, dict) else {}
    options.update({k: v for k, v in explicit.items() if v is not None})
    return options


async def generate_video(
    prompt: str,
    model: str = DEFAULT_VIDEO_MODEL,
    image_url: str | None = None,
    duration: float | None = None,
    aspect_ratio: str | None = None,
    seed: int | None = None,
    inputs: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Submit a video generation job.

    Args:
        prompt: Text description of the video
        model: Alias (e.g. "wan-2.1", "kling") or full model_id
        image_url: Public HTTPS input image for image-to-video models
        duration: Video duration in seconds (model dependent)
        aspect_ratio: e.g. "16:9", "9:16", "1:1"
        seed: Random seed for reproducibility
        inputs: Extra model-specific inputs

    Returns:
        Submission payload with request_id

    Raises:
        ConfigurationError: If RUNCOMFY_API_KEY is not set
        RemoteServiceError: If the API rejects the request
    """
    model_id = resolve_model(model, VIDEO_MODELS)
    options = _options(inputs, image_url=image_url, duration=duration, aspect_ratio=aspect_ratio, seed=seed)
    return await get_client().generate_video(model_id, prompt, **options)


async def generate_image(
    prompt: str,
    model: str = DEFAULT_IMAGE_MODEL,
    aspect_ratio: str | None = None,
    seed: int | None = None,
    inputs: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Submit a text-to-image job.

    Args:
        prompt: Text description of the image
        model: Alias (e.g. "flux-2-pro") or full model_id
        aspect_ratio: e.g. "16:9", "9:16", "1:1"
        seed: Random seed for reproducibility
        inputs: Extra model-specific inputs

    Returns:
        Submission payload with request_id
    """
    model_id = resolve_model(model, IMAGE_MODELS)
    options = _options(inputs, aspect_ratio=aspect_ratio, seed=seed)
    return await get_client().generate_image(model_id, prompt, **options)


async def edit_image(
    prompt: str,
    model: str = DEFAULT_EDIT_MODEL,
    image_url: str | None = None,
    image_urls: list[str] | None = None,
    seed: int | None = None,
    aspect_ratio: str | None = None,
    inputs: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Submit an image-to-image edit job.

    ``image_urls`` wins over ``image_url`` when it is non-empty; models accept
    one or the other.

    Returns:
        Submission payload with request_id
    """
    model_id = resolve_model(model, IMAGE_MODELS)
    body: dict[str, Any] = {"prompt": prompt, **_options(inputs, aspect_ratio=aspect_ratio, seed=seed)}

    if image_urls:
        body["image_urls"] = list(image_urls)
    elif image_url:
        body["image_url"] = image_url

    return await get_client().run_model(model_id, body)
