# SPDX-License-Identifier: MIT
"""Curated short aliases for popular RunComfy models."""

# Popular video generation models on RunComfy
VIDEO_MODELS: dict[str, str] = {
    "wan-2.1": "wanai/wan-2-1/i2v-480p",
    "wan-2.1-720p": "wanai/wan-2-1/i2v-720p",
    "animatediff": "animatediff/animatediff-lightning",
    "svd": "stabilityai/stable-video-diffusion",
    "kling": "kling/kling-1-6/standard/image-to-video",
    "minimax": "minimax/video-01",
}

# Popular image generation/editing models on RunComfy
IMAGE_MODELS: dict[str, str] = {
    "flux-2-pro": "blackforestlabs/flux-2/pro/text-to-image",
    "flux-2-dev-edit": "blackforestlabs/flux-2/dev/edit",
    "flux-kontext-pro-edit": "blackforestlabs/flux-1-kontext/pro/edit",
    "qwen-edit-next-scene": "qwen/qwen-edit-2509/lora/next-scene",
}

DEFAULT_VIDEO_MODEL = "wan-2.1"
DEFAULT_IMAGE_MODEL = "flux-2-pro"
DEFAULT_EDIT_MODEL = "flux-2-dev-edit"


def resolve_model(model: str, aliases: dict[str, str]) -> str:
    """Map a short alias to its model_id; anything else is taken as a model_id."""
    return aliases.get(model, model)


def all_aliases() -> dict[str, dict[str, str]]:
    return {"video": dict(VIDEO_MODELS), "image": dict(IMAGE_MODELS)}
