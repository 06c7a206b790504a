# SPDX-License-Identifier: MIT
"""Integration tests for generation and job tools with a mocked API client."""

import pytest

from runcomfy_mcp.tools.generation import edit_image, generate_image, generate_video
from runcomfy_mcp.tools.jobs import cancel, check_status, get_result

SUBMITTED = {"request_id": "req_123", "status": "in_queue"}


@pytest.fixture
def mock_client(mocker):
    mock_get_client = mocker.patch("runcomfy_mcp.tools.generation.get_client")
    client = mock_get_client.return_value
    client.generate_video = mocker.AsyncMock(return_value=SUBMITTED)
    client.generate_image = mocker.AsyncMock(return_value=SUBMITTED)
    client.run_model = mocker.AsyncMock(return_value=SUBMITTED)
    return client


@pytest.mark.integration
class TestGenerateVideo:
    async def test_default_alias_resolved(self, mock_client):
        result = await generate_video(prompt="a cat walking")

        assert result["request_id"] == "req_123"
        mock_client.generate_video.assert_called_once_with("wanai/wan-2-1/i2v-480p", "a cat walking")

    async def test_options_forwarded(self, mock_client):
        await generate_video(
            prompt="waves",
            model="kling",
            image_url="https://example.com/beach.png",
            duration=5,
            aspect_ratio="16:9",
            seed=0,
        )

        mock_client.generate_video.assert_called_once_with(
            "kling/kling-1-6/standard/image-to-video",
            "waves",
            image_url="https://example.com/beach.png",
            duration=5,
            aspect_ratio="16:9",
            seed=0,
        )

    async def test_unknown_model_passes_through(self, mock_client):
        await generate_video(prompt="x", model="someone/new-model/v2")

        assert mock_client.generate_video.call_args.args[0] == "someone/new-model/v2"


@pytest.mark.integration
class TestGenerateImage:
    async def test_inputs_merged_and_overridden(self, mock_client):
        await generate_image(
            prompt="sunset",
            aspect_ratio="1:1",
            inputs={"num_inference_steps": 28, "aspect_ratio": "4:3"},
        )

        mock_client.generate_image.assert_called_once_with(
            "blackforestlabs/flux-2/pro/text-to-image",
            "sunset",
            num_inference_steps=28,
            aspect_ratio="1:1",
        )


@pytest.mark.integration
class TestEditImage:
    async def test_image_urls_preferred(self, mock_client):
        await edit_image(
            prompt="make it night",
            image_url="https://example.com/one.png",
            image_urls=["https://example.com/a.png", "https://example.com/b.png"],
        )

        mock_client.run_model.assert_called_once_with(
            "blackforestlabs/flux-2/dev/edit",
            {"prompt": "make it night", "image_urls": ["https://example.com/a.png", "https://example.com/b.png"]},
        )

    async def test_single_image_url(self, mock_client):
        await edit_image(
            prompt="add a hat",
            model="flux-kontext-pro-edit",
            image_url="https://example.com/one.png",
            image_urls=[],
            seed=42,
        )

        mock_client.run_model.assert_called_once_with(
            "blackforestlabs/flux-1-kontext/pro/edit",
            {"prompt": "add a hat", "seed": 42, "image_url": "https://example.com/one.png"},
        )


@pytest.mark.integration
class TestJobTools:
    @pytest.fixture
    def job_client(self, mocker):
        mock_get_client = mocker.patch("runcomfy_mcp.tools.jobs.get_client")
        client = mock_get_client.return_value
        client.check_status = mocker.AsyncMock(return_value={"status": "in_progress"})
        client.get_result = mocker.AsyncMock(return_value={"output": {"images": ["https://cdn.example.com/a.png"]}})
        client.cancel = mocker.AsyncMock(return_value={"status": "cancelled"})
        return client

    async def test_check_status(self, job_client):
        result = await check_status("req_123")

        assert result["status"] == "in_progress"
        job_client.check_status.assert_called_once_with("req_123")

    async def test_get_result(self, job_client):
        result = await get_result("req_123")

        assert result["output"]["images"] == ["https://cdn.example.com/a.png"]
        job_client.get_result.assert_called_once_with("req_123")

    async def test_cancel(self, job_client):
        result = await cancel("req_123")

        assert result["status"] == "cancelled"
        job_client.cancel.assert_called_once_with("req_123")
