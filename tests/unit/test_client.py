# SPDX-License-Identifier: MIT
"""Unit tests for RunComfyClient with a mocked transport."""

import json

import httpx
import pytest

from runcomfy_mcp.client import RunComfyClient
from runcomfy_mcp.exceptions import ConfigurationError, RemoteServiceError

BASE_URL = "https://model-api.runcomfy.net"


def _ok(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"request_id": "req_123", "status": "in_queue"})


@pytest.mark.unit
class TestMissingCredential:
    @pytest.mark.parametrize(
        ("operation", "args"),
        [
            ("run_model", ("wanai/wan-2-1/i2v-480p", {"prompt": "x"})),
            ("generate_video", ("wanai/wan-2-1/i2v-480p", "x")),
            ("generate_image", ("blackforestlabs/flux-2/pro/text-to-image", "x")),
            ("check_status", ("req_123",)),
            ("get_result", ("req_123",)),
            ("cancel", ("req_123",)),
        ],
    )
    async def test_raises_before_network(self, mock_http, operation, args):
        http, requests = mock_http(_ok)
        client = RunComfyClient(api_key=None, base_url=BASE_URL, http_client=http)

        with pytest.raises(ConfigurationError, match="RUNCOMFY_API_KEY"):
            await getattr(client, operation)(*args)

        assert requests == []

    def test_has_credentials(self, mock_http):
        http, _ = mock_http(_ok)

        assert RunComfyClient("", BASE_URL, http).has_credentials is False
        assert RunComfyClient("key", BASE_URL, http).has_credentials is True


@pytest.mark.unit
class TestRequests:
    @pytest.fixture
    def client_and_requests(self, mock_http):
        http, requests = mock_http(_ok)
        return RunComfyClient(api_key="rc_test_key", base_url=BASE_URL + "/", http_client=http), requests

    async def test_run_model_posts_body(self, client_and_requests):
        client, requests = client_and_requests

        result = await client.run_model("wanai/wan-2-1/i2v-480p", {"prompt": "a cat", "seed": 7})

        assert result["request_id"] == "req_123"
        req = requests[0]
        assert req.method == "POST"
        assert req.url == f"{BASE_URL}/v1/models/wanai/wan-2-1/i2v-480p"
        assert req.headers["Authorization"] == "Bearer rc_test_key"
        assert req.headers["Content-Type"] == "application/json"
        assert json.loads(req.content) == {"prompt": "a cat", "seed": 7}

    async def test_generate_video_merges_prompt_and_options(self, client_and_requests):
        client, requests = client_and_requests

        await client.generate_video("minimax/video-01", "waves", duration=5, aspect_ratio="16:9")

        assert json.loads(requests[0].content) == {"prompt": "waves", "duration": 5, "aspect_ratio": "16:9"}

    @pytest.mark.parametrize(
        ("operation", "method", "path"),
        [
            ("check_status", "GET", "/v1/requests/req_123/status"),
            ("get_result", "GET", "/v1/requests/req_123/result"),
            ("cancel", "POST", "/v1/requests/req_123/cancel"),
        ],
    )
    async def test_job_endpoints(self, client_and_requests, operation, method, path):
        client, requests = client_and_requests

        await getattr(client, operation)("req_123")

        assert requests[0].method == method
        assert requests[0].url == BASE_URL + path
        assert requests[0].headers["Authorization"] == "Bearer rc_test_key"

    async def test_error_status_raises_with_body(self, mock_http):
        http, requests = mock_http(lambda r: httpx.Response(401, text="invalid api key"))
        client = RunComfyClient(api_key="bad", base_url=BASE_URL, http_client=http)

        with pytest.raises(RemoteServiceError) as exc_info:
            await client.check_status("req_123")

        assert str(exc_info.value) == "RunComfy API error: 401 - invalid api key"
        assert exc_info.value.status_code == 401
        assert exc_info.value.body == "invalid api key"
        assert len(requests) == 1

    async def test_no_retry_on_server_error(self, mock_http):
        http, requests = mock_http(lambda r: httpx.Response(502, text="bad gateway"))
        client = RunComfyClient(api_key="key", base_url=BASE_URL, http_client=http)

        with pytest.raises(RemoteServiceError):
            await client.run_model("a/b", {"prompt": "x"})

        assert len(requests) == 1
