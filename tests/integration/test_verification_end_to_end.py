"""验证流程端到端集成测试

使用真实容器装配，只替换 httpx 传输层：
- 开始验证 -> 导航 -> 命中回调 -> 查询状态
- HTTP 接口全链路
"""

import hashlib
import hmac
import json

import pytest
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from application.verification.services.verification_flow_service import VerificationFlowState
from domain.verification.value_objects.verification_request import VerificationRequest
from domain.verification.value_objects.verification_status import VerificationStatus
from infrastructure.config.settings import Settings
from infrastructure.containers import bootstrap
from interfaces.api.app import create_app

CALLBACK = "https://cb.test/done"
SECRET = "s3cr3t"


def _response(status_code, payload):
    response = MagicMock()
    response.status_code = status_code
    response.text = json.dumps(payload)
    response.json.return_value = payload
    return response


@pytest.fixture
def settings() -> Settings:
    return Settings(
        app_env="test",
        vma_api_key="key-1",
        vma_api_secret=SECRET,
        vma_base_url="https://api.test",
        vma_redirect_url=CALLBACK,
    )


@pytest.fixture
def mock_transport():
    with patch("infrastructure.verification.api.hmac_api_client.httpx.post") as mock_post, \
            patch("infrastructure.verification.api.hmac_api_client.httpx.get") as mock_get:
        mock_post.return_value = _response(200, {
            "start_verification_url": "https://v.test/flow/1",
            "verification_id": "v1",
            "verification_status": "started",
        })
        mock_get.return_value = _response(200, {"verification_status": "approved"})
        yield mock_post, mock_get


class TestVerificationFlowEndToEnd:
    """VerificationFlow 全流程"""

    def test_approved_flow(self, settings, mock_transport):
        mock_post, mock_get = mock_transport
        flow = bootstrap(settings).app.verification_flow()

        result = flow.start(VerificationRequest(country_code="gb", redirect_url=CALLBACK))
        assert result.session.verification_id == "v1"
        assert result.session.status == VerificationStatus.STARTED

        assert flow.on_navigation("https://v.test/flow/1").should_continue_navigation is True
        assert flow.on_navigation(f"{CALLBACK}?ok=1").should_continue_navigation is False
        mock_get.assert_not_called()

        status = flow.finish()

        assert status.status == VerificationStatus.APPROVED
        assert status.is_success is True
        assert flow.state == VerificationFlowState.COMPLETED
        assert flow.is_approved is True

    def test_requests_are_signed(self, settings, mock_transport):
        mock_post, mock_get = mock_transport
        flow = bootstrap(settings).app.verification_flow()

        flow.start(VerificationRequest(country_code="gb", redirect_url=CALLBACK))
        flow.on_navigation(CALLBACK)
        flow.finish()

        post_kwargs = mock_post.call_args.kwargs
        body = post_kwargs["content"]
        assert mock_post.call_args.args[0] == "https://api.test/v2/auth/start"
        assert json.loads(body) == {"country": "gb", "redirect_url": CALLBACK}
        expected = hmac.new(SECRET.encode(), body, hashlib.sha256).hexdigest()
        assert post_kwargs["headers"]["Authorization"] == f"hmac key-1:{expected}"

        path = "/v2/verification/v1/status"
        assert mock_get.call_args.args[0] == f"https://api.test{path}"
        expected = hmac.new(SECRET.encode(), path.encode(), hashlib.sha256).hexdigest()
        assert mock_get.call_args.kwargs["headers"]["Authorization"] == f"hmac key-1:{expected}"


class TestHttpEndToEnd:
    """HTTP 接口全链路"""

    def test_start_classify_and_check(self, settings, mock_transport):
        client = TestClient(create_app(settings))

        started = client.post("/api/v1/verifications", json={"country": "GB"})
        assert started.status_code == 201
        assert started.json()["verification_id"] == "v1"

        decision = client.post(
            "/api/v1/navigation/classify",
            json={"url": f"{CALLBACK}?verification_id=v1"},
        ).json()
        assert decision["is_redirect"] is True
        assert decision["verification_id"] == "v1"

        status = client.get("/api/v1/verifications/v1/status")
        assert status.status_code == 200
        assert status.json()["is_success"] is True

    def test_authorize_url(self, settings, mock_transport):
        """测试托管授权页地址使用配置的凭证与回调地址，不请求服务商"""
        mock_post, mock_get = mock_transport
        client = TestClient(create_app(settings))

        response = client.post("/api/v1/verifications/authorize-url", json={"country": "GB"})

        assert response.status_code == 200
        assert response.json()["authorize_url"] == (
            "https://api.test/oauth/authorize?client_id=key-1&country=gb"
            "&method=&redirect_uri=https%3A%2F%2Fcb.test%2Fdone"
            "&response_type=code&scope=adult&state=xyz&sdk=1"
        )
        mock_post.assert_not_called()
        mock_get.assert_not_called()

    def test_health(self, settings):
        client = TestClient(create_app(settings))

        assert client.get("/health").json() == {"status": "healthy"}

    def test_missing_credentials_returns_422(self, mock_transport):
        mock_post, _ = mock_transport
        client = TestClient(create_app(Settings(
            app_env="test", vma_api_key="", vma_api_secret="", vma_redirect_url=CALLBACK,
        )))

        response = client.post("/api/v1/verifications", json={"country": "gb"})

        assert response.status_code == 422
        assert response.json()["kind"] == "invalid_input"
        mock_post.assert_not_called()
