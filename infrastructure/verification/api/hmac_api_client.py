"""HMAC 签名的服务商 API 客户端实现"""

import logging
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote, urlencode

import httpx

from domain.verification.entities.verification_session import VerificationSession
from domain.verification.services.request_signer import RequestSigner
from domain.verification.services.verification_api import (
    CheckStatusResult,
    StartVerificationResult,
    VerificationApi,
)
from domain.verification.value_objects.api_error import ApiError
from domain.verification.value_objects.credentials import Credentials
from domain.verification.value_objects.verification_method import VerificationMethod
from domain.verification.value_objects.verification_request import VerificationRequest
from domain.verification.value_objects.verification_status import VerificationStatus


class HmacVerificationApiClient(VerificationApi):
    """服务商 API 客户端实现

    使用 httpx 发送请求，每个请求都带 HMAC-SHA256 签名：
    - POST /v2/auth/start 对请求体字节签名
    - GET /v2/verification/{id}/status 对请求路径签名

    不保存会话状态，不做自动重试，失败立即以结果值返回。

    Attributes:
        START_ENDPOINT: 开始验证端点
        STATUS_ENDPOINT: 查询状态端点模板
        AUTHORIZE_ENDPOINT: 托管授权页端点
        TIMEOUT: 默认请求超时时间（秒）
    """

    START_ENDPOINT: str = "/v2/auth/start"
    STATUS_ENDPOINT: str = "/v2/verification/{verification_id}/status"
    AUTHORIZE_ENDPOINT: str = "/oauth/authorize"
    CONTENT_TYPE: str = "application/json"
    TIMEOUT: float = 30.0

    def __init__(
        self,
        credentials: Credentials,
        base_url: str,
        timeout: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """初始化客户端

        Args:
            credentials: API 凭证
            base_url: 服务商 API 地址
            timeout: 请求超时时间（秒），默认 TIMEOUT
            logger: 日志记录器（可选）
        """
        self._credentials = credentials
        self._signer = RequestSigner(credentials)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else self.TIMEOUT
        self._logger = logger or logging.getLogger(__name__)

    # ============ 公开操作 ============

    def start_verification(self, request: VerificationRequest) -> StartVerificationResult:
        """开始一次验证

        请求体按规范 JSON 编码，签名与发送使用同一份字节。

        Args:
            request: 开始验证请求

        Returns:
            StartVerificationResult 包含会话或错误
        """
        if not self._credentials.is_complete:
            self._logger.warning("Start verification rejected: API credentials missing")
            return StartVerificationResult.fail(
                ApiError.invalid_input("API credentials are not configured")
            )

        if not self.base_url:
            self._logger.warning("Start verification rejected: API base URL missing")
            return StartVerificationResult.fail(
                ApiError.invalid_input("API base URL is not configured")
            )

        missing = request.missing_fields()
        if missing:
            self._logger.warning(
                f"Start verification rejected: missing fields {', '.join(missing)}"
            )
            return StartVerificationResult.fail(
                ApiError.invalid_input(f"Missing required fields: {', '.join(missing)}")
            )

        body = request.to_body()
        url = f"{self.base_url}{self.START_ENDPOINT}"
        self._logger.info(
            f"POST {self.START_ENDPOINT} country={request.country_code} "
            f"method={request.method.value if request.method else '-'}"
        )
        self._logger.debug(f"Authorization: {self._signer.masked_authorization(body)}")

        try:
            response = httpx.post(
                url,
                content=body,
                headers=self._headers(body),
                timeout=self.timeout,
            )
        except httpx.TimeoutException:
            self._logger.warning(f"Start verification timeout: {url}")
            return StartVerificationResult.fail(ApiError.request_failed("Request timeout"))
        except httpx.RequestError as e:
            self._logger.warning(f"Start verification error: {url} - {e}")
            return StartVerificationResult.fail(
                ApiError.request_failed(f"Request error: {str(e)}")
            )

        data, error = self._parse_response(response)
        if error is not None:
            return StartVerificationResult.fail(error)

        verification_url = data.get("start_verification_url")
        verification_id = data.get("verification_id")
        status_value = data.get("verification_status")
        if not (
            _is_non_empty_str(verification_url)
            and _is_non_empty_str(verification_id)
            and isinstance(status_value, str)
        ):
            return StartVerificationResult.fail(
                self._invalid_format(response, data)
            )

        session = VerificationSession(
            verification_id=verification_id,
            verification_url=verification_url,
            status=VerificationStatus.parse(status_value),
        )
        self._logger.info(
            f"Verification started: verification_id={session.verification_id}, "
            f"status={session.status.value}"
        )
        return StartVerificationResult.ok(session)

    def check_status(self, verification_id: str) -> CheckStatusResult:
        """查询验证状态

        签名输入是请求路径字符串本身（如 /v2/verification/abc123/status），
        而不是空请求体，也不是单独的 ID。

        Args:
            verification_id: 验证会话 ID

        Returns:
            CheckStatusResult 包含状态或错误
        """
        if not self._credentials.is_complete:
            self._logger.warning("Status check rejected: API credentials missing")
            return CheckStatusResult.fail(
                ApiError.invalid_input("API credentials are not configured")
            )

        if not self.base_url:
            self._logger.warning("Status check rejected: API base URL missing")
            return CheckStatusResult.fail(
                ApiError.invalid_input("API base URL is not configured")
            )

        if not verification_id:
            self._logger.warning("Status check rejected: empty verification_id")
            return CheckStatusResult.fail(
                ApiError.invalid_input("Missing required fields: verification_id")
            )

        path = self.status_path(verification_id)
        url = f"{self.base_url}{path}"
        self._logger.info(f"GET {path}")
        self._logger.debug(f"Authorization: {self._signer.masked_authorization(path)}")

        try:
            response = httpx.get(
                url,
                headers=self._headers(path),
                timeout=self.timeout,
            )
        except httpx.TimeoutException:
            self._logger.warning(f"Status check timeout: {url}")
            return CheckStatusResult.fail(ApiError.request_failed("Request timeout"))
        except httpx.RequestError as e:
            self._logger.warning(f"Status check error: {url} - {e}")
            return CheckStatusResult.fail(
                ApiError.request_failed(f"Request error: {str(e)}")
            )

        data, error = self._parse_response(response)
        if error is not None:
            return CheckStatusResult.fail(error)

        status_value = data.get("verification_status")
        if not isinstance(status_value, str):
            return CheckStatusResult.fail(self._invalid_format(response, data))

        status = VerificationStatus.parse(status_value)
        self._logger.info(
            f"Verification status: verification_id={verification_id}, "
            f"status={status.value}"
        )
        return CheckStatusResult.ok(status)

    def build_authorize_url(
        self,
        country_code: str,
        redirect_url: str,
        method: Optional[VerificationMethod] = None,
        state: str = "xyz",
    ) -> str:
        """构建托管授权页地址

        直接在内嵌浏览器中打开的 OAuth 风格入口，不发起网络请求。

        Args:
            country_code: 国家代码
            redirect_url: 回调地址
            method: 验证方式（可选，为空时由服务商页面选择）
            state: 透传的 state 参数

        Returns:
            完整的授权页 URL
        """
        query = urlencode(
            [
                ("client_id", self._credentials.api_key),
                ("country", country_code),
                ("method", method.value if method else ""),
                ("redirect_uri", redirect_url),
                ("response_type", "code"),
                ("scope", "adult"),
                ("state", state),
                ("sdk", "1"),
            ]
        )
        return f"{self.base_url}{self.AUTHORIZE_ENDPOINT}?{query}"

    @classmethod
    def status_path(cls, verification_id: str) -> str:
        """查询状态的请求路径（同时是 GET 请求的签名输入）"""
        return cls.STATUS_ENDPOINT.format(verification_id=quote(verification_id, safe=""))

    # ============ 内部方法 ============

    def _headers(self, signing_input: Any) -> Dict[str, str]:
        return {
            "Content-Type": self.CONTENT_TYPE,
            "Authorization": self._signer.authorization(signing_input),
        }

    def _parse_response(
        self, response: httpx.Response
    ) -> Tuple[Dict[str, Any], Optional[ApiError]]:
        """解析响应

        Returns:
            (JSON 对象, None) 或 ({}, ApiError)
        """
        status_code = response.status_code
        data = _json_object(response)

        if not 200 <= status_code < 300:
            server_message = data.get("error") if data else None
            message = (
                server_message
                if _is_non_empty_str(server_message)
                else f"HTTP {status_code}"
            )
            self._logger.warning(
                f"Provider returned HTTP {status_code}: {message}"
            )
            return {}, ApiError.server_error(
                message, status_code=status_code, body=response.text
            )

        if data is None:
            return {}, self._invalid_format(response, None)

        return data, None

    def _invalid_format(
        self, response: httpx.Response, data: Optional[Dict[str, Any]]
    ) -> ApiError:
        """2xx 但缺少字段或无法解析"""
        server_message = data.get("error") if data else None
        if _is_non_empty_str(server_message):
            message = server_message
        else:
            message = f"Invalid response format: {response.text}"
        self._logger.error(
            f"Provider returned unexpected payload (HTTP {response.status_code}): {message}"
        )
        return ApiError.server_error(
            message, status_code=response.status_code, body=response.text
        )


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def _json_object(response: httpx.Response) -> Optional[Dict[str, Any]]:
    """读取响应 JSON 对象，非对象或无法解析时返回 None"""
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    return data
