"""构建托管授权页地址 Handler"""

import logging
from dataclasses import dataclass
from typing import Optional

from application.queries.verification.authorize_url import AuthorizeUrlQuery
from domain.common.exceptions import InvalidValueObjectException
from domain.verification.services.verification_api import VerificationApi
from domain.verification.value_objects.api_error import ApiError
from domain.verification.value_objects.verification_method import VerificationMethod


@dataclass
class AuthorizeUrlResult:
    """构建结果

    Attributes:
        success: 是否成功
        url: 授权页地址
        error: 错误信息
    """

    success: bool
    url: Optional[str] = None
    error: Optional[ApiError] = None


class AuthorizeUrlHandler:
    """构建托管授权页地址 Handler

    与开始验证使用相同的默认回调地址和默认验证方式。
    """

    def __init__(
        self,
        api: VerificationApi,
        default_redirect_url: str = "",
        default_method: str = "",
        logger: Optional[logging.Logger] = None,
    ):
        self._api = api
        self._default_redirect_url = default_redirect_url
        self._default_method = default_method
        self._logger = logger or logging.getLogger(__name__)

    def handle(self, query: AuthorizeUrlQuery) -> AuthorizeUrlResult:
        """处理查询请求

        Args:
            query: 查询对象

        Returns:
            AuthorizeUrlResult 包含地址或 invalid_input 错误
        """
        country_code = (query.country_code or "").strip().lower()
        redirect_url = query.redirect_url or self._default_redirect_url

        missing = [
            name
            for name, value in (("country", country_code), ("redirect_url", redirect_url))
            if not value
        ]
        if missing:
            return AuthorizeUrlResult(
                success=False,
                error=ApiError.invalid_input(f"Missing required fields: {', '.join(missing)}"),
            )

        try:
            method = VerificationMethod.parse(query.method or self._default_method)
        except InvalidValueObjectException as e:
            self._logger.warning(f"Unsupported verification method: {e.value!r}")
            return AuthorizeUrlResult(success=False, error=ApiError.invalid_input(e.reason))

        url = self._api.build_authorize_url(
            country_code=country_code,
            redirect_url=redirect_url,
            method=method,
            state=query.state,
        )
        return AuthorizeUrlResult(success=True, url=url)
