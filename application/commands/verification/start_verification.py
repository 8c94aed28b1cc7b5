"""开始验证命令"""

import logging
from dataclasses import dataclass
from typing import Optional

from domain.common.exceptions import InvalidValueObjectException
from domain.verification.services.verification_api import (
    StartVerificationResult,
    VerificationApi,
)
from domain.verification.value_objects.api_error import ApiError
from domain.verification.value_objects.verification_method import VerificationMethod
from domain.verification.value_objects.verification_request import VerificationRequest


@dataclass
class StartVerificationCommand:
    """开始验证命令

    Attributes:
        country_code: ISO 国家代码（如 "gb"）
        redirect_url: 回调地址，为空时使用配置的默认回调地址
        business_settings_id: 业务配置 ID
        external_user_id: 调用方用户标识
        method: 验证方式字符串，为空时使用配置的默认方式
        webhook: 服务端回调地址
        email: 用户邮箱（stealth 模式必填）
        stealth: 是否启用 stealth 模式
    """

    country_code: str
    redirect_url: Optional[str] = None
    business_settings_id: Optional[str] = None
    external_user_id: Optional[str] = None
    method: Optional[str] = None
    webhook: Optional[str] = None
    email: Optional[str] = None
    stealth: bool = False


class StartVerificationHandler:
    """开始验证处理器

    处理开始验证命令：
    1. 用配置补全回调地址与验证方式
    2. 解析验证方式（无法识别时不发起请求）
    3. 调用服务商 API 创建验证会话
    """

    def __init__(
        self,
        api: VerificationApi,
        default_redirect_url: str = "",
        default_method: str = "",
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化处理器

        Args:
            api: 服务商 API 客户端
            default_redirect_url: 默认回调地址
            default_method: 默认验证方式
            logger: 日志记录器
        """
        self._api = api
        self._default_redirect_url = default_redirect_url
        self._default_method = default_method
        self._logger = logger or logging.getLogger(__name__)

    def handle(self, command: StartVerificationCommand) -> StartVerificationResult:
        """
        处理开始验证命令

        Args:
            command: 开始验证命令

        Returns:
            StartVerificationResult 包含会话或错误
        """
        self._logger.info(
            f"Processing start verification: country={command.country_code}, "
            f"stealth={command.stealth}"
        )

        try:
            method = VerificationMethod.parse(command.method or self._default_method)
        except InvalidValueObjectException as e:
            self._logger.warning(f"Unsupported verification method: {e.value!r}")
            return StartVerificationResult.fail(ApiError.invalid_input(e.reason))

        request = VerificationRequest(
            country_code=(command.country_code or "").strip().lower(),
            redirect_url=command.redirect_url or self._default_redirect_url,
            business_settings_id=command.business_settings_id,
            external_user_id=command.external_user_id,
            method=method,
            webhook=command.webhook,
            email=command.email,
            stealth=command.stealth,
        )
        return self._api.start_verification(request)
