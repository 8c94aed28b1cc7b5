"""验证服务商 API 接口"""

from dataclasses import dataclass
from typing import Optional, Protocol

from domain.verification.entities.verification_session import VerificationSession
from domain.verification.value_objects.api_error import ApiError
from domain.verification.value_objects.verification_method import VerificationMethod
from domain.verification.value_objects.verification_request import VerificationRequest
from domain.verification.value_objects.verification_status import VerificationStatus


@dataclass
class StartVerificationResult:
    """开始验证结果

    Attributes:
        success: 是否成功
        session: 创建的验证会话（成功时有值）
        error: 错误信息（失败时有值）
    """

    success: bool
    session: Optional[VerificationSession] = None
    error: Optional[ApiError] = None

    @classmethod
    def ok(cls, session: VerificationSession) -> "StartVerificationResult":
        return cls(success=True, session=session)

    @classmethod
    def fail(cls, error: ApiError) -> "StartVerificationResult":
        return cls(success=False, error=error)


@dataclass
class CheckStatusResult:
    """查询状态结果

    Attributes:
        success: 请求是否成功（与验证是否通过无关）
        status: 服务端报告的状态（成功时有值）
        error: 错误信息（失败时有值）
    """

    success: bool
    status: Optional[VerificationStatus] = None
    error: Optional[ApiError] = None

    @classmethod
    def ok(cls, status: VerificationStatus) -> "CheckStatusResult":
        return cls(success=True, status=status)

    @classmethod
    def fail(cls, error: ApiError) -> "CheckStatusResult":
        return cls(success=False, error=error)

    @property
    def is_success(self) -> bool:
        """请求成功且验证已通过"""
        return self.success and self.status is not None and self.status.is_success


class VerificationApi(Protocol):
    """验证服务商 API 接口

    定义开始验证与查询状态两个远程操作，以及托管授权页地址的构建。
    实现类不保存会话状态，不做自动重试，所有错误以结果值返回。
    """

    def start_verification(self, request: VerificationRequest) -> StartVerificationResult:
        """开始一次验证

        Args:
            request: 开始验证请求

        Returns:
            StartVerificationResult 包含会话或错误
        """
        ...

    def check_status(self, verification_id: str) -> CheckStatusResult:
        """查询验证状态

        Args:
            verification_id: 验证会话 ID

        Returns:
            CheckStatusResult 包含状态或错误
        """
        ...

    def build_authorize_url(
        self,
        country_code: str,
        redirect_url: str,
        method: Optional[VerificationMethod] = None,
        state: str = "xyz",
    ) -> str:
        """构建托管授权页地址（不发起网络请求）"""
        ...


class ExternalUrlOpener(Protocol):
    """外部 URL 打开能力（由宿主平台提供）"""

    def open(self, url: str) -> bool:
        """打开 URL，返回是否成功"""
        ...
