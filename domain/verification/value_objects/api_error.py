"""API 错误值对象"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException


class ApiErrorKind(str, Enum):
    """API 错误类型

    Attributes:
        INVALID_INPUT: 本地前置条件失败（凭证或必填字段缺失），未发起网络请求
        REQUEST_FAILED: 传输层失败（DNS、TLS、超时、连接重置）
        SERVER_ERROR: 非 2xx 响应，或 2xx 响应体无法解析/缺少字段
    """

    INVALID_INPUT = "invalid_input"
    REQUEST_FAILED = "request_failed"
    SERVER_ERROR = "server_error"


@dataclass(frozen=True)
class ApiError(BaseValueObject):
    """API 调用错误

    Attributes:
        kind: 错误类型
        message: 错误信息
        status_code: HTTP 状态码（如果有响应）
        body: 原始响应体（用于诊断）
    """

    kind: ApiErrorKind
    message: str
    status_code: Optional[int] = None
    body: Optional[str] = None

    def validate(self) -> None:
        """验证错误信息有效性"""
        if not isinstance(self.kind, ApiErrorKind):
            raise InvalidValueObjectException(
                value_object_type="ApiError",
                value=self.kind,
                reason="kind must be an ApiErrorKind",
            )
        if not self.message:
            raise InvalidValueObjectException(
                value_object_type="ApiError",
                value=self.message,
                reason="Message cannot be empty",
            )

    @classmethod
    def invalid_input(cls, message: str) -> "ApiError":
        return cls(kind=ApiErrorKind.INVALID_INPUT, message=message)

    @classmethod
    def request_failed(cls, message: str) -> "ApiError":
        return cls(kind=ApiErrorKind.REQUEST_FAILED, message=message)

    @classmethod
    def server_error(
        cls,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> "ApiError":
        return cls(
            kind=ApiErrorKind.SERVER_ERROR,
            message=message,
            status_code=status_code,
            body=body,
        )

    @property
    def description(self) -> str:
        """面向用户的错误描述"""
        if self.kind == ApiErrorKind.INVALID_INPUT:
            return f"Invalid input: {self.message}"
        if self.kind == ApiErrorKind.REQUEST_FAILED:
            return f"Verification request failed: {self.message}"
        return f"Server error: {self.message}"
