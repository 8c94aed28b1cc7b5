"""验证状态值对象"""

from enum import Enum
from typing import Any


class VerificationStatus(str, Enum):
    """验证会话状态

    状态值由服务商返回，客户端只负责反映服务端最后一次报告的值。

    Attributes:
        STARTED: 已创建 - 用户尚未开始验证
        PENDING: 进行中 - 用户已开始但未完成
        APPROVED: 已通过 - 唯一的成功状态
        FAILED: 未通过
        EXPIRED: 已过期 - 验证链接生成后超过 5 天
        UNKNOWN: 未知 - 无法识别的状态值（向前兼容）
    """

    STARTED = "started"
    PENDING = "pending"
    APPROVED = "approved"
    FAILED = "failed"
    EXPIRED = "expired"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Any) -> "VerificationStatus":
        """从服务端返回值解析状态

        无法识别的值（包括非字符串）一律返回 UNKNOWN，不抛出异常。

        Args:
            value: 服务端返回的 verification_status

        Returns:
            对应的 VerificationStatus
        """
        if not isinstance(value, str):
            return cls.UNKNOWN
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_terminal(self) -> bool:
        """是否处于终态（已通过、未通过或已过期）"""
        return self in (
            VerificationStatus.APPROVED,
            VerificationStatus.FAILED,
            VerificationStatus.EXPIRED,
        )

    @property
    def is_success(self) -> bool:
        """是否验证成功"""
        return self == VerificationStatus.APPROVED

    @property
    def description(self) -> str:
        """面向用户的状态描述"""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    VerificationStatus.STARTED: "Verification not started",
    VerificationStatus.PENDING: "Verification in progress",
    VerificationStatus.APPROVED: "Verification approved",
    VerificationStatus.FAILED: "Verification failed",
    VerificationStatus.EXPIRED: "Verification link expired",
    VerificationStatus.UNKNOWN: "Unknown status",
}
