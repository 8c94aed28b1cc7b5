"""验证会话实体"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from domain.common.exceptions import InvalidOperationException
from domain.verification.value_objects.verification_status import VerificationStatus


@dataclass(eq=False)
class VerificationSession:
    """验证会话实体

    服务商侧的一次年龄验证尝试，由 start_verification 创建。
    verification_id 与 verification_url 创建后不可修改；
    status 只能通过 refresh() 以显式查询结果更新（无推送）。

    Attributes:
        verification_id: 服务端分配的不透明唯一 ID
        verification_url: 需要在内嵌浏览器中打开的验证地址
        status: 服务端最后一次报告的状态
        checked_at: 最后一次刷新状态的时间
    """

    verification_id: str
    verification_url: str
    status: VerificationStatus = field(default=VerificationStatus.STARTED)
    checked_at: Optional[datetime] = field(default=None)

    _IMMUTABLE_FIELDS = ("verification_id", "verification_url")

    def __post_init__(self) -> None:
        if not self.verification_id:
            raise InvalidOperationException(
                operation="create_verification_session",
                reason="Verification ID cannot be empty",
            )
        if not self.verification_url:
            raise InvalidOperationException(
                operation="create_verification_session",
                reason="Verification URL cannot be empty",
            )

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._IMMUTABLE_FIELDS and name in self.__dict__:
            raise InvalidOperationException(
                operation=f"set_{name}",
                reason=f"{name} cannot change once issued",
            )
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VerificationSession):
            return NotImplemented
        return self.verification_id == other.verification_id

    def __hash__(self) -> int:
        return hash(self.verification_id)

    def refresh(self, status: VerificationStatus) -> None:
        """以服务端最新状态刷新会话

        客户端不校验状态转换方向，只反映服务端的值。

        Args:
            status: 服务端报告的状态
        """
        self.status = status
        self.checked_at = datetime.now(timezone.utc)

    @property
    def is_terminal(self) -> bool:
        """是否处于终态"""
        return self.status.is_terminal

    @property
    def is_success(self) -> bool:
        """是否验证通过"""
        return self.status.is_success
