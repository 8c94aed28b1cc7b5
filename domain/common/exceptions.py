"""领域异常定义"""

from typing import Any, Optional


class DomainException(Exception):
    """领域异常基类"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidValueObjectException(DomainException):
    """值对象无效

    Attributes:
        value_object_type: 值对象类型名
        value: 导致失败的值
        reason: 失败原因
    """

    def __init__(self, value_object_type: str, value: Any, reason: str):
        self.value_object_type = value_object_type
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {value_object_type} ({value!r}): {reason}")


class InvalidOperationException(DomainException):
    """非法操作

    Attributes:
        operation: 操作名称
        reason: 失败原因
    """

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Invalid operation '{operation}': {reason}")


class InvalidStateTransitionException(DomainException):
    """非法状态转换

    Attributes:
        entity: 实体名称
        from_state: 当前状态
        to_state: 目标状态
        reason: 失败原因（可选）
    """

    def __init__(
        self,
        entity: str,
        from_state: str,
        to_state: str,
        reason: Optional[str] = None,
    ):
        self.entity = entity
        self.from_state = from_state
        self.to_state = to_state
        self.reason = reason
        message = f"{entity} cannot transition from '{from_state}' to '{to_state}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
