"""领域层公共组件"""

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import (
    DomainException,
    InvalidOperationException,
    InvalidStateTransitionException,
    InvalidValueObjectException,
)

__all__ = [
    "BaseValueObject",
    "DomainException",
    "InvalidOperationException",
    "InvalidStateTransitionException",
    "InvalidValueObjectException",
]
