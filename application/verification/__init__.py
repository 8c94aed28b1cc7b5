"""年龄验证应用层模块"""

from application.verification.services import (
    VerificationFlow,
    VerificationFlowState,
)

__all__ = [
    "VerificationFlow",
    "VerificationFlowState",
]
