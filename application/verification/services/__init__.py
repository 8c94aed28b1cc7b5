"""Verification 应用服务"""

from application.verification.services.verification_flow_service import (
    VerificationFlow,
    VerificationFlowState,
)

__all__ = ["VerificationFlow", "VerificationFlowState"]
