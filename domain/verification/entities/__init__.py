"""Verification 领域实体"""

from domain.verification.entities.verification_session import VerificationSession

__all__ = ["VerificationSession"]
