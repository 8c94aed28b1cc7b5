"""Verification 领域值对象模块"""

from domain.verification.value_objects.api_error import ApiError, ApiErrorKind
from domain.verification.value_objects.credentials import Credentials, mask_secret
from domain.verification.value_objects.navigation_decision import NavigationDecision
from domain.verification.value_objects.verification_method import VerificationMethod
from domain.verification.value_objects.verification_request import (
    VerificationRequest,
    canonical_json,
)
from domain.verification.value_objects.verification_status import VerificationStatus

__all__ = [
    "ApiError",
    "ApiErrorKind",
    "Credentials",
    "NavigationDecision",
    "VerificationMethod",
    "VerificationRequest",
    "VerificationStatus",
    "canonical_json",
    "mask_secret",
]
