"""Verification 领域服务"""

from domain.verification.services.redirect_classifier import (
    RedirectClassifier,
    classify,
    extract_verification_id,
)
from domain.verification.services.request_signer import RequestSigner, generate_hmac
from domain.verification.services.verification_api import (
    CheckStatusResult,
    ExternalUrlOpener,
    StartVerificationResult,
    VerificationApi,
)

__all__ = [
    "CheckStatusResult",
    "ExternalUrlOpener",
    "RedirectClassifier",
    "RequestSigner",
    "StartVerificationResult",
    "VerificationApi",
    "classify",
    "extract_verification_id",
    "generate_hmac",
]
