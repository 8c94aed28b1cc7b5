"""Verification 领域模块

年龄验证的领域层，包含验证会话实体、值对象、签名与导航分类服务，
以及服务商 API 接口。
"""

from domain.verification.entities.verification_session import VerificationSession
from domain.verification.value_objects.verification_status import VerificationStatus
from domain.verification.services.verification_api import VerificationApi

__all__ = [
    "VerificationSession",
    "VerificationStatus",
    "VerificationApi",
]
