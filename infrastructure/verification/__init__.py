"""Verification 基础设施模块

提供服务商 API 的 HMAC 签名客户端实现。
"""

from infrastructure.verification.api.hmac_api_client import HmacVerificationApiClient

__all__ = [
    "HmacVerificationApiClient",
]
