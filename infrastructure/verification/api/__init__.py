"""服务商 API 客户端"""

from infrastructure.verification.api.hmac_api_client import HmacVerificationApiClient

__all__ = ["HmacVerificationApiClient"]
