"""验证方式值对象"""

from enum import Enum
from typing import Optional

from domain.common.exceptions import InvalidValueObjectException


class VerificationMethod(str, Enum):
    """服务商支持的验证方式

    枚举值即请求体中 method 字段的取值。
    """

    AGE_ESTIMATION = "ageEstimation"
    """人脸年龄估算"""

    EMAIL = "email"
    """邮箱验证"""

    ID_SCAN = "idScan"
    """证件扫描"""

    ID_SCAN_FACE_MATCH = "idScanFaceMatch"
    """证件扫描 + 人脸比对"""

    MOBILE = "mobile"
    """手机号验证"""

    CREDIT_CARD = "creditCard"
    """信用卡验证"""

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["VerificationMethod"]:
        """解析验证方式

        接受服务商取值（如 "idScan"），不区分大小写，忽略 "_" 与 "-"（如 "ID_SCAN"）。
        空值返回 None。

        Args:
            value: 验证方式字符串

        Returns:
            VerificationMethod 或 None

        Raises:
            InvalidValueObjectException: 无法识别的验证方式
        """
        if value is None or not value.strip():
            return None

        normalized = value.strip().replace("_", "").replace("-", "").lower()
        for method in cls:
            if method.value.lower() == normalized:
                return method

        raise InvalidValueObjectException(
            value_object_type="VerificationMethod",
            value=value,
            reason=f"Unsupported method. Must be one of: "
            f"{', '.join(m.value for m in cls)}",
        )
