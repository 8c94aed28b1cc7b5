"""开始验证请求值对象"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from domain.verification.value_objects.verification_method import VerificationMethod


def canonical_json(payload: Dict[str, Any]) -> bytes:
    """将载荷编码为规范 JSON 字节

    键按字典序排列、使用紧凑分隔符、非 ASCII 字符保留为 UTF-8。
    签名与发送必须使用同一份字节。

    Args:
        payload: JSON 可序列化字典

    Returns:
        UTF-8 编码的 JSON 字节
    """
    return json.dumps(
        payload,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    ).encode("utf-8")


@dataclass(frozen=True)
class VerificationRequest:
    """
    开始验证请求

    Attributes:
        country_code: ISO 3166-1 alpha-2 国家代码（如 "gb"）
        redirect_url: 验证完成后跳转的回调地址（绝对 URL）
        business_settings_id: 业务配置 ID（可选）
        external_user_id: 调用方的用户标识（可选）
        method: 验证方式（可选）
        webhook: 服务端回调地址（可选）
        email: 用户邮箱（stealth 模式必填）
        stealth: 是否启用 stealth 模式
    """

    country_code: str
    redirect_url: str
    business_settings_id: Optional[str] = None
    external_user_id: Optional[str] = None
    method: Optional[VerificationMethod] = None
    webhook: Optional[str] = None
    email: Optional[str] = None
    stealth: bool = False

    def missing_fields(self) -> List[str]:
        """返回缺失的必填字段（使用线上字段名）"""
        missing = []
        if not self.country_code:
            missing.append("country")
        if not self.redirect_url:
            missing.append("redirect_url")
        if self.stealth and not self.email:
            missing.append("email")
        return missing

    def to_payload(self) -> Dict[str, Any]:
        """转换为请求载荷

        只包含非空字段，空的可选字段直接省略而不是发送空字符串。

        Returns:
            使用线上字段名的字典
        """
        payload: Dict[str, Any] = {
            "country": self.country_code,
            "redirect_url": self.redirect_url,
        }
        optional = {
            "method": self.method.value if self.method else None,
            "business_settings_id": self.business_settings_id,
            "external_user_id": self.external_user_id,
            "webhook": self.webhook,
            "email": self.email,
        }
        for key, value in optional.items():
            if value:
                payload[key] = value
        if self.stealth:
            payload["stealth"] = True
        return payload

    def to_body(self) -> bytes:
        """请求体字节（同时作为 HMAC 签名输入）"""
        return canonical_json(self.to_payload())
