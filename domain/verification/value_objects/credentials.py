"""API 凭证值对象"""

from dataclasses import dataclass, field


def mask_secret(value: str, visible: int = 4) -> str:
    """遮蔽敏感字符串，仅保留前几位

    Args:
        value: 原始字符串
        visible: 保留的前缀长度

    Returns:
        遮蔽后的字符串，如 "abcd****"
    """
    if not value:
        return ""
    if len(value) <= visible:
        return "*" * len(value)
    return f"{value[:visible]}****"


@dataclass(frozen=True)
class Credentials:
    """
    服务商 API 凭证

    进程级配置，启动时提供，之后不可变。
    repr 中不会出现 api_secret 明文。

    Attributes:
        api_key: API Key（出现在 Authorization 头中）
        api_secret: HMAC 签名密钥
    """

    api_key: str
    api_secret: str = field(repr=False)

    @property
    def is_complete(self) -> bool:
        """api_key 与 api_secret 是否均已配置"""
        return bool(self.api_key) and bool(self.api_secret)

    @property
    def masked_api_key(self) -> str:
        """遮蔽后的 API Key（用于日志）"""
        return mask_secret(self.api_key)

    def __repr__(self) -> str:
        return f"Credentials(api_key={self.masked_api_key!r}, api_secret='[REDACTED]')"
