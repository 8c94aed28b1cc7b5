"""HMAC 请求签名服务"""

import hashlib
import hmac
from typing import Union

from domain.verification.value_objects.credentials import Credentials, mask_secret

AUTH_SCHEME = "hmac"


def generate_hmac(secret: str, data: Union[str, bytes]) -> str:
    """计算 HMAC-SHA256 十六进制签名

    Args:
        secret: 签名密钥
        data: 签名输入，字符串按 UTF-8 编码

    Returns:
        小写十六进制签名
    """
    message = data.encode("utf-8") if isinstance(data, str) else data
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


class RequestSigner:
    """请求签名器

    POST 请求对请求体字节签名，GET 请求对 path+query 字符串签名，
    签名结果以 `Authorization: hmac {api_key}:{signature}` 形式提交。
    """

    def __init__(self, credentials: Credentials):
        self._credentials = credentials

    def sign(self, data: Union[str, bytes]) -> str:
        """对签名输入计算签名"""
        return generate_hmac(self._credentials.api_secret, data)

    def authorization(self, data: Union[str, bytes]) -> str:
        """生成 Authorization 头的值"""
        return f"{AUTH_SCHEME} {self._credentials.api_key}:{self.sign(data)}"

    def masked_authorization(self, data: Union[str, bytes]) -> str:
        """生成可写入日志的 Authorization 头（签名与 key 均遮蔽）"""
        return (
            f"{AUTH_SCHEME} {self._credentials.masked_api_key}:"
            f"{mask_secret(self.sign(data), visible=8)}"
        )
