"""构建托管授权页地址的 Query"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class AuthorizeUrlQuery:
    """构建托管授权页地址的 Query

    托管授权页是另一种入口：调用方直接在内嵌浏览器中打开该地址，
    无需先调用开始验证接口。

    Attributes:
        country_code: ISO 国家代码
        redirect_url: 回调地址，为空时使用配置的默认回调地址
        method: 验证方式字符串，为空时使用配置的默认方式
        state: 透传给回调地址的 state 参数
    """

    country_code: str
    redirect_url: Optional[str] = None
    method: Optional[str] = None
    state: str = "xyz"
