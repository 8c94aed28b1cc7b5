"""查询验证状态的 Query"""

from dataclasses import dataclass


@dataclass
class CheckStatusQuery:
    """查询验证状态的 Query

    每次查询都会向服务商发起一次请求，客户端不缓存状态。

    Attributes:
        verification_id: 验证会话 ID
    """

    verification_id: str
