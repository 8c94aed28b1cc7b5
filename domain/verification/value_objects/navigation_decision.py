"""导航决策值对象"""

from dataclasses import dataclass
from typing import Optional

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException


@dataclass(frozen=True)
class NavigationDecision(BaseValueObject):
    """内嵌浏览器单次导航的处理决策

    Attributes:
        url: 候选导航 URL
        is_redirect: 是否命中回调地址（验证流程结束）
        should_continue_navigation: 是否允许浏览器继续加载该 URL
        open_externally: 是否应交给系统外部应用打开（非 HTTP scheme）
        verification_id: 回调 URL 查询参数中的 verification_id（如果有）
    """

    url: str
    is_redirect: bool = False
    should_continue_navigation: bool = True
    open_externally: bool = False
    verification_id: Optional[str] = None

    def validate(self) -> None:
        """命中回调或外部打开时必须取消浏览器内导航"""
        if (self.is_redirect or self.open_externally) and self.should_continue_navigation:
            raise InvalidValueObjectException(
                value_object_type="NavigationDecision",
                value=self.url,
                reason="Redirect or external navigation must not continue in the browser",
            )

    @classmethod
    def proceed(cls, url: str) -> "NavigationDecision":
        """继续导航"""
        return cls(url=url)

    @classmethod
    def redirect(cls, url: str, verification_id: Optional[str] = None) -> "NavigationDecision":
        """命中回调地址，取消导航"""
        return cls(
            url=url,
            is_redirect=True,
            should_continue_navigation=False,
            verification_id=verification_id,
        )

    @classmethod
    def external(cls, url: str) -> "NavigationDecision":
        """交给外部应用打开，取消导航"""
        return cls(url=url, should_continue_navigation=False, open_externally=True)
