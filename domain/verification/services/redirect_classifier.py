"""内嵌浏览器导航分类服务

判断一次导航是否到达应用自己的回调地址（验证流程结束），
或是否应交给外部应用处理。纯函数，无状态，不做任何 I/O。
"""

from typing import Iterable, Optional
from urllib.parse import parse_qs, urlsplit

from domain.verification.value_objects.navigation_decision import NavigationDecision

DEFAULT_IN_BROWSER_SCHEMES = ("http", "https", "about")


def extract_verification_id(url: str) -> Optional[str]:
    """从回调 URL 的查询参数中读取 verification_id"""
    values = parse_qs(urlsplit(url).query).get("verification_id")
    if not values or not values[0]:
        return None
    return values[0]


def classify(url: str, callback_url_prefix: str) -> NavigationDecision:
    """判断导航 URL 是否命中回调地址

    使用区分大小写的逐字节前缀比较，不做任何规范化
    （末尾斜杠、查询参数顺序、百分号编码均按原样比较）。

    Args:
        url: 候选导航 URL（完整绝对地址）
        callback_url_prefix: 配置的回调地址前缀

    Returns:
        NavigationDecision；未配置前缀时总是继续导航
    """
    if not callback_url_prefix:
        return NavigationDecision.proceed(url)

    if url.startswith(callback_url_prefix):
        return NavigationDecision.redirect(url, extract_verification_id(url))

    return NavigationDecision.proceed(url)


class RedirectClassifier:
    """导航分类器

    在 classify() 基础上增加外部 scheme 拦截：先检查回调前缀
    （回调地址可以是 myapp:// 之类的自定义 scheme），未命中回调时，
    不在 in_browser_schemes 中的 scheme（如 mailto:、配套 App 的深链）
    一律取消浏览器内导航并交给外部打开。
    """

    def __init__(
        self,
        callback_url_prefix: str,
        in_browser_schemes: Iterable[str] = DEFAULT_IN_BROWSER_SCHEMES,
    ):
        """
        Args:
            callback_url_prefix: 回调地址前缀，为空时永远无法识别回调
            in_browser_schemes: 允许在内嵌浏览器中加载的 scheme
        """
        self.callback_url_prefix = callback_url_prefix or ""
        self.in_browser_schemes = frozenset(s.lower() for s in in_browser_schemes)

    def decide(self, url: str) -> NavigationDecision:
        """对一次导航做出决策（每次导航调用一次，同步返回）"""
        decision = classify(url, self.callback_url_prefix)
        if decision.is_redirect:
            return decision

        scheme = urlsplit(url).scheme.lower()
        if scheme and scheme not in self.in_browser_schemes:
            return NavigationDecision.external(url)
        return decision
