"""导航分类 Query"""

from dataclasses import dataclass


@dataclass
class ClassifyNavigationQuery:
    """判断一次内嵌浏览器导航的处理方式

    Attributes:
        url: 候选导航 URL
    """

    url: str
