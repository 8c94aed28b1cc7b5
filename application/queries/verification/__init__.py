"""Verification 查询模块"""

from application.queries.verification.authorize_url import AuthorizeUrlQuery
from application.queries.verification.check_status import CheckStatusQuery
from application.queries.verification.classify_navigation import ClassifyNavigationQuery

__all__ = ["AuthorizeUrlQuery", "CheckStatusQuery", "ClassifyNavigationQuery"]
