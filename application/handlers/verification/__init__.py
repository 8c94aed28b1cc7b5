"""Verification handlers package"""

from application.handlers.verification.authorize_url_handler import (
    AuthorizeUrlHandler,
    AuthorizeUrlResult,
)
from application.handlers.verification.check_status_handler import CheckStatusHandler
from application.handlers.verification.classify_navigation_handler import (
    ClassifyNavigationHandler,
)

__all__ = [
    "AuthorizeUrlHandler",
    "AuthorizeUrlResult",
    "CheckStatusHandler",
    "ClassifyNavigationHandler",
]
