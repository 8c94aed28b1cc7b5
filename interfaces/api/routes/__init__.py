"""
REST API 路由

定义 REST API 端点。
"""

from interfaces.api.routes.navigation import router as navigation_router
from interfaces.api.routes.verifications import router as verifications_router

__all__ = ["navigation_router", "verifications_router"]
