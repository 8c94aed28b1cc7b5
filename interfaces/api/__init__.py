"""
API 接口层

提供 FastAPI 应用，作为验证客户端的 HTTP 适配层。

用法：
    from interfaces.api import create_app

    app = create_app()
"""

from interfaces.api.app import VerifyApp, create_app

__all__ = [
    "VerifyApp",
    "create_app",
]
