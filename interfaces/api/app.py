"""
FastAPI 应用工厂

装配 DI 容器、注册路由与 handler getter。
"""

from typing import Optional

import uvicorn
from fastapi import FastAPI

from infrastructure.config.settings import Settings, get_settings
from infrastructure.containers import Bootstrap, bootstrap
from infrastructure.logging_config import configure_logging
from interfaces.api.routes import navigation_router, verifications_router
from interfaces.api.routes.navigation import set_classify_handler_getter
from interfaces.api.routes.verifications import (
    set_authorize_url_handler_getter,
    set_start_handler_getter,
    set_status_handler_getter,
)


class VerifyApp:
    """
    年龄验证服务应用

    Attributes:
        settings: 应用配置
        bootstrap: 已装配的 DI 容器
        fastapi: FastAPI 实例
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        title: Optional[str] = None,
        description: str = "年龄验证服务 - HMAC 签名 API 客户端与回调导航识别",
    ):
        self.settings = settings or get_settings()
        configure_logging(self.settings)

        self.bootstrap: Bootstrap = bootstrap(self.settings)
        self.fastapi = FastAPI(
            title=title or self.settings.app_name,
            description=description,
            version=self.settings.app_version,
            debug=self.settings.debug,
        )

        self._wire_handlers()
        self.fastapi.include_router(verifications_router, prefix="/api/v1")
        self.fastapi.include_router(navigation_router, prefix="/api/v1")

        @self.fastapi.get("/health")
        async def health():
            """健康检查"""
            return {"status": "healthy"}

    def _wire_handlers(self) -> None:
        """注册 Handler Getters（连接 DI 容器到路由）"""
        container = self.bootstrap.app
        set_start_handler_getter(container.start_verification_handler)
        set_status_handler_getter(container.check_status_handler)
        set_authorize_url_handler_getter(container.authorize_url_handler)
        set_classify_handler_getter(container.classify_navigation_handler)

    def run(self, host: str = "127.0.0.1", port: int = 8000, **kwargs) -> None:
        """使用 uvicorn 启动服务"""
        uvicorn.run(self.fastapi, host=host, port=port, **kwargs)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """创建 FastAPI 应用"""
    return VerifyApp(settings=settings).fastapi
