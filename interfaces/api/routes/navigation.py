"""导航分类 API 路由"""

from typing import Callable, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from application.handlers.verification.classify_navigation_handler import (
    ClassifyNavigationHandler,
)
from application.queries.verification.classify_navigation import ClassifyNavigationQuery


router = APIRouter(tags=["Navigation"])


# ============ Handler 依赖注入 ============

_classify_handler_getter: Optional[Callable[[], ClassifyNavigationHandler]] = None


def set_classify_handler_getter(getter: Callable[[], ClassifyNavigationHandler]) -> None:
    """设置 classify handler 获取器（由 DI 容器调用）"""
    global _classify_handler_getter
    _classify_handler_getter = getter


def get_classify_handler() -> Optional[ClassifyNavigationHandler]:
    """获取 ClassifyNavigationHandler 实例"""
    if _classify_handler_getter is None:
        return None
    return _classify_handler_getter()


# ============ Request/Response DTOs ============


class ClassifyNavigationDTO(BaseModel):
    """导航分类请求 DTO"""

    url: str = Field(..., description="候选导航 URL", examples=["https://example.com/callback?x=1"])


class NavigationDecisionDTO(BaseModel):
    """导航决策响应 DTO"""

    url: str
    is_redirect: bool
    should_continue_navigation: bool
    open_externally: bool
    verification_id: Optional[str] = None


# ============ API Endpoints ============


@router.post(
    "/navigation/classify",
    response_model=NavigationDecisionDTO,
    summary="判断导航是否命中回调地址",
)
def classify_navigation(
    dto: ClassifyNavigationDTO,
    handler: Optional[ClassifyNavigationHandler] = Depends(get_classify_handler),
):
    """
    判断内嵌浏览器的一次导航

    - is_redirect=true: 验证流程结束，取消导航并查询状态
    - open_externally=true: 交给外部应用打开
    """
    if handler is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Handler not configured. Please configure dependency injection.",
        )

    decision = handler.handle(ClassifyNavigationQuery(url=dto.url))
    return NavigationDecisionDTO(
        url=decision.url,
        is_redirect=decision.is_redirect,
        should_continue_navigation=decision.should_continue_navigation,
        open_externally=decision.open_externally,
        verification_id=decision.verification_id,
    )
