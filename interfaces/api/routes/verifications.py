"""年龄验证 API 路由"""

from typing import Callable, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from application.commands.verification.start_verification import (
    StartVerificationCommand,
    StartVerificationHandler,
)
from application.handlers.verification.authorize_url_handler import AuthorizeUrlHandler
from application.handlers.verification.check_status_handler import CheckStatusHandler
from application.queries.verification.authorize_url import AuthorizeUrlQuery
from application.queries.verification.check_status import CheckStatusQuery
from domain.verification.value_objects.api_error import ApiError, ApiErrorKind


router = APIRouter(tags=["Verification"])


# ============ Handler 依赖注入 ============

_start_handler_getter: Optional[Callable[[], StartVerificationHandler]] = None


def set_start_handler_getter(getter: Callable[[], StartVerificationHandler]) -> None:
    """设置 start handler 获取器（由 DI 容器调用）"""
    global _start_handler_getter
    _start_handler_getter = getter


def get_start_handler() -> Optional[StartVerificationHandler]:
    """获取 StartVerificationHandler 实例"""
    if _start_handler_getter is None:
        return None
    return _start_handler_getter()


_status_handler_getter: Optional[Callable[[], CheckStatusHandler]] = None


def set_status_handler_getter(getter: Callable[[], CheckStatusHandler]) -> None:
    """设置 status handler 获取器（由 DI 容器调用）"""
    global _status_handler_getter
    _status_handler_getter = getter


def get_status_handler() -> Optional[CheckStatusHandler]:
    """获取 CheckStatusHandler 实例"""
    if _status_handler_getter is None:
        return None
    return _status_handler_getter()


_authorize_url_handler_getter: Optional[Callable[[], AuthorizeUrlHandler]] = None


def set_authorize_url_handler_getter(getter: Callable[[], AuthorizeUrlHandler]) -> None:
    """设置 authorize url handler 获取器（由 DI 容器调用）"""
    global _authorize_url_handler_getter
    _authorize_url_handler_getter = getter


def get_authorize_url_handler() -> Optional[AuthorizeUrlHandler]:
    """获取 AuthorizeUrlHandler 实例"""
    if _authorize_url_handler_getter is None:
        return None
    return _authorize_url_handler_getter()


# ============ Request/Response DTOs ============


class StartVerificationDTO(BaseModel):
    """开始验证请求 DTO"""

    country: str = Field(
        ...,
        description="ISO 国家代码",
        min_length=1,
        examples=["gb"],
    )
    redirect_url: Optional[str] = Field(
        None,
        description="回调地址（为空时使用配置的默认值）",
        examples=["https://example.com/callback"],
    )
    method: Optional[str] = Field(None, description="验证方式", examples=["ageEstimation"])
    business_settings_id: Optional[str] = Field(None, description="业务配置 ID")
    external_user_id: Optional[str] = Field(None, description="调用方用户标识")
    webhook: Optional[str] = Field(None, description="服务端回调地址")
    email: Optional[str] = Field(None, description="用户邮箱（stealth 模式必填）")
    stealth: bool = Field(False, description="是否启用 stealth 模式")


class SessionResponseDTO(BaseModel):
    """验证会话响应 DTO（状态码 201）"""

    verification_id: str = Field(..., description="验证会话 ID")
    verification_url: str = Field(..., description="需要在浏览器中打开的验证地址")
    status: str = Field(..., description="验证状态")


class StatusResponseDTO(BaseModel):
    """验证状态响应 DTO"""

    verification_id: str = Field(..., description="验证会话 ID")
    status: str = Field(..., description="验证状态")
    description: str = Field(..., description="状态描述")
    is_terminal: bool = Field(..., description="是否终态")
    is_success: bool = Field(..., description="是否验证通过")


class ApiErrorResponseDTO(BaseModel):
    """错误响应 DTO"""

    kind: str = Field(..., description="错误类型")
    message: str = Field(..., description="错误信息")
    upstream_status: Optional[int] = Field(None, description="服务商 HTTP 状态码")


class AuthorizeUrlDTO(BaseModel):
    """托管授权页地址请求 DTO"""

    country: str = Field(..., description="ISO 国家代码", min_length=1, examples=["gb"])
    redirect_url: Optional[str] = Field(None, description="回调地址（为空时使用配置的默认值）")
    method: Optional[str] = Field(None, description="验证方式", examples=["ageEstimation"])
    state: str = Field("xyz", description="透传给回调地址的 state 参数")


class AuthorizeUrlResponseDTO(BaseModel):
    """托管授权页地址响应 DTO"""

    authorize_url: str = Field(..., description="在内嵌浏览器中打开的授权页地址")


# ============ 错误映射 ============


def error_response(error: ApiError) -> JSONResponse:
    """将 ApiError 转换为 HTTP 响应

    - invalid_input  -> 422
    - request_failed -> 502
    - server_error   -> 502
    """
    status_code = (
        status.HTTP_422_UNPROCESSABLE_ENTITY
        if error.kind == ApiErrorKind.INVALID_INPUT
        else status.HTTP_502_BAD_GATEWAY
    )
    return JSONResponse(
        status_code=status_code,
        content={
            "kind": error.kind.value,
            "message": error.message,
            "upstream_status": error.status_code,
        },
    )


def _handler_not_configured() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Handler not configured. Please configure dependency injection.",
    )


# ============ API Endpoints ============


@router.post(
    "/verifications",
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"model": SessionResponseDTO, "description": "验证会话已创建"},
        422: {"model": ApiErrorResponseDTO, "description": "凭证或必填字段缺失"},
        502: {"model": ApiErrorResponseDTO, "description": "服务商错误或网络失败"},
    },
    summary="开始验证",
)
def start_verification(
    dto: StartVerificationDTO,
    handler: Optional[StartVerificationHandler] = Depends(get_start_handler),
):
    """
    开始一次年龄验证

    - 返回 verification_url，调用方在内嵌浏览器中打开
    - 保存 verification_id，命中回调后用于查询状态
    """
    if handler is None:
        raise _handler_not_configured()

    command = StartVerificationCommand(
        country_code=dto.country,
        redirect_url=dto.redirect_url,
        business_settings_id=dto.business_settings_id,
        external_user_id=dto.external_user_id,
        method=dto.method,
        webhook=dto.webhook,
        email=dto.email,
        stealth=dto.stealth,
    )
    result = handler.handle(command)

    if not result.success:
        return error_response(result.error)

    session = result.session
    return SessionResponseDTO(
        verification_id=session.verification_id,
        verification_url=session.verification_url,
        status=session.status.value,
    )


@router.get(
    "/verifications/{verification_id}/status",
    responses={
        200: {"model": StatusResponseDTO, "description": "服务商报告的最新状态"},
        422: {"model": ApiErrorResponseDTO, "description": "凭证缺失"},
        502: {"model": ApiErrorResponseDTO, "description": "服务商错误或网络失败"},
    },
    summary="查询验证状态",
)
def check_status(
    verification_id: str,
    handler: Optional[CheckStatusHandler] = Depends(get_status_handler),
):
    """查询验证状态（每次调用都会请求服务商）"""
    if handler is None:
        raise _handler_not_configured()

    result = handler.handle(CheckStatusQuery(verification_id=verification_id))

    if not result.success:
        return error_response(result.error)

    return StatusResponseDTO(
        verification_id=verification_id,
        status=result.status.value,
        description=result.status.description,
        is_terminal=result.status.is_terminal,
        is_success=result.status.is_success,
    )


@router.post(
    "/verifications/authorize-url",
    response_model=AuthorizeUrlResponseDTO,
    responses={
        422: {"model": ApiErrorResponseDTO, "description": "必填字段缺失或验证方式无法识别"},
    },
    summary="构建托管授权页地址",
)
def build_authorize_url(
    dto: AuthorizeUrlDTO,
    handler: Optional[AuthorizeUrlHandler] = Depends(get_authorize_url_handler),
):
    """
    构建托管授权页地址（不请求服务商）

    - 调用方直接在内嵌浏览器中打开 authorize_url
    - 命中回调后同样通过导航分类与状态查询完成流程
    """
    if handler is None:
        raise _handler_not_configured()

    result = handler.handle(
        AuthorizeUrlQuery(
            country_code=dto.country,
            redirect_url=dto.redirect_url,
            method=dto.method,
            state=dto.state,
        )
    )

    if not result.success:
        return error_response(result.error)

    return AuthorizeUrlResponseDTO(authorize_url=result.url)
