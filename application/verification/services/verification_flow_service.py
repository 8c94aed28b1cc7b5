"""验证流程服务

用显式状态机驱动一次完整的验证流程：
开始验证 -> 内嵌浏览器导航 -> 命中回调 -> 查询状态 -> 完成。
UI 通过 subscribe() 注册观察者获取状态变化。
"""

import logging
from enum import Enum
from typing import Callable, List, Optional

from domain.common.exceptions import InvalidStateTransitionException
from domain.verification.entities.verification_session import VerificationSession
from domain.verification.services.redirect_classifier import RedirectClassifier
from domain.verification.services.verification_api import (
    CheckStatusResult,
    ExternalUrlOpener,
    StartVerificationResult,
    VerificationApi,
)
from domain.verification.value_objects.api_error import ApiError
from domain.verification.value_objects.navigation_decision import NavigationDecision
from domain.verification.value_objects.verification_request import VerificationRequest


class VerificationFlowState(str, Enum):
    """验证流程状态

    Attributes:
        IDLE: 空闲 - 尚未开始
        VERIFYING: 验证中 - 用户正在内嵌浏览器中操作
        CHECKING: 待查询 - 已命中回调，等待查询状态
        COMPLETED: 已完成 - 已拿到服务端状态（不代表验证通过）
        FAILED: 失败 - API 调用出错
    """

    IDLE = "idle"
    VERIFYING = "verifying"
    CHECKING = "checking"
    COMPLETED = "completed"
    FAILED = "failed"


FlowObserver = Callable[["VerificationFlow"], None]


class VerificationFlow:
    """验证流程

    单个流程对象对应一次验证会话，不同流程之间互不共享状态。

    职责：
    - 调用 start_verification 创建会话
    - 对每次导航同步给出决策（不做 I/O）
    - 命中回调后由 finish() 查询状态
    - 状态变化时通知观察者
    """

    def __init__(
        self,
        api: VerificationApi,
        classifier: RedirectClassifier,
        external_opener: Optional[ExternalUrlOpener] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """初始化流程

        Args:
            api: 服务商 API 客户端
            classifier: 导航分类器
            external_opener: 外部 URL 打开能力（可选）
            logger: 日志记录器
        """
        self._api = api
        self._classifier = classifier
        self._external_opener = external_opener
        self._logger = logger or logging.getLogger(__name__)
        self._observers: List[FlowObserver] = []

        self.state = VerificationFlowState.IDLE
        self.session: Optional[VerificationSession] = None
        self.last_error: Optional[ApiError] = None

    # ============ 观察者 ============

    def subscribe(self, observer: FlowObserver) -> None:
        """注册状态观察者"""
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: FlowObserver) -> None:
        """移除状态观察者"""
        if observer in self._observers:
            self._observers.remove(observer)

    # ============ 流程操作 ============

    def start(self, request: VerificationRequest) -> StartVerificationResult:
        """开始验证

        Args:
            request: 开始验证请求

        Returns:
            StartVerificationResult

        Raises:
            InvalidStateTransitionException: 流程正在进行中
        """
        self._ensure_state(
            VerificationFlowState.VERIFYING,
            VerificationFlowState.IDLE,
            VerificationFlowState.COMPLETED,
            VerificationFlowState.FAILED,
        )

        self.session = None
        self.last_error = None
        result = self._api.start_verification(request)

        if result.success:
            self.session = result.session
            self._transition(VerificationFlowState.VERIFYING)
        else:
            self.last_error = result.error
            self._transition(VerificationFlowState.FAILED)
        return result

    def on_navigation(self, url: str) -> NavigationDecision:
        """处理一次内嵌浏览器导航

        同步返回决策，调用方必须在浏览器加载前遵循
        should_continue_navigation。命中回调只切换状态，不查询状态。

        Args:
            url: 候选导航 URL

        Returns:
            NavigationDecision
        """
        decision = self._classifier.decide(url)

        if decision.open_externally:
            if self._external_opener is not None:
                opened = self._external_opener.open(url)
                self._logger.info(f"External URL opened={opened}: {url}")
            else:
                self._logger.warning(f"No external opener configured for: {url}")
            return decision

        if decision.is_redirect and self.state == VerificationFlowState.VERIFYING:
            self._logger.info(
                f"Callback reached for verification_id="
                f"{self.session.verification_id if self.session else '-'}"
            )
            self._transition(VerificationFlowState.CHECKING)

        return decision

    def finish(self) -> CheckStatusResult:
        """命中回调后查询验证状态

        Returns:
            CheckStatusResult

        Raises:
            InvalidStateTransitionException: 尚未命中回调
        """
        self._ensure_state(
            VerificationFlowState.COMPLETED,
            VerificationFlowState.CHECKING,
        )

        result = self._api.check_status(self.session.verification_id)
        if result.success:
            self.session.refresh(result.status)
            self.last_error = None
            self._transition(VerificationFlowState.COMPLETED)
        else:
            self.last_error = result.error
            self._transition(VerificationFlowState.FAILED)
        return result

    def reset(self) -> None:
        """回到空闲状态"""
        self.session = None
        self.last_error = None
        self._transition(VerificationFlowState.IDLE)

    # ============ 查询属性 ============

    @property
    def is_approved(self) -> bool:
        """流程已完成且验证通过"""
        return (
            self.state == VerificationFlowState.COMPLETED
            and self.session is not None
            and self.session.is_success
        )

    # ============ 内部方法 ============

    def _ensure_state(
        self, target: VerificationFlowState, *allowed: VerificationFlowState
    ) -> None:
        if self.state not in allowed:
            raise InvalidStateTransitionException(
                entity="VerificationFlow",
                from_state=self.state.value,
                to_state=target.value,
                reason=f"Allowed from: {', '.join(s.value for s in allowed)}",
            )

    def _transition(self, state: VerificationFlowState) -> None:
        self._logger.debug(f"Verification flow: {self.state.value} -> {state.value}")
        self.state = state
        for observer in list(self._observers):
            observer(self)
