"""
应用容器（AppContainer）

管理应用层组件：命令/查询处理器、验证流程服务。
依赖 InfraContainer 获取基础设施。
"""

from dependency_injector import containers, providers

from application.commands.verification import StartVerificationHandler
from application.handlers.verification import (
    AuthorizeUrlHandler,
    CheckStatusHandler,
    ClassifyNavigationHandler,
)
from application.verification.services import VerificationFlow


class AppContainer(containers.DeclarativeContainer):
    """应用容器 - 管理应用层服务"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # 依赖基础设施容器
    infra = providers.DependenciesContainer()

    # ============ 命令处理器 ============

    start_verification_handler = providers.Factory(
        StartVerificationHandler,
        api=infra.verification_api,
        default_redirect_url=config.settings.provided.vma_redirect_url,
        default_method=config.settings.provided.vma_method,
    )

    # ============ 查询处理器 ============

    check_status_handler = providers.Factory(
        CheckStatusHandler,
        api=infra.verification_api,
    )

    authorize_url_handler = providers.Factory(
        AuthorizeUrlHandler,
        api=infra.verification_api,
        default_redirect_url=config.settings.provided.vma_redirect_url,
        default_method=config.settings.provided.vma_method,
    )

    classify_navigation_handler = providers.Factory(
        ClassifyNavigationHandler,
        classifier=infra.redirect_classifier,
    )

    # ============ 应用服务 ============

    # 每次验证一个独立的流程实例
    verification_flow = providers.Factory(
        VerificationFlow,
        api=infra.verification_api,
        classifier=infra.redirect_classifier,
    )
