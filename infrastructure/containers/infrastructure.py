"""
基础设施容器（InfraContainer）

管理基础设施组件：API 凭证、服务商 API 客户端、导航分类器。
依赖 ConfigContainer 获取配置。
"""

from dependency_injector import containers, providers

from domain.verification.services.redirect_classifier import RedirectClassifier
from domain.verification.value_objects.credentials import Credentials
from infrastructure.verification.api.hmac_api_client import HmacVerificationApiClient


class InfraContainer(containers.DeclarativeContainer):
    """基础设施容器 - 管理技术实现"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # ============ 凭证 ============

    credentials = providers.Singleton(
        Credentials,
        api_key=config.settings.provided.vma_api_key,
        api_secret=config.settings.provided.vma_api_secret,
    )

    # ============ 服务商 API ============

    # 客户端无会话状态，可在并发请求间共享
    verification_api = providers.Singleton(
        HmacVerificationApiClient,
        credentials=credentials,
        base_url=config.settings.provided.base_url,
        timeout=config.settings.provided.vma_request_timeout,
    )

    # ============ 领域服务 ============

    redirect_classifier = providers.Singleton(
        RedirectClassifier,
        callback_url_prefix=config.settings.provided.vma_redirect_url,
    )
