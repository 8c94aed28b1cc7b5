"""
依赖注入容器

用法：
    from infrastructure.containers import bootstrap

    boot = bootstrap()
    handler = boot.app.start_verification_handler()
"""

from dataclasses import dataclass
from typing import Optional

from dependency_injector import providers

from infrastructure.config.settings import Settings
from infrastructure.containers.application import AppContainer
from infrastructure.containers.config import ConfigContainer
from infrastructure.containers.infrastructure import InfraContainer


@dataclass
class Bootstrap:
    """已装配的容器集合"""

    config: ConfigContainer
    infra: InfraContainer
    app: AppContainer


def bootstrap(settings: Optional[Settings] = None) -> Bootstrap:
    """
    装配配置、基础设施与应用容器

    Args:
        settings: 指定配置（测试用），默认读取环境变量

    Returns:
        Bootstrap 包含三个容器
    """
    config = ConfigContainer()
    if settings is not None:
        config.settings.override(providers.Object(settings))

    infra = InfraContainer(config=config)
    app = AppContainer(config=config, infra=infra)
    return Bootstrap(config=config, infra=infra, app=app)


__all__ = ["AppContainer", "Bootstrap", "ConfigContainer", "InfraContainer", "bootstrap"]
