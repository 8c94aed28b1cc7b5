"""
应用配置管理

使用 pydantic-settings 管理环境变量和配置
"""

from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


SANDBOX_BASE_URL = "https://sandbox.verifymyage.com"
PRODUCTION_BASE_URL = "https://oauth.verifymyage.com"


class Settings(BaseSettings):
    """
    应用配置类

    自动从环境变量和 .env 文件读取配置。
    凭证等缺失不会在加载时报错，而是在调用时以 invalid_input 返回。
    """

    # ========== 应用环境 ==========
    app_env: Literal["test", "dev", "staging", "prod"] = "dev"
    app_name: str = "AgeVerify"
    app_version: str = "1.0.0"
    debug: bool = False

    # ========== 服务商配置 ==========
    vma_api_key: str = ""
    vma_api_secret: str = ""
    vma_base_url: str = ""  # 为空时按环境选择 sandbox / production
    vma_redirect_url: str = ""  # 回调地址，同时作为导航拦截前缀
    vma_method: str = ""  # 默认验证方式（可选）
    vma_country: str = "gb"
    vma_request_timeout: float = 30.0

    # ========== 日志配置 ==========
    log_level: str = "INFO"
    log_file: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 忽略未定义的环境变量
    )

    @property
    def is_test(self) -> bool:
        """是否为测试环境"""
        return self.app_env == "test"

    @property
    def is_prod(self) -> bool:
        """是否为生产环境"""
        return self.app_env == "prod"

    @property
    def base_url(self) -> str:
        """获取当前环境的服务商 API 地址"""
        if self.vma_base_url:
            return self.vma_base_url.rstrip("/")
        if self.is_prod:
            return PRODUCTION_BASE_URL
        return SANDBOX_BASE_URL


# 全局配置实例（单例）
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    获取配置实例（单例模式）

    Returns:
        Settings 实例
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# 便捷导出
settings = get_settings()
