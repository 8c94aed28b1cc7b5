"""日志配置

统一使用标准 logging，各模块通过 logging.getLogger(__name__) 获取日志记录器。
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from infrastructure.config.settings import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"

_HANDLER_MARK = "_age_verify_handler"


def configure_logging(settings: Settings, logger_name: Optional[str] = None) -> logging.Logger:
    """
    按配置初始化日志

    重复调用不会重复添加 handler。

    Args:
        settings: 应用配置
        logger_name: 需要配置的日志记录器名称，默认为根记录器

    Returns:
        配置后的日志记录器
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(settings.log_level.upper())

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    setattr(console, _HANDLER_MARK, True)
    logger.addHandler(console)

    if settings.log_file:
        path = Path(settings.log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_MARK, True)
        logger.addHandler(file_handler)

    return logger
