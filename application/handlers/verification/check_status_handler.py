"""查询验证状态 Handler"""

import logging
from typing import Optional

from application.queries.verification.check_status import CheckStatusQuery
from domain.verification.services.verification_api import (
    CheckStatusResult,
    VerificationApi,
)


class CheckStatusHandler:
    """查询验证状态 Handler

    处理 CheckStatusQuery，直接返回服务商报告的最新状态。
    """

    def __init__(
        self,
        api: VerificationApi,
        logger: Optional[logging.Logger] = None,
    ):
        """初始化 Handler

        Args:
            api: 服务商 API 客户端
            logger: 日志记录器
        """
        self._api = api
        self._logger = logger or logging.getLogger(__name__)

    def handle(self, query: CheckStatusQuery) -> CheckStatusResult:
        """处理查询请求

        Args:
            query: 查询对象，包含 verification_id

        Returns:
            CheckStatusResult 包含状态或错误
        """
        self._logger.debug(
            f"Handling CheckStatusQuery for verification_id={query.verification_id}"
        )
        return self._api.check_status(query.verification_id)
