"""
职位推荐服务

推荐集合整组替换：先插入新推荐再删除旧推荐，不会出现空集合
"""

import logging
from typing import List, Optional

from futureu.backend.client import BackendClient
from futureu.models.job import JobRecommendation
from futureu.repositories.job_repository import JobRecommendationRepository
from futureu.services.analyzers import JobMatcher, MockJobMatcher
from futureu.services.base import BaseService, service_call

logger = logging.getLogger(__name__)


class JobService(BaseService):
    """职位推荐服务"""

    def __init__(self, backend: BackendClient, matcher: Optional[JobMatcher] = None):
        super().__init__(backend)
        self.matcher = matcher or MockJobMatcher(backend.settings.mock_delay_seconds)

    @service_call("生成职位推荐")
    def generate_recommendations(self, user_id: Optional[str] = None) -> List[JobRecommendation]:
        """
        重新生成职位推荐

        Args:
            user_id: 目标身份，为空时使用当前会话的身份

        Returns:
            新的 JobRecommendation 列表
        """
        user_id = user_id or self._require_user_id()

        jobs = self.matcher.match(user_id)
        records = JobRecommendationRepository(self.backend).replace_for_user(
            user_id,
            [job.model_dump() for job in jobs]
        )

        logger.info("[JobService] 已为用户 %s 生成 %d 条职位推荐", user_id, len(records))
        return records

    @service_call("获取职位推荐")
    def list_recommendations(self) -> List[JobRecommendation]:
        """
        获取当前用户的职位推荐（按匹配度倒序）
        """
        user_id = self._require_user_id()
        return JobRecommendationRepository(self.backend).get_all_by_user(user_id)
