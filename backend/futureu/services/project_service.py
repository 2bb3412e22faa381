"""
项目进度服务

状态流转：not_started -> in_progress -> completed，
start_project 可以从任意状态重新进入 in_progress。
"""

import logging
from typing import Any, List, Optional

from futureu.models.project import ProjectProgress, ProjectStatus
from futureu.repositories.project_repository import ProjectProgressRepository
from futureu.services.base import BaseService, service_call
from futureu.services.errors import NotFound, ValidationError

logger = logging.getLogger(__name__)

COMPLETED_PROGRESS = 100


class ProjectService(BaseService):
    """项目进度服务"""

    @service_call("开始项目")
    def start_project(self, project_id: str) -> ProjectProgress:
        """
        开始一个项目（幂等）

        已有记录时重置为进行中、进度 0，交付物保持不变；否则新建记录

        Args:
            project_id: 项目 ID

        Returns:
            ProjectProgress 对象
        """
        user_id = self._require_user_id()
        if not project_id:
            raise ValidationError("项目 ID 不能为空")

        repo = ProjectProgressRepository(self.backend)
        existing = repo.get_by_user_and_project(user_id, project_id)
        if existing:
            logger.info("[ProjectService] 项目已存在，重新开始: %s", project_id)
            return repo.restart(existing.id)
        return repo.create(user_id=user_id, project_id=project_id)

    @service_call("更新项目进度")
    def update_project_progress(
        self,
        project_id: str,
        progress: int,
        deliverables: Optional[List[Any]] = None
    ) -> ProjectProgress:
        """
        更新项目进度

        进度达到 100 时状态置为 completed；传入交付物时整体替换

        Args:
            project_id: 项目 ID
            progress: 进度，0-100 的整数
            deliverables: 新的交付物列表（可选）

        Returns:
            更新后的 ProjectProgress 对象
        """
        user_id = self._require_user_id()
        # bool 是 int 的子类，需要单独排除
        if isinstance(progress, bool) or not isinstance(progress, int):
            raise ValidationError("进度必须是整数")
        if progress < 0 or progress > COMPLETED_PROGRESS:
            raise ValidationError("进度必须在 0 到 100 之间")

        status = ProjectStatus.COMPLETED if progress >= COMPLETED_PROGRESS else None

        repo = ProjectProgressRepository(self.backend)
        existing = repo.get_by_user_and_project(user_id, project_id)
        if not existing:
            raise NotFound("项目不存在")
        return repo.update_progress(
            existing.id,
            progress=progress,
            status=status,
            deliverables=deliverables
        )

    @service_call("获取项目进度")
    def get_project_progress(self, project_id: str) -> Optional[ProjectProgress]:
        """
        获取当前用户在指定项目上的进度，没有记录返回 None
        """
        user_id = self._require_user_id()
        return ProjectProgressRepository(self.backend).get_by_user_and_project(user_id, project_id)
