"""
项目进度 Repository
提供 project_progress 的增删改查操作
"""

from typing import List, Optional, Any, Dict

from futureu.models.base import utc_now
from futureu.models.project import ProjectProgress, ProjectStatus


class ProjectProgressRepository:
    """
    项目进度数据访问对象
    封装所有与 project_progress 表相关的后端查询
    """

    TABLE = "project_progress"

    def __init__(self, client):
        """
        初始化 Repository

        Args:
            client: 提供 table(name) 查询构造器的后端客户端
        """
        self.client = client

    def get_by_id(self, progress_id: str) -> Optional[ProjectProgress]:
        response = self.client.table(self.TABLE).select("*").eq("id", progress_id).limit(1).execute()
        if not response.data:
            return None
        return ProjectProgress.model_validate(response.data[0])

    def get_by_user_and_project(
        self,
        user_id: str,
        project_id: str
    ) -> Optional[ProjectProgress]:
        """
        获取用户在指定项目上的进度

        Args:
            user_id: 认证身份
            project_id: 项目 ID

        Returns:
            ProjectProgress 对象，不存在则返回 None
        """
        response = (
            self.client.table(self.TABLE)
            .select("*")
            .eq("user_id", user_id)
            .eq("project_id", project_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return ProjectProgress.model_validate(response.data[0])

    def get_all_by_user(self, user_id: str) -> List[ProjectProgress]:
        response = self.client.table(self.TABLE).select("*").eq("user_id", user_id).execute()
        return [ProjectProgress.model_validate(row) for row in response.data]

    def create(
        self,
        user_id: str,
        project_id: str,
        status: ProjectStatus = ProjectStatus.IN_PROGRESS,
        progress: int = 0,
        deliverables: Optional[List[Any]] = None
    ) -> ProjectProgress:
        """
        创建项目进度

        Args:
            user_id: 认证身份
            project_id: 项目 ID
            status: 初始状态（默认进行中）
            progress: 初始进度（默认 0）
            deliverables: 初始交付物（默认空列表）

        Returns:
            创建的 ProjectProgress 对象
        """
        record = ProjectProgress(
            user_id=user_id,
            project_id=project_id,
            status=status,
            progress=progress,
            deliverables=list(deliverables or [])
        )
        response = self.client.table(self.TABLE).insert(record.model_dump(mode="json")).execute()
        return ProjectProgress.model_validate(response.data[0])

    def restart(self, progress_id: str) -> Optional[ProjectProgress]:
        """
        将进度重置为进行中、0%，交付物保持不变

        Args:
            progress_id: 进度记录 ID

        Returns:
            更新后的 ProjectProgress 对象，不存在则返回 None
        """
        return self._update(progress_id, {
            "status": ProjectStatus.IN_PROGRESS.value,
            "progress": 0
        })

    def update_progress(
        self,
        progress_id: str,
        progress: int,
        status: Optional[ProjectStatus] = None,
        deliverables: Optional[List[Any]] = None
    ) -> Optional[ProjectProgress]:
        """
        更新进度，可选地同时更新状态和交付物

        Args:
            progress_id: 进度记录 ID
            progress: 新进度
            status: 新状态（None 表示不修改）
            deliverables: 新交付物列表（None 表示不修改，否则整体替换）

        Returns:
            更新后的 ProjectProgress 对象，不存在则返回 None
        """
        values: Dict[str, Any] = {"progress": progress}
        if status is not None:
            values["status"] = status.value
        if deliverables is not None:
            values["deliverables"] = list(deliverables)
        return self._update(progress_id, values)

    def _update(self, progress_id: str, values: Dict[str, Any]) -> Optional[ProjectProgress]:
        values["updated_at"] = utc_now().isoformat()
        response = self.client.table(self.TABLE).update(values).eq("id", progress_id).execute()
        if not response.data:
            return None
        return ProjectProgress.model_validate(response.data[0])
