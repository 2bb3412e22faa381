"""
用户资料 Repository
提供 profiles 表的增删改查操作
"""

from typing import Optional, Dict, Any

from futureu.models.base import utc_now
from futureu.models.profile import Profile, DEFAULT_PROFILE_NAME


class ProfileRepository:
    """
    用户资料数据访问对象
    封装所有与 profiles 表相关的后端查询
    """

    TABLE = "profiles"

    # 允许写入的列，防止调用方改写主键或时间戳
    UPDATABLE_FIELDS = ("name", "education", "career_goal", "resume_url", "linkedin_url")

    def __init__(self, client):
        """
        初始化 Repository

        Args:
            client: 提供 table(name) 查询构造器的后端客户端
        """
        self.client = client

    def get_by_id(self, user_id: str) -> Optional[Profile]:
        """
        根据身份获取用户资料

        Args:
            user_id: 认证身份

        Returns:
            Profile 对象，不存在则返回 None
        """
        response = self.client.table(self.TABLE).select("*").eq("id", user_id).limit(1).execute()
        if not response.data:
            return None
        return Profile.model_validate(response.data[0])

    def create(
        self,
        user_id: str,
        name: str = DEFAULT_PROFILE_NAME,
        education: Optional[str] = None,
        career_goal: Optional[str] = None,
        resume_url: Optional[str] = None,
        linkedin_url: Optional[str] = None
    ) -> Profile:
        """
        创建用户资料

        Args:
            user_id: 认证身份，同时作为主键
            name: 显示名称
            education: 教育背景（可选）
            career_goal: 职业目标（可选）
            resume_url: 简历链接（可选）
            linkedin_url: LinkedIn 链接（可选）

        Returns:
            创建的 Profile 对象
        """
        profile = Profile(
            id=user_id,
            name=name,
            education=education,
            career_goal=career_goal,
            resume_url=resume_url,
            linkedin_url=linkedin_url
        )
        response = self.client.table(self.TABLE).insert(profile.model_dump(mode="json")).execute()
        return Profile.model_validate(response.data[0])

    def update_fields(self, user_id: str, fields: Dict[str, Any]) -> Optional[Profile]:
        """
        只更新传入的字段，未传入的字段保持原值

        Args:
            user_id: 认证身份
            fields: 列名到新值的映射

        Returns:
            更新后的 Profile 对象，不存在则返回 None

        Raises:
            ValueError: 包含不可更新的列名
        """
        unknown = set(fields) - set(self.UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"不可更新的字段: {sorted(unknown)}")

        values = {**fields, "updated_at": utc_now().isoformat()}
        response = self.client.table(self.TABLE).update(values).eq("id", user_id).execute()
        if not response.data:
            return None
        return Profile.model_validate(response.data[0])
