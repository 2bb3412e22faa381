"""
客户端会话状态

保存当前登录用户的反规范化资料。不做持久化，每次挂载视图时由
SessionBootstrap 从后端重新加载。以显式对象在调用方之间传递。
"""

from typing import Optional

from pydantic import BaseModel

from futureu.models.profile import Profile


class UserState(BaseModel):
    """当前用户的展示资料"""
    id: str
    # 对应 profiles.name
    full_name: str
    # 取自会话，不存储在 profiles 表中
    email: str
    education: Optional[str] = None
    career_goal: Optional[str] = None
    resume_url: Optional[str] = None

    @classmethod
    def from_profile(cls, profile: Profile, email: str) -> "UserState":
        """由资料行和会话邮箱构建展示资料"""
        return cls(
            id=profile.id,
            full_name=profile.name,
            email=email,
            education=profile.education,
            career_goal=profile.career_goal,
            resume_url=profile.resume_url
        )


class SessionStore:
    """
    会话状态容器

    应用启动时创建为空，登录或挂载时填充，登出时清空。
    单线程事件模型下后写入者覆盖先写入者，不需要加锁。
    """

    def __init__(self):
        self.user: Optional[UserState] = None
        self.loading: bool = False

    @property
    def is_empty(self) -> bool:
        return self.user is None

    def login(self, user: UserState) -> None:
        self.user = user

    def logout(self) -> None:
        self.user = None

    def set_loading(self, value: bool) -> None:
        self.loading = value

    def patch(self, **fields) -> Optional[UserState]:
        """
        更新当前用户的部分字段（如上传简历后的 resume_url）

        Returns:
            更新后的 UserState，未登录时返回 None
        """
        if self.user is None:
            return None
        self.user = self.user.model_copy(update=fields)
        return self.user
