"""
用户资料服务

- get_or_create_profile: 读取当前身份的资料，不存在时插入默认资料
- update_profile: 只写入传入的字段，不会把未传入的字段置空
"""

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from futureu.models.profile import Profile
from futureu.repositories.profile_repository import ProfileRepository
from futureu.services.base import BaseService, service_call
from futureu.services.errors import NotFound, ValidationError

logger = logging.getLogger(__name__)


class ProfileUpdate(BaseModel):
    """资料的部分更新，full_name 对应存储层的 name 列"""

    model_config = ConfigDict(extra="forbid")

    full_name: Optional[str] = None
    education: Optional[str] = None
    career_goal: Optional[str] = None
    resume_url: Optional[str] = None
    linkedin_url: Optional[str] = None

    def to_columns(self) -> dict:
        """转换为列名映射，忽略未传入和值为 None 的字段"""
        values = self.model_dump(exclude_unset=True, exclude_none=True)
        if "full_name" in values:
            values["name"] = values.pop("full_name")
        return values


class ProfileService(BaseService):
    """用户资料服务"""

    @service_call("获取用户资料")
    def get_or_create_profile(self) -> Profile:
        """
        获取当前用户资料，不存在时创建默认资料

        Returns:
            Profile 对象
        """
        user_id = self._require_user_id()

        repo = ProfileRepository(self.backend)
        profile = repo.get_by_id(user_id)
        if profile:
            return profile

        logger.info("[ProfileService] 用户资料不存在，正在创建... (ID: %s)", user_id)
        profile = repo.create(user_id=user_id)

        logger.info("[ProfileService] 默认资料创建成功 (ID: %s)", user_id)
        return profile

    @service_call("更新用户资料")
    def update_profile(self, updates: Union[ProfileUpdate, Mapping[str, Any]]) -> Profile:
        """
        更新当前用户资料

        Args:
            updates: ProfileUpdate 或字段字典

        Returns:
            更新后的 Profile 对象；没有需要写入的字段时返回当前资料
        """
        user_id = self._require_user_id()

        if not isinstance(updates, ProfileUpdate):
            try:
                updates = ProfileUpdate(**dict(updates))
            except PydanticValidationError as e:
                fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
                raise ValidationError(f"资料字段无效: {fields}")

        columns = updates.to_columns()

        repo = ProfileRepository(self.backend)
        if not columns:
            profile = repo.get_by_id(user_id)
        else:
            profile = repo.update_fields(user_id, columns)

        if profile is None:
            raise NotFound("用户资料不存在")
        return profile
