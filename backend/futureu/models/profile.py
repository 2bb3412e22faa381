"""
用户域模型 - 用户资料表
对应后端 profiles 表，主键即认证身份
"""

from typing import Optional
from sqlmodel import Field

from .base import TimestampModel

# 自动创建资料时使用的默认名称
DEFAULT_PROFILE_NAME = "新用户"


class Profile(TimestampModel, table=True):
    """
    用户资料表
    一个认证身份恰好对应一行资料，本系统从不删除资料
    """
    __tablename__ = "profiles"

    # 主键：等于认证身份（auth user id），不自增
    id: str = Field(primary_key=True)

    # 存储层字段名为 name，展示层映射为 full_name
    name: str = Field(default=DEFAULT_PROFILE_NAME, nullable=False)

    # 注册时填写的教育背景
    education: Optional[str] = Field(default=None)

    # 职业目标
    career_goal: Optional[str] = Field(default=None)

    # 简历公开链接，上传成功后写入
    resume_url: Optional[str] = Field(default=None)

    linkedin_url: Optional[str] = Field(default=None)
