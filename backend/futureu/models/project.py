"""
项目域模型 - 项目进度表
记录用户对某个示例项目的一次尝试
"""

from typing import List, Any
from sqlmodel import Field, Column, JSON
from sqlalchemy import UniqueConstraint

from enum import Enum

from .base import TimestampModel, new_uuid


class ProjectStatus(str, Enum):
    """项目状态枚举：not_started -> in_progress -> completed"""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class ProjectProgress(TimestampModel, table=True):
    """
    项目进度表
    每个用户每个项目只有一行，重新开始项目时复用该行
    """
    __tablename__ = "project_progress"

    # 复合唯一约束：(user_id, project_id)
    __table_args__ = (UniqueConstraint("user_id", "project_id", name="uix_user_project"),)

    # 主键
    id: str = Field(default_factory=new_uuid, primary_key=True)

    # 外键：归属用户
    user_id: str = Field(foreign_key="profiles.id", index=True, nullable=False)

    # 静态项目内容表中的项目 ID（如 "resume-ai"），本系统不建模该表
    project_id: str = Field(nullable=False)

    status: ProjectStatus = Field(default=ProjectStatus.NOT_STARTED, nullable=False)

    # 进度百分比 0-100
    progress: int = Field(default=0, nullable=False)

    # 交付物列表，整体替换，不做合并
    deliverables: List[Any] = Field(default_factory=list, sa_column=Column(JSON))
