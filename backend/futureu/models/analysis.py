"""
分析域模型 - 简历分析表
每次分析调用插入一行，创建后不再修改
"""

from typing import Optional, List, Dict, Any
from sqlmodel import Field, Column, JSON

from .base import TimestampModel, new_uuid


class ResumeAnalysis(TimestampModel, table=True):
    """
    简历分析结果表
    JSON 列的内部结构由 services.analyzers 中的 pydantic 模型约束
    """
    __tablename__ = "resume_analysis"

    # 主键
    id: str = Field(default_factory=new_uuid, primary_key=True)

    # 外键：归属用户，按用户查询最新分析
    user_id: str = Field(foreign_key="profiles.id", index=True, nullable=False)

    # 被分析的简历链接
    resume_url: str = Field(nullable=False)

    # 优势列表，有序：[{"title": ..., "desc": ...}]
    strengths: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))

    # 能力差距标签，有序
    gaps: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    # 推荐练习项目，有序：[{"id": ..., "title": ..., "brief": ...}]
    recommended_projects: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))

    # 技能雷达：[{"dimension": ..., "current": 0-100, "target": 0-100}]
    skills_radar: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))
