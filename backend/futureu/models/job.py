"""
推荐域模型 - 职位推荐表
每次重新生成时整组替换，不单独更新
"""

from typing import Optional, List
from sqlmodel import Field, Column, JSON

from .base import TimestampModel, new_uuid


class JobRecommendation(TimestampModel, table=True):
    """
    职位推荐表
    列表页按 match_score 倒序展示
    """
    __tablename__ = "job_recommendations"

    # 主键
    id: str = Field(default_factory=new_uuid, primary_key=True)

    # 外键：归属用户
    user_id: str = Field(foreign_key="profiles.id", index=True, nullable=False)

    company: str = Field(nullable=False)

    # 岗位名称
    position: str = Field(nullable=False)

    location: Optional[str] = Field(default=None)

    # 薪资区间文本，如 "25-40K"
    salary: Optional[str] = Field(default=None)

    # 匹配度 0-100
    match_score: int = Field(nullable=False)

    match_reason: Optional[str] = Field(default=None)

    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON))
