"""
Repository (DAO) 模块
提供后端行存储操作的抽象层，封装 CRUD 逻辑
"""

from .profile_repository import ProfileRepository
from .analysis_repository import AnalysisRepository
from .project_repository import ProjectProgressRepository
from .job_repository import JobRecommendationRepository

__all__ = [
    "ProfileRepository",
    "AnalysisRepository",
    "ProjectProgressRepository",
    "JobRecommendationRepository"
]
