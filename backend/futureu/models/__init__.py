"""
数据库模型模块
导出所有表模型和枚举类型
"""

# 用户域模型
from .profile import Profile, DEFAULT_PROFILE_NAME

# 分析与项目域模型
from .analysis import ResumeAnalysis
from .project import ProjectProgress, ProjectStatus

# 推荐域模型
from .job import JobRecommendation

# 基础模型
from .base import TimestampModel

# 定义导出的内容
__all__ = [
    # 用户域
    "Profile", "DEFAULT_PROFILE_NAME",
    # 分析与项目域
    "ResumeAnalysis",
    "ProjectProgress", "ProjectStatus",
    # 推荐域
    "JobRecommendation",
    # 基础模型
    "TimestampModel"
]
