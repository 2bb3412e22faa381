"""
服务层模块
提供身份作用域的领域服务，所有服务返回 ServiceResult
"""

from .errors import (
    ErrorKind,
    ServiceError,
    Unauthenticated,
    ValidationError,
    NotFound,
    BackendError,
    ServiceResult,
)
from .analyzers import (
    AnalysisPayload,
    JobPayload,
    ResumeAnalyzer,
    JobMatcher,
    MockResumeAnalyzer,
    MockJobMatcher,
)
from .profile_service import ProfileService, ProfileUpdate
from .job_service import JobService
from .resume_service import ResumeService, ResumeFile
from .project_service import ProjectService
from .auth_service import AuthService, SignUpOutcome

__all__ = [
    "ErrorKind",
    "ServiceError",
    "Unauthenticated",
    "ValidationError",
    "NotFound",
    "BackendError",
    "ServiceResult",
    "AnalysisPayload",
    "JobPayload",
    "ResumeAnalyzer",
    "JobMatcher",
    "MockResumeAnalyzer",
    "MockJobMatcher",
    "ProfileService",
    "ProfileUpdate",
    "JobService",
    "ResumeService",
    "ResumeFile",
    "ProjectService",
    "AuthService",
    "SignUpOutcome"
]
