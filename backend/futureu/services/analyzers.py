"""
简历分析与职位匹配能力

ResumeAnalyzer 和 JobMatcher 是可替换的接口，当前只提供返回固定结果的
Mock 实现。接入真实的评分引擎时实现同名接口即可，调用方无需修改。
"""

import time
from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel, Field


# ==================== 结构化结果模式 ====================

class Strength(BaseModel):
    """一项优势"""
    title: str
    desc: str


class RecommendedProject(BaseModel):
    """推荐的练习项目，id 对应静态项目内容表"""
    id: str
    title: str
    brief: str


class SkillScore(BaseModel):
    """技能雷达上的一个维度"""
    dimension: str
    current: int = Field(ge=0, le=100, description="当前水平 0-100")
    target: int = Field(ge=0, le=100, description="目标水平 0-100")


class AnalysisPayload(BaseModel):
    """一次简历分析的完整结果"""
    strengths: List[Strength] = Field(default_factory=list)
    gaps: List[str] = Field(default_factory=list)
    recommended_projects: List[RecommendedProject] = Field(default_factory=list)
    skills_radar: List[SkillScore] = Field(default_factory=list)


class JobPayload(BaseModel):
    """一条职位推荐"""
    company: str
    position: str
    location: Optional[str] = None
    salary: Optional[str] = None
    match_score: int = Field(ge=0, le=100)
    match_reason: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


# ==================== 接口 ====================

class ResumeAnalyzer(ABC):
    """简历分析接口"""

    @abstractmethod
    def analyze(self, user_id: str, resume_url: str) -> AnalysisPayload:
        """
        分析一份简历

        Args:
            user_id: 认证身份
            resume_url: 简历公开链接

        Returns:
            AnalysisPayload 分析结果
        """


class JobMatcher(ABC):
    """职位匹配接口"""

    @abstractmethod
    def match(self, user_id: str) -> List[JobPayload]:
        """
        为用户生成职位推荐

        Args:
            user_id: 认证身份

        Returns:
            JobPayload 列表
        """


# ==================== Mock 实现 ====================

MOCK_ANALYSIS = AnalysisPayload(
    strengths=[
        Strength(title="系统性思维", desc="具备结构化分析复杂问题的能力"),
        Strength(title="用户洞察", desc="善于从访谈与数据中提炼可行动结论"),
        Strength(title="增长意识", desc="理解漏斗与增长模型，关注关键指标"),
    ],
    gaps=["SQL 与数据可视化", "算法基础与评估指标", "实验设计（如样本量、显著性）"],
    recommended_projects=[
        RecommendedProject(
            id="resume-ai",
            title="设计 AI 驱动的简历优化工具",
            brief="围绕求职者简历质量评估与优化建议，设计端到端产品方案与原型。"
        ),
        RecommendedProject(
            id="abt-platform",
            title="搭建 A/B 实验配置平台",
            brief="为产品团队提供统一的实验配置、指标追踪与结果解读能力。"
        ),
    ],
    skills_radar=[
        SkillScore(dimension="数据素养", current=45, target=85),
        SkillScore(dimension="用户洞察", current=60, target=90),
        SkillScore(dimension="跨职能协作", current=55, target=88),
        SkillScore(dimension="需求分析", current=62, target=92),
        SkillScore(dimension="产品策略", current=40, target=86),
        SkillScore(dimension="A/B 实验", current=35, target=80),
    ],
)

MOCK_JOBS = [
    JobPayload(
        company="字节跳动",
        position="AI 用户行为分析产品经理",
        location="北京",
        salary="25-40K",
        match_score=92,
        match_reason="该岗位重视复杂系统逻辑，与你的工程背景高度契合。",
        tags=["AI产品", "用户分析", "B端产品"],
    ),
    JobPayload(
        company="腾讯",
        position="智能推荐算法产品经理",
        location="深圳",
        salary="30-45K",
        match_score=89,
        match_reason="你的数据分析能力与推荐算法产品需求完美匹配。",
        tags=["推荐算法", "数据产品", "C端产品"],
    ),
    JobPayload(
        company="阿里巴巴",
        position="AI 商业化产品经理",
        location="杭州",
        salary="28-42K",
        match_score=86,
        match_reason="你的增长意识与商业化产品需求高度匹配。",
        tags=["AI产品", "商业化", "B端产品"],
    ),
]


class MockResumeAnalyzer(ResumeAnalyzer):
    """返回固定分析结果，可选地模拟耗时"""

    def __init__(self, delay_seconds: float = 0.0):
        self.delay_seconds = delay_seconds

    def analyze(self, user_id: str, resume_url: str) -> AnalysisPayload:
        if self.delay_seconds > 0:
            time.sleep(self.delay_seconds)
        return MOCK_ANALYSIS.model_copy(deep=True)


class MockJobMatcher(JobMatcher):
    """返回固定的职位推荐，可选地模拟耗时"""

    def __init__(self, delay_seconds: float = 0.0):
        self.delay_seconds = delay_seconds

    def match(self, user_id: str) -> List[JobPayload]:
        if self.delay_seconds > 0:
            time.sleep(self.delay_seconds)
        return [job.model_copy(deep=True) for job in MOCK_JOBS]
