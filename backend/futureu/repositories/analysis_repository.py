"""
简历分析 Repository
提供 resume_analysis 的插入与查询，分析结果创建后不可变
"""

from typing import List, Optional, Dict, Any

from futureu.models.analysis import ResumeAnalysis


class AnalysisRepository:
    """
    简历分析数据访问对象
    只提供插入和查询，不提供更新与删除
    """

    TABLE = "resume_analysis"

    def __init__(self, client):
        """
        初始化 Repository

        Args:
            client: 提供 table(name) 查询构造器的后端客户端
        """
        self.client = client

    def create(
        self,
        user_id: str,
        resume_url: str,
        payload: Dict[str, Any]
    ) -> ResumeAnalysis:
        """
        插入一条新的分析结果

        Args:
            user_id: 认证身份
            resume_url: 被分析的简历链接
            payload: 包含 strengths、gaps、recommended_projects、skills_radar 的字典

        Returns:
            创建的 ResumeAnalysis 对象
        """
        analysis = ResumeAnalysis(
            user_id=user_id,
            resume_url=resume_url,
            strengths=list(payload.get("strengths", [])),
            gaps=list(payload.get("gaps", [])),
            recommended_projects=list(payload.get("recommended_projects", [])),
            skills_radar=list(payload.get("skills_radar", []))
        )
        response = self.client.table(self.TABLE).insert(analysis.model_dump(mode="json")).execute()
        return ResumeAnalysis.model_validate(response.data[0])

    def get_latest_by_user(self, user_id: str) -> Optional[ResumeAnalysis]:
        """
        获取用户最新的一次分析

        Args:
            user_id: 认证身份

        Returns:
            ResumeAnalysis 对象，没有分析记录则返回 None
        """
        response = (
            self.client.table(self.TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return ResumeAnalysis.model_validate(response.data[0])

    def get_all_by_user(self, user_id: str) -> List[ResumeAnalysis]:
        """
        获取用户的全部分析（按创建时间正序）

        Args:
            user_id: 认证身份

        Returns:
            ResumeAnalysis 对象列表
        """
        response = (
            self.client.table(self.TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at")
            .execute()
        )
        return [ResumeAnalysis.model_validate(row) for row in response.data]
