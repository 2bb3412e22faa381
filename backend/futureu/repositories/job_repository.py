"""
职位推荐 Repository
提供 job_recommendations 的查询与整组替换
"""

from typing import List, Dict, Any

from futureu.models.job import JobRecommendation


class JobRecommendationRepository:
    """
    职位推荐数据访问对象
    推荐只能整组替换，不提供单行更新
    """

    TABLE = "job_recommendations"

    def __init__(self, client):
        """
        初始化 Repository

        Args:
            client: 提供 table(name) 查询构造器的后端客户端
        """
        self.client = client

    def get_all_by_user(self, user_id: str) -> List[JobRecommendation]:
        """
        获取用户的全部推荐（按匹配度倒序）

        Args:
            user_id: 认证身份

        Returns:
            JobRecommendation 对象列表
        """
        response = (
            self.client.table(self.TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("match_score", desc=True)
            .execute()
        )
        return [JobRecommendation.model_validate(row) for row in response.data]

    def replace_for_user(
        self,
        user_id: str,
        rows: List[Dict[str, Any]]
    ) -> List[JobRecommendation]:
        """
        用新推荐替换用户的旧推荐

        先插入新推荐再按 ID 删除旧推荐，读取方不会观察到空集合；
        插入失败时旧推荐保持不变

        Args:
            user_id: 认证身份
            rows: 新推荐字段字典列表（不含 user_id）

        Returns:
            新插入的 JobRecommendation 对象列表
        """
        old_ids = self._get_ids_by_user(user_id)

        records = [JobRecommendation(user_id=user_id, **row) for row in rows]
        inserted = self._insert_rows([record.model_dump(mode="json") for record in records])

        if old_ids:
            self._delete_by_ids(old_ids)
        return inserted

    def _get_ids_by_user(self, user_id: str) -> List[str]:
        response = self.client.table(self.TABLE).select("id").eq("user_id", user_id).execute()
        return [row["id"] for row in response.data]

    def _insert_rows(self, rows: List[Dict[str, Any]]) -> List[JobRecommendation]:
        """
        批量插入推荐（内部方法）

        Args:
            rows: 完整的行字典列表

        Returns:
            插入后的 JobRecommendation 对象列表
        """
        if not rows:
            return []
        response = self.client.table(self.TABLE).insert(rows).execute()
        return [JobRecommendation.model_validate(row) for row in response.data]

    def _delete_by_ids(self, ids: List[str]) -> int:
        """
        按 ID 删除推荐（内部方法）

        Args:
            ids: 推荐 ID 列表

        Returns:
            删除的推荐数量
        """
        response = self.client.table(self.TABLE).delete().in_("id", ids).execute()
        return len(response.data)
