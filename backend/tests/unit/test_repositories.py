"""
Repository 单元测试
验证 Profile、Analysis、ProjectProgress 和 JobRecommendation Repository 的读写操作
"""

from unittest.mock import patch

import pytest
from supabase import PostgrestAPIError

from futureu.models import Profile, ProjectStatus
from futureu.repositories import (
    AnalysisRepository,
    JobRecommendationRepository,
    ProfileRepository,
    ProjectProgressRepository,
)


@pytest.fixture(scope="function")
def profile(backend) -> Profile:
    """
    创建测试资料
    """
    return ProfileRepository(backend).create(user_id="u1", name="测试用户")


class TestProfileRepository:
    """测试 ProfileRepository"""

    def test_create_with_defaults(self, backend):
        """测试只传身份时创建默认资料"""
        profile = ProfileRepository(backend).create(user_id="u-new")

        assert profile.id == "u-new"
        assert profile.name == "新用户"
        assert profile.education is None

    def test_create_duplicate_identity(self, backend, profile):
        """测试同一身份只能有一行资料"""
        with pytest.raises(PostgrestAPIError) as exc_info:
            ProfileRepository(backend).create(user_id="u1")

        assert exc_info.value.code == "23505"

    def test_update_fields_only_touches_given_columns(self, backend, profile):
        """测试部分更新不影响未传入的字段"""
        repo = ProfileRepository(backend)
        repo.update_fields("u1", {"education": "硕士"})

        updated = repo.update_fields("u1", {"career_goal": "数据产品经理"})

        assert updated.education == "硕士"
        assert updated.career_goal == "数据产品经理"
        assert updated.name == "测试用户"
        assert updated.updated_at is not None

    def test_update_missing_profile(self, backend):
        assert ProfileRepository(backend).update_fields("nobody", {"education": "x"}) is None

    def test_update_rejects_unknown_column(self, backend, profile):
        with pytest.raises(ValueError):
            ProfileRepository(backend).update_fields("u1", {"id": "other"})


class TestAnalysisRepository:
    """测试 AnalysisRepository"""

    def test_create_and_get_latest(self, backend, profile):
        """测试每次插入新行，最新查询返回最后一条"""
        repo = AnalysisRepository(backend)
        repo.create("u1", "https://x/1.pdf", {"gaps": ["SQL"]})
        second = repo.create("u1", "https://x/2.pdf", {"gaps": ["算法"]})

        latest = repo.get_latest_by_user("u1")

        assert latest.id == second.id
        assert latest.gaps == ["算法"]
        assert len(repo.get_all_by_user("u1")) == 2

    def test_get_latest_without_rows(self, backend, profile):
        assert AnalysisRepository(backend).get_latest_by_user("u1") is None

    def test_create_without_profile(self, backend):
        """测试外键约束：没有资料行的身份不能写入分析"""
        repo = AnalysisRepository(backend)

        with pytest.raises(PostgrestAPIError) as exc_info:
            repo.create("ghost", "https://x/1.pdf", {})

        assert exc_info.value.code == "23503"
        assert repo.get_all_by_user("ghost") == []


class TestProjectProgressRepository:
    """测试 ProjectProgressRepository"""

    def test_create_and_find(self, backend, profile):
        repo = ProjectProgressRepository(backend)
        record = repo.create(user_id="u1", project_id="resume-ai")

        found = repo.get_by_user_and_project("u1", "resume-ai")

        assert found.id == record.id
        assert found.status == ProjectStatus.IN_PROGRESS
        assert found.progress == 0
        assert found.deliverables == []

    def test_unique_user_project(self, backend, profile):
        repo = ProjectProgressRepository(backend)
        repo.create(user_id="u1", project_id="resume-ai")

        with pytest.raises(PostgrestAPIError):
            repo.create(user_id="u1", project_id="resume-ai")

    def test_create_without_profile(self, backend):
        with pytest.raises(PostgrestAPIError) as exc_info:
            ProjectProgressRepository(backend).create(user_id="ghost", project_id="resume-ai")

        assert exc_info.value.code == "23503"

    def test_restart_keeps_deliverables(self, backend, profile):
        """测试重新开始只重置状态和进度"""
        repo = ProjectProgressRepository(backend)
        record = repo.create(user_id="u1", project_id="resume-ai")
        repo.update_progress(record.id, 100, status=ProjectStatus.COMPLETED, deliverables=["doc-link"])

        restarted = repo.restart(record.id)

        assert restarted.status == ProjectStatus.IN_PROGRESS
        assert restarted.progress == 0
        assert restarted.deliverables == ["doc-link"]

    def test_update_progress_replaces_deliverables(self, backend, profile):
        repo = ProjectProgressRepository(backend)
        record = repo.create(user_id="u1", project_id="abt-platform", deliverables=["a", "b"])

        updated = repo.update_progress(record.id, 30, deliverables=["c"])

        assert updated.progress == 30
        assert updated.deliverables == ["c"]
        assert updated.status == ProjectStatus.IN_PROGRESS

    def test_update_progress_without_deliverables(self, backend, profile):
        repo = ProjectProgressRepository(backend)
        record = repo.create(user_id="u1", project_id="abt-platform", deliverables=["a"])

        updated = repo.update_progress(record.id, 10)

        assert updated.deliverables == ["a"]

    def test_update_missing_record(self, backend):
        assert ProjectProgressRepository(backend).update_progress("missing", 10) is None


class TestJobRecommendationRepository:
    """测试 JobRecommendationRepository"""

    def test_replace_for_user(self, backend, profile):
        """测试整组替换后旧推荐不可见"""
        repo = JobRecommendationRepository(backend)
        old = repo.replace_for_user("u1", [
            {"company": "旧公司", "position": "旧岗位", "match_score": 50},
        ])

        new = repo.replace_for_user("u1", [
            {"company": "A", "position": "PM", "match_score": 70},
            {"company": "B", "position": "PM", "match_score": 90, "tags": ["AI产品"]},
        ])

        rows = repo.get_all_by_user("u1")
        assert [r.company for r in rows] == ["B", "A"]
        assert old[0].id not in {r.id for r in rows}
        assert {r.id for r in new} == {r.id for r in rows}

    def test_replace_does_not_touch_other_users(self, backend, profile):
        ProfileRepository(backend).create(user_id="u2")
        repo = JobRecommendationRepository(backend)
        repo.replace_for_user("u2", [{"company": "C", "position": "PM", "match_score": 60}])

        repo.replace_for_user("u1", [])

        assert len(repo.get_all_by_user("u2")) == 1
        assert repo.get_all_by_user("u1") == []

    def test_failed_insert_keeps_previous_set(self, backend, profile):
        """测试插入失败时不删除旧推荐"""
        repo = JobRecommendationRepository(backend)
        repo.replace_for_user("u1", [{"company": "旧公司", "position": "PM", "match_score": 50}])

        error = PostgrestAPIError({"message": "insert failed", "code": "500", "hint": None, "details": None})
        with patch.object(JobRecommendationRepository, "_insert_rows", side_effect=error):
            with pytest.raises(PostgrestAPIError):
                repo.replace_for_user("u1", [{"company": "新公司", "position": "PM", "match_score": 80}])

        assert [r.company for r in repo.get_all_by_user("u1")] == ["旧公司"]

    def test_replace_without_profile(self, backend):
        repo = JobRecommendationRepository(backend)

        with pytest.raises(PostgrestAPIError) as exc_info:
            repo.replace_for_user("ghost", [{"company": "A", "position": "PM", "match_score": 70}])

        assert exc_info.value.code == "23503"
