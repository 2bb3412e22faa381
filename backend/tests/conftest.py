"""
Pytest 测试配置
提供 Supabase 客户端替身、后端客户端、已登录用户和各服务实例等测试基础设施
"""

import sys
from pathlib import Path

import pytest

# 添加项目根目录和测试目录（客户端替身所在）到 sys.path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
sys.path.insert(0, str(Path(__file__).parent))

from futureu.backend.client import BackendClient
from futureu.config import BackendSettings
from futureu.models import Profile
from futureu.repositories import ProfileRepository
from futureu.services import (
    AuthService,
    JobService,
    MockJobMatcher,
    MockResumeAnalyzer,
    ProfileService,
    ProjectService,
    ResumeService,
)
from futureu.session import Navigator, SessionStore
from supabase_double import SupabaseDouble, create_row_store_engine

TEST_BACKEND_URL = "https://futureu.test"
TEST_EMAIL = "u1@example.com"
TEST_PASSWORD = "secret-pass"


# ==================== 后端 Fixtures ====================

@pytest.fixture(scope="function")
def test_db_engine():
    """
    创建测试用的内存行存储引擎
    每个测试函数都会获得一个全新的数据库，外键约束已开启
    """
    engine = create_row_store_engine()

    yield engine

    # 测试结束后自动清理（内存数据库自动销毁）


@pytest.fixture(scope="function")
def supabase_client(test_db_engine) -> SupabaseDouble:
    """
    Supabase 客户端替身
    """
    return SupabaseDouble(TEST_BACKEND_URL, engine=test_db_engine)


@pytest.fixture(scope="function")
def test_settings() -> BackendSettings:
    return BackendSettings(backend_url=TEST_BACKEND_URL, backend_key="test-anon-key")


@pytest.fixture(scope="function")
def backend(test_settings, supabase_client) -> BackendClient:
    """
    使用客户端替身的后端客户端
    """
    return BackendClient(test_settings, client=supabase_client)


@pytest.fixture(scope="function")
def signed_in_user(backend):
    """
    注册并登录测试用户，注册时按元数据创建资料
    """
    response = backend.auth.sign_up({
        "email": TEST_EMAIL,
        "password": TEST_PASSWORD,
        "options": {"data": {"full_name": "测试用户", "education": "本科", "career_goal": "产品经理"}}
    })
    return response.user


@pytest.fixture(scope="function")
def fresh_identity(backend, supabase_client):
    """
    已登录但尚无资料行的新身份
    """
    supabase_client.auth.provision_profiles = False
    response = backend.auth.sign_up({"email": "fresh@example.com", "password": TEST_PASSWORD})
    return response.user


@pytest.fixture(scope="function")
def test_profile(backend, signed_in_user) -> Profile:
    """
    读取测试用户的资料行
    """
    return ProfileRepository(backend).get_by_id(signed_in_user.id)


# ==================== 会话 Fixtures ====================

@pytest.fixture(scope="function")
def store() -> SessionStore:
    return SessionStore()


@pytest.fixture(scope="function")
def navigator() -> Navigator:
    return Navigator(initial_route="/dashboard")


# ==================== Service Fixtures ====================

@pytest.fixture(scope="function")
def profile_service(backend) -> ProfileService:
    return ProfileService(backend)


@pytest.fixture(scope="function")
def job_service(backend) -> JobService:
    return JobService(backend, matcher=MockJobMatcher(delay_seconds=0))


@pytest.fixture(scope="function")
def resume_service(backend, job_service) -> ResumeService:
    """
    创建 ResumeService，时间戳固定以便断言上传路径
    """
    return ResumeService(
        backend,
        analyzer=MockResumeAnalyzer(delay_seconds=0),
        job_service=job_service,
        clock=lambda: 1700000000000
    )


@pytest.fixture(scope="function")
def project_service(backend) -> ProjectService:
    return ProjectService(backend)


@pytest.fixture(scope="function")
def auth_service(backend, store, profile_service) -> AuthService:
    return AuthService(backend, store, profile_service=profile_service)


# ==================== Pytest 配置 ====================

def pytest_configure(config):
    """
    Pytest 初始化配置
    """
    # 标记测试分类
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )
