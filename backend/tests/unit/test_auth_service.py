"""
认证服务单元测试
"""

import pytest

from futureu.backend.client import BackendClient
from futureu.services import AuthService, ErrorKind
from supabase_double import SupabaseDouble


@pytest.fixture
def confirming_backend(test_settings, test_db_engine) -> BackendClient:
    """需要邮箱确认的后端"""
    client = SupabaseDouble(test_settings.backend_url, engine=test_db_engine, require_email_confirmation=True)
    return BackendClient(test_settings, client=client)


@pytest.fixture
def confirming_auth_service(confirming_backend, store) -> AuthService:
    return AuthService(confirming_backend, store)


class TestSignIn:
    """测试 sign_in"""

    def test_populates_store(self, auth_service, backend, store, signed_in_user):
        backend.auth.sign_out()

        result = auth_service.sign_in("u1@example.com", "secret-pass")

        assert result.ok
        assert store.user.id == signed_in_user.id
        assert store.user.full_name == "测试用户"
        assert store.user.email == "u1@example.com"

    def test_creates_missing_profile(self, auth_service, backend, store, fresh_identity):
        backend.auth.sign_out()

        user = auth_service.sign_in("fresh@example.com", "secret-pass").unwrap()

        assert user.full_name == "新用户"
        assert store.user.id == fresh_identity.id

    @pytest.mark.parametrize("email,password", [("", "secret-pass"), ("  ", "x"), ("u1@example.com", "")])
    def test_requires_credentials(self, auth_service, email, password):
        result = auth_service.sign_in(email, password)

        assert result.error.kind == ErrorKind.VALIDATION
        assert result.error_message == "请输入邮箱和密码"

    def test_invalid_credentials(self, auth_service, backend, store, signed_in_user):
        backend.auth.sign_out()

        result = auth_service.sign_in("u1@example.com", "wrong-pass")

        assert result.error.kind == ErrorKind.BACKEND
        assert result.error_message == "Invalid login credentials"
        assert store.is_empty

    def test_unconfirmed_email_resends(self, confirming_auth_service, confirming_backend, store):
        confirming_backend.auth.sign_up({"email": "new@example.com", "password": "secret-pass"})
        confirming_backend.auth.sent_confirmations.clear()

        result = confirming_auth_service.sign_in("new@example.com", "secret-pass")

        assert result.error_message == "邮箱未确认，我们已重新发送确认邮件，请查收并点击确认链接"
        assert confirming_backend.auth.sent_confirmations == ["new@example.com"]
        assert store.is_empty


class TestSignUp:
    """测试 sign_up"""

    def test_sign_up_with_session(self, auth_service, store):
        outcome = auth_service.sign_up(
            "new@example.com",
            "secret-pass",
            full_name="王五",
            education="硕士",
            career_goal="AI 产品经理"
        ).unwrap()

        assert outcome.confirmation_required is False
        assert outcome.user.full_name == "王五"
        assert outcome.user.education == "硕士"
        assert store.user == outcome.user

    def test_blank_metadata_uses_defaults(self, auth_service):
        outcome = auth_service.sign_up("new@example.com", "secret-pass").unwrap()

        assert outcome.user.full_name == "新用户"
        assert outcome.user.education is None

    def test_confirmation_required(self, confirming_auth_service, confirming_backend, store):
        outcome = confirming_auth_service.sign_up("new@example.com", "secret-pass", full_name="王五").unwrap()

        assert outcome.confirmation_required is True
        assert outcome.user is None
        assert store.is_empty
        assert confirming_backend.auth.get_session() is None

    def test_confirmed_user_can_sign_in(self, confirming_auth_service, confirming_backend, store):
        confirming_auth_service.sign_up("new@example.com", "secret-pass", full_name="王五").unwrap()
        confirming_backend.auth.confirm_email("new@example.com")

        user = confirming_auth_service.sign_in("new@example.com", "secret-pass").unwrap()

        assert user.full_name == "王五"

    def test_duplicate_email(self, auth_service, signed_in_user):
        result = auth_service.sign_up("u1@example.com", "another-pass")

        assert result.error.kind == ErrorKind.BACKEND
        assert result.error_message == "User already registered"


class TestOAuth:
    """测试 sign_in_with_oauth"""

    def test_google_url(self, auth_service):
        url = auth_service.sign_in_with_oauth(redirect_to="https://app.test/dashboard").unwrap()

        assert url.startswith("https://futureu.test/auth/v1/authorize?")
        assert "provider=google" in url
        assert "redirect_to=https%3A%2F%2Fapp.test%2Fdashboard" in url

    def test_unsupported_provider(self, auth_service):
        result = auth_service.sign_in_with_oauth("myspace")

        assert result.error.kind == ErrorKind.VALIDATION
        assert result.error_message == "不支持的登录方式: myspace"

    @pytest.mark.parametrize("provider", ["github", "linkedin_oidc"])
    def test_other_supported_providers(self, auth_service, provider):
        url = auth_service.sign_in_with_oauth(provider).unwrap()

        assert f"provider={provider}" in url


class TestSessionLifecycle:
    """测试 restore_session 和 sign_out"""

    def test_restore_without_session(self, auth_service, store):
        result = auth_service.restore_session()

        assert result.ok
        assert result.data is None
        assert store.is_empty

    def test_restore_with_session(self, auth_service, store, signed_in_user):
        user = auth_service.restore_session().unwrap()

        assert user.id == signed_in_user.id
        assert store.user.id == signed_in_user.id

    def test_sign_out_clears_everything(self, auth_service, backend, store, signed_in_user):
        auth_service.restore_session().unwrap()
        events = []
        backend.auth.on_auth_state_change(lambda event, session: events.append((event, session)))

        assert auth_service.sign_out().ok

        assert store.is_empty
        assert backend.auth.get_session() is None
        assert [session for _, session in events] == [None]
