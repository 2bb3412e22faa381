"""
认证服务

封装入口页的登录、注册、Google 登录和导航栏的登出，
登录成功后拉取（或创建）用户资料并写入会话状态。
"""

import logging
from typing import Optional

from pydantic import BaseModel
from supabase import AuthApiError

from futureu.backend.client import BackendClient
from futureu.backend.errors import EMAIL_NOT_CONFIRMED
from futureu.services.base import BaseService, service_call
from futureu.services.errors import BackendError, ValidationError
from futureu.services.profile_service import ProfileService
from futureu.session.store import SessionStore, UserState

logger = logging.getLogger(__name__)

# 入口页提供的第三方登录方式
SUPPORTED_OAUTH_PROVIDERS = ("google", "github", "linkedin_oidc")


class SignUpOutcome(BaseModel):
    """注册结果，需要确认邮箱时 user 为空"""
    user: Optional[UserState] = None
    confirmation_required: bool = False


class AuthService(BaseService):
    """认证服务"""

    def __init__(
        self,
        backend: BackendClient,
        store: SessionStore,
        profile_service: Optional[ProfileService] = None
    ):
        super().__init__(backend)
        self.store = store
        self.profile_service = profile_service or ProfileService(backend)

    @staticmethod
    def _require_credentials(email: str, password: str) -> None:
        if not email or not email.strip() or not password:
            raise ValidationError("请输入邮箱和密码")

    def _load_user_state(self, email: str) -> UserState:
        """拉取（或创建）当前身份的资料并写入会话状态"""
        result = self.profile_service.get_or_create_profile()
        if not result.ok:
            raise BackendError("无法获取用户资料")
        user = UserState.from_profile(result.data, email)
        self.store.login(user)
        return user

    @service_call("登录")
    def sign_in(self, email: str, password: str) -> UserState:
        """
        邮箱密码登录

        邮箱未确认时自动重发确认邮件，并以提示信息作为错误返回

        Returns:
            写入会话状态的 UserState
        """
        self._require_credentials(email, password)
        try:
            response = self.backend.auth.sign_in_with_password({"email": email, "password": password})
        except AuthApiError as e:
            if e.message != EMAIL_NOT_CONFIRMED:
                raise
            self.backend.auth.resend({"type": "signup", "email": email})
            raise BackendError("邮箱未确认，我们已重新发送确认邮件，请查收并点击确认链接")

        return self._load_user_state(response.user.email)

    @service_call("注册")
    def sign_up(
        self,
        email: str,
        password: str,
        full_name: str = "",
        education: str = "",
        career_goal: str = "",
        email_redirect_to: Optional[str] = None
    ) -> SignUpOutcome:
        """
        邮箱密码注册

        注册元数据由后端的新用户触发器写入资料行

        Args:
            email_redirect_to: 确认邮件中的回调地址（可选）

        Returns:
            SignUpOutcome，需要确认邮箱时 confirmation_required=True 且不修改会话状态
        """
        self._require_credentials(email, password)
        options = {
            "data": {
                "full_name": full_name,
                "education": education,
                "career_goal": career_goal,
            }
        }
        if email_redirect_to:
            options["email_redirect_to"] = email_redirect_to

        response = self.backend.auth.sign_up({"email": email, "password": password, "options": options})

        if response.session is None:
            logger.info("[AuthService] 注册成功，等待邮箱确认: %s", email)
            return SignUpOutcome(confirmation_required=True)

        return SignUpOutcome(user=self._load_user_state(response.user.email))

    @service_call("第三方登录")
    def sign_in_with_oauth(self, provider: str = "google", redirect_to: Optional[str] = None) -> str:
        """
        发起 OAuth 登录

        Returns:
            授权地址，调用方跳转后由回调地址完成登录
        """
        if provider not in SUPPORTED_OAUTH_PROVIDERS:
            raise ValidationError(f"不支持的登录方式: {provider}")

        credentials = {"provider": provider}
        if redirect_to:
            credentials["options"] = {"redirect_to": redirect_to}
        return self.backend.auth.sign_in_with_oauth(credentials).url

    @service_call("会话检查")
    def restore_session(self) -> Optional[UserState]:
        """
        已有会话时加载资料并写入会话状态

        Returns:
            UserState，未登录时返回 None
        """
        session = self.backend.auth.get_session()
        if session is None:
            return None
        return self._load_user_state(session.user.email)

    @service_call("登出")
    def sign_out(self) -> None:
        """登出，后端会通知所有会话变化订阅者"""
        self.backend.auth.sign_out()
        self.store.logout()
