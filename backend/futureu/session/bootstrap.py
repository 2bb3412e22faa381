"""
会话同步例程

每个受保护视图挂载时执行一次：
1. 向后端查询当前会话，没有会话则清空状态并跳转到入口路由
2. 状态为空或缓存身份与会话不一致时，按身份拉取资料并写入状态
3. 订阅会话变化，登出事件到来时清空状态并跳转，视图卸载时取消订阅
"""

import logging
from typing import Any, Optional

from futureu.backend.client import BackendClient
from futureu.backend.errors import BACKEND_ERRORS, backend_error_message
from futureu.models.profile import Profile
from futureu.repositories.profile_repository import ProfileRepository
from futureu.session.navigation import ENTRY_ROUTE, Navigator
from futureu.session.store import SessionStore, UserState

logger = logging.getLogger(__name__)


class MountedView:
    """
    一次挂载的结果

    持有会话变化订阅，作为上下文管理器使用时离开作用域即卸载：
        with bootstrap.mount() as view:
            if view.authenticated:
                render(view.user)
    """

    def __init__(
        self,
        store: SessionStore,
        authenticated: bool,
        subscription: Optional[Any] = None
    ):
        """
        Args:
            store: 会话状态
            authenticated: 会话检查是否通过
            subscription: on_auth_state_change 返回的订阅句柄
        """
        self._store = store
        self.authenticated = authenticated
        self._subscription = subscription

    @property
    def user(self) -> Optional[UserState]:
        return self._store.user

    @property
    def mounted(self) -> bool:
        return self._subscription is not None

    def unmount(self) -> None:
        """取消会话变化订阅，可重复调用"""
        # 订阅句柄不保证重复取消安全，只取消一次
        subscription, self._subscription = self._subscription, None
        if subscription is not None:
            subscription.unsubscribe()

    def __enter__(self) -> "MountedView":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unmount()


class SessionBootstrap:
    """
    会话同步例程

    使用示例：
        bootstrap = SessionBootstrap(backend, store, navigator)
        with bootstrap.mount() as view:
            ...
    """

    def __init__(
        self,
        backend: BackendClient,
        store: SessionStore,
        navigator: Navigator,
        entry_route: str = ENTRY_ROUTE
    ):
        self.backend = backend
        self.store = store
        self.navigator = navigator
        self.entry_route = entry_route

    def mount(self) -> MountedView:
        """
        执行会话检查，认证通过时注册会话变化订阅

        Returns:
            MountedView，authenticated=False 时未注册订阅且已跳转到入口路由
        """
        self.store.set_loading(True)
        try:
            authenticated = self._check_session()
        finally:
            self.store.set_loading(False)

        if not authenticated:
            return MountedView(self.store, authenticated=False)

        subscription = self.backend.auth.on_auth_state_change(self._on_auth_state_change)
        return MountedView(self.store, authenticated=True, subscription=subscription)

    def _check_session(self) -> bool:
        try:
            session = self.backend.auth.get_session()
        except BACKEND_ERRORS as e:
            logger.error("[SessionBootstrap] 会话检查失败: %s", backend_error_message(e))
            session = None

        if session is None:
            self._sign_out_locally()
            return False

        cached = self.store.user
        if cached is not None and cached.id == session.user.id:
            return True

        profile = self._fetch_profile(session.user.id)
        if profile is None:
            self._sign_out_locally()
            return False

        self.store.login(UserState.from_profile(profile, session.user.email))
        return True

    def _fetch_profile(self, user_id: str) -> Optional[Profile]:
        try:
            profile = ProfileRepository(self.backend).get_by_id(user_id)
        except BACKEND_ERRORS as e:
            logger.error("[SessionBootstrap] 获取用户资料失败: %s", backend_error_message(e))
            return None

        if profile is None:
            logger.error("[SessionBootstrap] 获取用户资料失败: 资料不存在 (ID: %s)", user_id)
        return profile

    def _on_auth_state_change(
        self,
        event: str,
        session: Optional[Any]
    ) -> None:
        if session is None:
            logger.info("[SessionBootstrap] 收到会话变化 %s，清空会话状态", event)
            self._sign_out_locally()

    def _sign_out_locally(self) -> None:
        self.store.logout()
        self.navigator.replace(self.entry_route)
