"""
会话模块
提供客户端会话状态、导航器和会话同步例程
"""

from .store import SessionStore, UserState
from .navigation import Navigator, ENTRY_ROUTE, DASHBOARD_ROUTE
from .bootstrap import SessionBootstrap, MountedView

__all__ = [
    "SessionStore",
    "UserState",
    "Navigator",
    "ENTRY_ROUTE",
    "DASHBOARD_ROUTE",
    "SessionBootstrap",
    "MountedView"
]
