"""
路由导航

会话同步只需要"跳转"这一个能力，这里用记录历史的导航器表示展示层路由。
"""

from typing import List

# 未登录时的入口路由
ENTRY_ROUTE = "/"
DASHBOARD_ROUTE = "/dashboard"


class Navigator:
    """记录当前路由和跳转历史"""

    def __init__(self, initial_route: str = ENTRY_ROUTE):
        self.current_route = initial_route
        self.history: List[str] = [initial_route]

    def push(self, route: str) -> None:
        """跳转并保留历史记录"""
        self.history.append(route)
        self.current_route = route

    def replace(self, route: str) -> None:
        """替换当前路由，不新增历史记录"""
        self.history[-1] = route
        self.current_route = route
