"""
后端客户端

包装 Supabase 客户端，提供认证、行存储和文件存储三部分能力，
是领域服务访问后端的唯一入口。
"""

import logging
from typing import Optional

from supabase import Client, create_client

from futureu.config import BackendSettings

logger = logging.getLogger(__name__)


class BackendClient:
    """
    后端客户端

    - auth: 认证与会话
    - table(name): 行存储查询
    - storage: 文件存储
    """

    def __init__(self, settings: BackendSettings, client: Optional[Client] = None):
        """
        初始化客户端

        Args:
            settings: 连接配置
            client: 已创建的 Supabase 客户端，为空时按 settings 创建
        """
        if not settings.backend_url or not settings.backend_key:
            raise ValueError("后端客户端需要服务端点和访问密钥")

        self.settings = settings
        self.client = client or create_client(settings.backend_url, settings.backend_key)
        logger.info("[BackendClient] 已连接后端: %s", settings.backend_url)

    @property
    def auth(self):
        return self.client.auth

    @property
    def storage(self):
        return self.client.storage

    def table(self, name: str):
        """获取指定表的查询构造器"""
        return self.client.table(name)

    def current_user_id(self) -> Optional[str]:
        """从当前会话解析身份，未登录返回 None"""
        session = self.auth.get_session()
        return session.user.id if session else None


# 全局客户端实例，首次调用 get_backend_client() 时创建
_backend_client: Optional[BackendClient] = None


def create_backend_client(
    settings: Optional[BackendSettings] = None,
    client: Optional[Client] = None
) -> BackendClient:
    """
    显式创建后端客户端

    Args:
        settings: 连接配置，为空时从环境变量读取
        client: 已创建的 Supabase 客户端（可选）
    """
    return BackendClient(settings or BackendSettings.from_env(), client=client)


def get_backend_client() -> BackendClient:
    """获取进程级后端客户端的便捷函数

    Raises:
        ValueError: 缺少后端环境变量
    """
    global _backend_client
    if _backend_client is None:
        _backend_client = create_backend_client()
    return _backend_client
