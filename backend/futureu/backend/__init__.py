"""
后端模块
包装 Supabase 客户端，提供认证、行存储和文件存储的统一入口
"""

from .client import BackendClient, create_backend_client, get_backend_client
from .errors import BACKEND_ERRORS, backend_error_message

__all__ = [
    "BackendClient",
    "create_backend_client",
    "get_backend_client",
    "BACKEND_ERRORS",
    "backend_error_message"
]
