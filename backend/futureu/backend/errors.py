"""
后端调用异常

Supabase 客户端的认证、行存储、文件存储各自抛出不同的异常类型，
网络层失败则直接抛出 httpx 异常。这里把它们归为一组，服务层统一转换为 BackendError 结果。
"""

import httpx
from supabase import AuthError, PostgrestAPIError, StorageException

# 后端调用可能抛出的全部异常类型
BACKEND_ERRORS = (AuthError, PostgrestAPIError, StorageException, httpx.HTTPError)

# 托管服务在邮箱未确认时返回的错误文案，登录流程按此分支
EMAIL_NOT_CONFIRMED = "Email not confirmed"


def backend_error_message(exc: Exception) -> str:
    """
    提取后端异常的可读信息

    AuthError 和 PostgrestAPIError 带有 message 属性；
    StorageException 以接口返回的字典作为第一个参数

    Args:
        exc: 后端抛出的异常

    Returns:
        错误信息，无法提取时返回 str(exc)
    """
    message = getattr(exc, "message", None)
    if not message and exc.args and isinstance(exc.args[0], dict):
        message = exc.args[0].get("message")
    return message or str(exc)
