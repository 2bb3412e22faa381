"""
服务层基类

负责身份解析，以及把服务内部抛出的异常统一转换为 ServiceResult。
"""

import functools
import logging
from typing import Callable, TypeVar

from futureu.backend.client import BackendClient
from futureu.backend.errors import BACKEND_ERRORS, backend_error_message
from futureu.services.errors import BackendError, ServiceError, ServiceResult, Unauthenticated

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)


def service_call(label: str) -> Callable[[F], F]:
    """
    领域服务方法装饰器

    - 正常返回值包装为 ServiceResult.success
    - ServiceError 原样放入 ServiceResult.failure
    - 后端异常（认证、行存储、文件存储、网络）转换为 BackendError
    其余异常属于程序错误，直接向上抛出

    Args:
        label: 操作名称，用于日志和默认错误文案，如 "简历上传"
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs) -> ServiceResult:
            try:
                return ServiceResult.success(func(self, *args, **kwargs))
            except ServiceError as e:
                logger.error("[%s] %s失败: %s", type(self).__name__, label, e.message)
                return ServiceResult.failure(e)
            except BACKEND_ERRORS as e:
                message = backend_error_message(e)
                logger.error("[%s] %s失败: %s", type(self).__name__, label, message)
                return ServiceResult.failure(BackendError(message or f"{label}失败"))
        return wrapper
    return decorator


class BaseService:
    """领域服务基类，持有后端客户端"""

    def __init__(self, backend: BackendClient):
        self.backend = backend

    def _require_user_id(self) -> str:
        """
        从当前会话解析身份

        Raises:
            Unauthenticated: 当前没有会话
        """
        user_id = self.backend.current_user_id()
        if not user_id:
            raise Unauthenticated()
        return user_id
