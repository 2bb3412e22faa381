"""
服务层错误分类与调用结果

领域服务对预期内的失败不抛出异常，而是返回 ServiceResult(data, error)：
- Unauthenticated: 无法从当前会话解析身份
- ValidationError: 发起任何网络调用前的输入校验失败
- NotFound: 预期存在的记录不存在
- BackendError: 后端调用本身失败（网络、权限、存储）
"""

from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """错误类型枚举"""
    UNAUTHENTICATED = "unauthenticated"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    BACKEND = "backend"


class ServiceError(Exception):
    """服务层错误基类，message 直接展示给用户"""

    kind: ErrorKind = ErrorKind.BACKEND
    default_message: str = "操作失败"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(ServiceError):
    kind = ErrorKind.UNAUTHENTICATED
    default_message = "用户未登录"


class ValidationError(ServiceError):
    kind = ErrorKind.VALIDATION
    default_message = "输入无效"


class NotFound(ServiceError):
    kind = ErrorKind.NOT_FOUND
    default_message = "记录不存在"


class BackendError(ServiceError):
    kind = ErrorKind.BACKEND
    default_message = "后端请求失败"


class ServiceResult(Generic[T]):
    """
    领域服务调用结果

    ok 为 True 时 data 有效；否则 error 携带失败原因。
    unwrap() 供偏好异常风格的调用方使用。
    """

    __slots__ = ("data", "error")

    def __init__(self, data: Optional[T] = None, error: Optional[ServiceError] = None):
        self.data = data
        self.error = error

    @classmethod
    def success(cls, data: Optional[T] = None) -> "ServiceResult[T]":
        return cls(data=data)

    @classmethod
    def failure(cls, error: ServiceError) -> "ServiceResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error else None

    def unwrap(self) -> T:
        """返回 data，失败时抛出携带的 ServiceError"""
        if self.error is not None:
            raise self.error
        return self.data

    def __repr__(self) -> str:
        if self.ok:
            return f"ServiceResult(data={self.data!r})"
        return f"ServiceResult(error={self.error.kind.value}: {self.error.message!r})"
