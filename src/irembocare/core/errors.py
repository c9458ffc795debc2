"""外部调用错误分类.

所有外部请求失败在调用边界被归入四类之一，重试器只根据类别判断是否重试。
"""

import errno
import socket
from enum import Enum

import httpx

# 可重试的 HTTP 状态码
RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})

# 可重试的底层网络错误码
RETRYABLE_ERRNOS = frozenset({errno.ECONNREFUSED, errno.ECONNRESET, errno.ETIMEDOUT})


class ErrorKind(str, Enum):
    """错误类别."""

    NETWORK = "network"
    SERVER = "server"
    TIMEOUT = "timeout"
    PERMANENT = "permanent"

    @property
    def retryable(self) -> bool:
        """是否可重试."""
        return self is not ErrorKind.PERMANENT


class ServiceError(Exception):
    """外部服务调用错误基类."""

    kind: ErrorKind = ErrorKind.PERMANENT

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response

    @property
    def retryable(self) -> bool:
        """是否可重试."""
        return self.kind.retryable


class TransientNetworkError(ServiceError):
    """网络连接失败（DNS、拒绝连接、连接重置）."""

    kind = ErrorKind.NETWORK


class TransientServerError(ServiceError):
    """服务端临时错误（429 / 502 / 503 / 504）."""

    kind = ErrorKind.SERVER


class RequestTimeoutError(ServiceError):
    """请求超时，已取消进行中的请求."""

    kind = ErrorKind.TIMEOUT


class PermanentError(ServiceError):
    """不可重试的错误."""

    kind = ErrorKind.PERMANENT


def classify_error(exc: BaseException) -> ErrorKind:
    """将任意异常归入错误类别."""
    if isinstance(exc, ServiceError):
        return exc.kind

    if isinstance(exc, httpx.HTTPStatusError):
        if exc.response.status_code in RETRYABLE_STATUS_CODES:
            return ErrorKind.SERVER
        return ErrorKind.PERMANENT

    # httpx 的超时异常包括连接超时
    if isinstance(exc, httpx.TimeoutException):
        return ErrorKind.TIMEOUT
    if isinstance(exc, httpx.NetworkError):
        return ErrorKind.NETWORK

    # TimeoutError 是 OSError 的子类，需先于 OSError 判断
    if isinstance(exc, TimeoutError):
        return ErrorKind.TIMEOUT
    if isinstance(exc, socket.gaierror | ConnectionRefusedError | ConnectionResetError):
        return ErrorKind.NETWORK
    if isinstance(exc, OSError) and exc.errno in RETRYABLE_ERRNOS:
        return ErrorKind.NETWORK

    return ErrorKind.PERMANENT


def is_retryable(exc: BaseException) -> bool:
    """默认重试判定."""
    return classify_error(exc).retryable


def to_service_error(exc: BaseException) -> ServiceError:
    """在调用边界把底层异常转换为 ServiceError."""
    if isinstance(exc, ServiceError):
        return exc

    status_code: int | None = None
    response: httpx.Response | None = None
    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        status_code = response.status_code

    error_types: dict[ErrorKind, type[ServiceError]] = {
        ErrorKind.NETWORK: TransientNetworkError,
        ErrorKind.SERVER: TransientServerError,
        ErrorKind.TIMEOUT: RequestTimeoutError,
        ErrorKind.PERMANENT: PermanentError,
    }
    error_type = error_types[classify_error(exc)]
    return error_type(str(exc) or type(exc).__name__, status_code, response)
