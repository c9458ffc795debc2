"""外部请求重试执行器（指数退避 + 随机抖动）."""

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field, model_validator

from irembocare.config import get_settings
from irembocare.core.errors import (
    RETRYABLE_STATUS_CODES,
    PermanentError,
    RequestTimeoutError,
    TransientServerError,
    is_retryable,
    to_service_error,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)

# 抖动上限（秒），只叠加不扣减
MAX_JITTER_SECONDS = 1.0


class RetryPolicy(BaseModel):
    """重试策略."""

    model_config = ConfigDict(frozen=True)

    max_retries: int = Field(default=3, ge=0, description="最大重试次数")
    base_delay: float = Field(default=1.0, gt=0, description="基础延迟（秒）")
    max_delay: float = Field(default=10.0, gt=0, description="最大延迟（秒）")
    backoff_factor: float = Field(default=2.0, gt=1, description="退避系数")

    @model_validator(mode="after")
    def _check_delays(self) -> "RetryPolicy":
        if self.max_delay < self.base_delay:
            msg = "max_delay 不能小于 base_delay"
            raise ValueError(msg)
        return self

    def backoff_delay(self, attempt: int) -> float:
        """第 attempt 次失败后的退避时间（不含抖动）."""
        return min(self.base_delay * self.backoff_factor**attempt, self.max_delay)


class RetryExecutor:
    """重试执行器.

    每次 execute 调用只依赖自身的 operation、policy 和 classifier，
    执行器本身除默认策略外不保存任何可变状态。
    """

    def __init__(
        self,
        policy: RetryPolicy | None = None,
        classifier: Callable[[BaseException], bool] = is_retryable,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        rng: random.Random | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self.policy = policy or RetryPolicy()
        self.classifier = classifier
        self._sleep = sleep
        self._rng = rng or random.Random()
        self._logger = log or logger

    def compute_delay(self, policy: RetryPolicy, attempt: int) -> float:
        """计算重试前的等待时间：退避 + [0, 1s) 抖动."""
        return policy.backoff_delay(attempt) + self._rng.uniform(0, MAX_JITTER_SECONDS)

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        *,
        policy: RetryPolicy | None = None,
        classifier: Callable[[BaseException], bool] | None = None,
        context: str = "API Call",
    ) -> T:
        """
        执行 operation，可重试错误按策略重试.

        重试耗尽或遇到不可重试错误时，原样抛出最后一次的异常。
        """
        policy = policy or self.policy
        classifier = classifier or self.classifier
        total = policy.max_retries + 1

        attempt = 0
        while True:
            self._logger.debug(
                f"{context} - 第 {attempt + 1}/{total} 次尝试",
                extra={"context": context, "attempt": attempt + 1},
            )
            try:
                result = await operation()
            except Exception as e:
                retryable = classifier(e)
                exhausted = attempt >= policy.max_retries

                if not retryable or exhausted:
                    self._logger.error(
                        f"{context} - 请求失败，不再重试"
                        f"（共 {attempt + 1} 次尝试）: {e}",
                        extra={
                            "context": context,
                            "attempts": attempt + 1,
                            "retryable": retryable,
                            "error": str(e),
                        },
                    )
                    raise

                delay = self.compute_delay(policy, attempt)
                self._logger.warning(
                    f"{context} - 第 {attempt + 1} 次尝试失败: {e}，"
                    f"{delay:.2f}s 后重试",
                    extra={
                        "context": context,
                        "attempt": attempt + 1,
                        "delay": delay,
                        "error": str(e),
                        "status": getattr(e, "status_code", None),
                    },
                )
                await self._sleep(delay)
                attempt += 1
                continue

            if attempt > 0:
                self._logger.info(
                    f"{context} - 第 {attempt + 1} 次尝试成功",
                    extra={"context": context, "attempts": attempt + 1},
                )
            return result

    async def fetch_with_retry(
        self,
        client: httpx.AsyncClient,
        url: str,
        *,
        method: str = "GET",
        timeout: float = 30.0,
        policy: RetryPolicy | None = None,
        context: str | None = None,
        **request_kwargs: Any,
    ) -> httpx.Response:
        """
        带超时和重试的 HTTP 请求.

        timeout 同时作为 httpx 的请求超时；
        超时后取消进行中的请求并抛出 RequestTimeoutError；
        非 2xx 响应按状态码转换为 TransientServerError 或 PermanentError。
        """

        async def attempt() -> httpx.Response:
            try:
                response = await asyncio.wait_for(
                    client.request(method, url, timeout=timeout, **request_kwargs),
                    timeout=timeout,
                )
            except TimeoutError as e:
                msg = f"请求超时（{timeout}s）: {url}"
                raise RequestTimeoutError(msg) from e
            except httpx.HTTPError as e:
                raise to_service_error(e) from e

            if response.is_success:
                return response

            msg = f"HTTP {response.status_code}: {response.reason_phrase}"
            if response.status_code in RETRYABLE_STATUS_CODES:
                raise TransientServerError(msg, response.status_code, response)
            raise PermanentError(msg, response.status_code, response)

        return await self.execute(
            attempt,
            policy=policy,
            context=context or f"Fetch {url}",
        )


@lru_cache
def get_retry_executor() -> RetryExecutor:
    """获取默认重试执行器（策略来自配置）."""
    settings = get_settings()
    policy = RetryPolicy(
        max_retries=settings.retry_max_retries,
        base_delay=settings.retry_base_delay_seconds,
        max_delay=settings.retry_max_delay_seconds,
        backoff_factor=settings.retry_backoff_factor,
    )
    return RetryExecutor(policy=policy)
