"""AI 医生问诊代理（RapidAPI）."""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, Field

from irembocare.config import Settings
from irembocare.core.retry import RetryExecutor, get_retry_executor

logger = logging.getLogger(__name__)

DEMO_NOTE = "Demo response - API service temporarily unavailable"

DEMO_RESPONSE: dict[str, Any] = {
    "response": (
        "I understand you're asking about malaria. While I can provide general "
        "information, it's important to consult with a healthcare professional for "
        "proper diagnosis and treatment. Malaria is a serious disease caused by "
        "parasites transmitted through mosquito bites. Common symptoms include "
        "fever, chills, headache, and fatigue. If you suspect you have malaria, "
        "please seek immediate medical attention at your nearest healthcare facility."
    ),
    "confidence": 0.85,
    "recommendations": [
        "Seek immediate medical attention",
        "Get tested for malaria",
        "Follow prescribed treatment",
        "Use mosquito nets and repellents",
    ],
}


class AIDoctorQuery(BaseModel):
    """问诊请求."""

    message: str = Field(min_length=1, max_length=1000)
    specialization: str | None = None
    language: str | None = None


class AIDoctorReply(BaseModel):
    """问诊结果."""

    data: dict[str, Any]
    note: str | None = None


class AIDoctorError(Exception):
    """AI 服务返回了无效内容."""


class AIDoctorClient:
    """AI 医生接口客户端.

    问诊请求不重试；超时、网络和限流错误原样抛出，由路由层映射状态码。
    """

    def __init__(
        self,
        settings: Settings,
        client: httpx.AsyncClient | None = None,
        executor: RetryExecutor | None = None,
    ) -> None:
        self.api_key = settings.rapidapi_key
        self.url = settings.ai_doctor_url
        self.host = settings.ai_doctor_host
        self.timeout = settings.ai_doctor_timeout_seconds
        self._client = client or httpx.AsyncClient(timeout=self.timeout)
        self.executor = executor or get_retry_executor()
        self.policy = self.executor.policy.model_copy(update={"max_retries": 0})

    async def close(self) -> None:
        """关闭客户端."""
        await self._client.aclose()

    def demo_reply(self) -> AIDoctorReply:
        """演示回复."""
        return AIDoctorReply(data=DEMO_RESPONSE, note=DEMO_NOTE)

    async def ask(self, query: AIDoctorQuery) -> AIDoctorReply:
        """发送问诊请求."""
        if not self.api_key:
            logger.warning("RapidAPI key 未配置，返回演示回复")
            return self.demo_reply()

        response = await self.executor.fetch_with_retry(
            self._client,
            self.url,
            method="POST",
            timeout=self.timeout,
            policy=self.policy,
            context="AI Doctor API",
            headers={
                "x-rapidapi-key": self.api_key,
                "x-rapidapi-host": self.host,
            },
            json=query.model_dump(),
        )

        try:
            result = response.json()
        except ValueError as e:
            msg = "AI 服务返回的不是 JSON"
            raise AIDoctorError(msg) from e

        if not isinstance(result, dict):
            msg = "AI 服务返回格式无效"
            raise AIDoctorError(msg)

        return AIDoctorReply(data=result)
