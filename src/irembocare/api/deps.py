"""路由依赖."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Header, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from irembocare.config import get_settings
from irembocare.core.accounts import AccountService
from irembocare.core.ai_doctor import AIDoctorClient
from irembocare.core.news import NewsService
from irembocare.core.store import KeyValueStore
from irembocare.core.weather import WeatherService
from irembocare.models.account import SessionUser
from irembocare.models.database import get_session


async def get_news_service() -> AsyncGenerator[NewsService, None]:
    """新闻服务（请求结束时关闭客户端）."""
    service = NewsService(get_settings())
    try:
        yield service
    finally:
        await service.close()


async def get_weather_service() -> AsyncGenerator[WeatherService, None]:
    """天气服务."""
    service = WeatherService(get_settings())
    try:
        yield service
    finally:
        await service.close()


async def get_ai_doctor() -> AsyncGenerator[AIDoctorClient, None]:
    """AI 医生客户端."""
    client = AIDoctorClient(get_settings())
    try:
        yield client
    finally:
        await client.close()


def get_account_service(
    session: AsyncSession = Depends(get_session),
) -> AccountService:
    """账户服务."""
    return AccountService(KeyValueStore(session))


def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    """从 Authorization 头取出 Bearer token."""
    token = (authorization or "").removeprefix("Bearer ").strip()
    if not token:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return token


async def get_current_user(
    token: str = Depends(get_bearer_token),
    accounts: AccountService = Depends(get_account_service),
) -> SessionUser:
    """当前登录用户."""
    user = await accounts.get_session_user(token)
    if user is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user
