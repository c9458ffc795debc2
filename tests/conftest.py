"""测试配置和 fixtures."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from irembocare.api.deps import get_ai_doctor, get_news_service, get_weather_service
from irembocare.config import Settings
from irembocare.core.ai_doctor import AIDoctorClient
from irembocare.core.news import NewsService
from irembocare.core.retry import RetryExecutor, RetryPolicy
from irembocare.core.store import KeyValueStore
from irembocare.core.weather import WeatherService
from irembocare.main import app
from irembocare.models.database import get_session
from irembocare.models.record import StoredRecord  # noqa: F401


class FakeSleep:
    """记录等待时间而不真正等待."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def fake_sleep() -> FakeSleep:
    """替代 asyncio.sleep."""
    return FakeSleep()


@pytest.fixture
def executor(fake_sleep: FakeSleep) -> RetryExecutor:
    """不真正等待的重试执行器."""
    return RetryExecutor(policy=RetryPolicy(), sleep=fake_sleep)


@pytest.fixture
def offline_settings() -> Settings:
    """未配置任何外部 API key 的配置."""
    return Settings(
        _env_file=None,
        news_api_key="",
        weather_api_key="",
        rapidapi_key="",
        environment="test",
    )


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """内存数据库会话工厂."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    await engine.dispose()


@pytest_asyncio.fixture
async def async_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """创建测试用的内存数据库会话."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def store(async_session: AsyncSession) -> KeyValueStore:
    """键值存储."""
    return KeyValueStore(async_session)


@pytest_asyncio.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
    offline_settings: Settings,
    executor: RetryExecutor,
) -> AsyncGenerator[AsyncClient, None]:
    """创建测试用的 HTTP 客户端（外部服务均使用演示数据）."""

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    async def override_news() -> AsyncGenerator[NewsService, None]:
        service = NewsService(offline_settings, executor=executor)
        yield service
        await service.close()

    async def override_weather() -> AsyncGenerator[WeatherService, None]:
        service = WeatherService(offline_settings, executor=executor)
        yield service
        await service.close()

    async def override_ai_doctor() -> AsyncGenerator[AIDoctorClient, None]:
        doctor = AIDoctorClient(offline_settings, executor=executor)
        yield doctor
        await doctor.close()

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_news_service] = override_news
    app.dependency_overrides[get_weather_service] = override_weather
    app.dependency_overrides[get_ai_doctor] = override_ai_doctor

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
