"""IremboCare+ 主应用入口."""

import logging
import resource
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from irembocare.api import ai_doctor, auth, medication, news, services, weather
from irembocare.config import get_settings
from irembocare.models.database import close_db, init_db

SERVICE_NAME = "IremboCare+"

# 配置日志
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

_started_at = time.monotonic()


def _uptime() -> float:
    """进程运行时长（秒）."""
    return round(time.monotonic() - _started_at, 3)


def _memory() -> dict:
    """进程内存占用（Linux 下 ru_maxrss 单位为 KB）."""
    usage = resource.getrusage(resource.RUSAGE_SELF)
    return {"max_rss_kb": usage.ru_maxrss}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """应用生命周期管理."""
    app_settings = get_settings()

    logger.info("正在初始化数据库...")
    await init_db(app_settings.database_url)

    logger.info(f"{SERVICE_NAME} 启动完成！环境: {app_settings.environment}")
    yield

    logger.info("正在关闭...")
    await close_db()
    logger.info(f"{SERVICE_NAME} 已关闭")


app = FastAPI(
    title=SERVICE_NAME,
    description="卢旺达健康信息服务 - 健康新闻、天气健康提示与医疗机构查询",
    version=get_settings().app_version,
    lifespan=lifespan,
)

# CORS 配置
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 注册路由
app.include_router(news.router)
app.include_router(weather.router)
app.include_router(services.router)
app.include_router(medication.router)
app.include_router(ai_doctor.router)
app.include_router(auth.router)


@app.get("/")
async def root() -> dict:
    """根路径."""
    return {
        "name": SERVICE_NAME,
        "version": get_settings().app_version,
        "description": "卢旺达健康信息服务",
    }


@app.get("/health")
async def health() -> dict:
    """健康检查."""
    app_settings = get_settings()
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": app_settings.app_version,
        "timestamp": datetime.now(UTC).isoformat(),
        "uptime": _uptime(),
        "memory": _memory(),
        "environment": app_settings.environment,
    }


@app.get("/ready")
async def ready() -> dict:
    """就绪检查."""
    return {
        "status": "ready",
        "service": SERVICE_NAME,
        "timestamp": datetime.now(UTC).isoformat(),
    }


@app.get("/metrics")
async def metrics() -> dict:
    """基础运行指标."""
    return {
        "uptime": _uptime(),
        "memory": _memory(),
        "timestamp": datetime.now(UTC).isoformat(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "irembocare.main:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )
