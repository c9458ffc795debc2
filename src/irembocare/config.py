"""应用配置管理."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置（环境变量）."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # News API 配置
    news_api_key: str = ""
    news_api_url: str = "https://newsapi.org/v2"

    # 天气 API 配置
    weather_api_key: str = ""
    weather_api_url: str = "https://api.openweathermap.org/data/2.5"

    # AI 医生（RapidAPI）配置
    rapidapi_key: str = ""
    ai_doctor_url: str = (
        "https://ai-doctor-api-ai-medical-chatbot-healthcare-ai-assistant"
        ".p.rapidapi.com/chat?noqueue=1"
    )
    ai_doctor_host: str = (
        "ai-doctor-api-ai-medical-chatbot-healthcare-ai-assistant.p.rapidapi.com"
    )
    ai_doctor_timeout_seconds: float = 30.0

    # 外部请求重试配置
    retry_max_retries: int = 3
    retry_base_delay_seconds: float = 1.0
    retry_max_delay_seconds: float = 10.0
    retry_backoff_factor: float = 2.0
    external_timeout_seconds: float = 10.0

    # 应用配置
    database_url: str = "sqlite+aiosqlite:///./irembocare.db"
    environment: Literal["development", "test", "production"] = "development"
    log_level: str = "INFO"
    app_version: str = "1.3.0"


@lru_cache
def get_settings() -> Settings:
    """获取应用配置（带缓存）."""
    return Settings()
