"""天气与健康建议模型."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class WeatherReport(BaseModel):
    """当前天气."""

    location: str
    temperature: int = Field(description="摄氏度（取整）")
    feels_like: int
    humidity: int = Field(description="相对湿度 %")
    pressure: int
    condition: str
    description: str
    wind_speed: float = 0
    visibility: float | None = Field(default=None, description="能见度（公里）")
    timestamp: datetime
    is_mock_data: bool = False


class HealthRecommendation(BaseModel):
    """基于天气的健康建议."""

    type: str
    priority: Literal["high", "medium", "low"]
    title: str
    message: str
    actions: list[str]


class WeatherHealthTips(BaseModel):
    """天气健康提示."""

    weather: WeatherReport
    health_recommendations: list[HealthRecommendation]
    location: str
    timestamp: datetime
