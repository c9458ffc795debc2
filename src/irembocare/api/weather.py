"""天气健康提示 API."""

from fastapi import APIRouter, Depends, Query

from irembocare.api.deps import get_weather_service
from irembocare.core.weather import WeatherService

router = APIRouter(prefix="/api/weather-health-tips", tags=["weather"])


@router.get("")
async def weather_health_tips(
    location: str = Query("Kigali", description="地区"),
    weather: WeatherService = Depends(get_weather_service),
) -> dict:
    """获取基于天气的健康建议."""
    tips = await weather.get_weather_health_tips(location)
    return {
        "success": True,
        "location": location,
        "data": tips.model_dump(mode="json"),
    }
