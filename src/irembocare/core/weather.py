"""天气健康建议服务（OpenWeatherMap）."""

import logging
from datetime import UTC, datetime
from typing import Any

import httpx

from irembocare.config import Settings
from irembocare.core.retry import RetryExecutor, get_retry_executor
from irembocare.data.districts import DISTRICT_COORDINATES, KIGALI
from irembocare.models.weather import HealthRecommendation, WeatherHealthTips, WeatherReport

logger = logging.getLogger(__name__)

# 天气接口最多重试 2 次
WEATHER_MAX_RETRIES = 2

# 长雨季（疟疾高发）月份
MALARIA_SEASON_MONTHS = range(3, 6)

RECOMMENDATIONS: dict[str, HealthRecommendation] = {
    "heat_warning": HealthRecommendation(
        type="heat_warning",
        priority="high",
        title="Heat Warning",
        message="High temperatures detected. Stay hydrated and avoid prolonged sun exposure.",
        actions=[
            "Drink plenty of water throughout the day",
            "Wear light-colored, loose-fitting clothing",
            "Seek shade during peak hours (10 AM - 4 PM)",
            "Watch for signs of heat exhaustion",
        ],
    ),
    "cold_weather": HealthRecommendation(
        type="cold_weather",
        priority="medium",
        title="Cold Weather Advisory",
        message="Cool temperatures may affect those with respiratory conditions.",
        actions=[
            "Dress warmly in layers",
            "Keep indoor spaces well-ventilated but warm",
            "Be extra cautious if you have asthma or COPD",
            "Ensure adequate nutrition to maintain body heat",
        ],
    ),
    "high_humidity": HealthRecommendation(
        type="high_humidity",
        priority="medium",
        title="High Humidity Alert",
        message="High humidity can worsen respiratory conditions and increase infection risk.",
        actions=[
            "Ensure good ventilation in living spaces",
            "Be aware of increased mosquito activity",
            "Monitor for signs of respiratory discomfort",
            "Keep skin dry to prevent fungal infections",
        ],
    ),
    "rainy_weather": HealthRecommendation(
        type="rainy_weather",
        priority="high",
        title="Rainy Season Health Alert",
        message=(
            "Rainy weather increases risk of waterborne diseases "
            "and mosquito-borne illnesses."
        ),
        actions=[
            "Use mosquito nets and repellents",
            "Ensure drinking water is clean and safe",
            "Avoid walking through stagnant water",
            "Be extra vigilant about malaria symptoms",
            "Keep wounds clean and dry",
        ],
    ),
    "storm_warning": HealthRecommendation(
        type="storm_warning",
        priority="high",
        title="Thunderstorm Safety",
        message="Severe weather can pose health and safety risks.",
        actions=[
            "Stay indoors during the storm",
            "Avoid using electrical appliances",
            "Keep emergency supplies ready",
            "Monitor for flooding in your area",
        ],
    ),
    "malaria_season": HealthRecommendation(
        type="malaria_season",
        priority="high",
        title="Malaria Prevention - Rainy Season",
        message="This is peak malaria season in Rwanda. Take extra precautions.",
        actions=[
            "Sleep under treated mosquito nets",
            "Use mosquito repellent regularly",
            "Eliminate standing water around your home",
            "Seek immediate medical attention for fever",
            "Consider prophylactic medication if traveling",
        ],
    ),
}


def get_district_coordinates(district: str) -> tuple[float, float]:
    """地区坐标，未知地区使用基加利."""
    return DISTRICT_COORDINATES.get(district, KIGALI)


def generate_health_recommendations(
    weather: WeatherReport,
    now: datetime | None = None,
) -> list[HealthRecommendation]:
    """根据天气和季节生成健康建议."""
    now = now or datetime.now(UTC)
    keys: list[str] = []

    if weather.temperature > 30:
        keys.append("heat_warning")
    if weather.temperature < 15:
        keys.append("cold_weather")
    if weather.humidity > 80:
        keys.append("high_humidity")
    if weather.condition == "Rain" or "rain" in weather.description:
        keys.append("rainy_weather")
    if weather.condition == "Thunderstorm":
        keys.append("storm_warning")
    if now.month in MALARIA_SEASON_MONTHS:
        keys.append("malaria_season")

    return [RECOMMENDATIONS[key] for key in keys]


class WeatherService:
    """天气健康建议服务."""

    def __init__(
        self,
        settings: Settings,
        client: httpx.AsyncClient | None = None,
        executor: RetryExecutor | None = None,
    ) -> None:
        self.api_key = settings.weather_api_key
        self.base_url = settings.weather_api_url.rstrip("/")
        self.timeout = settings.external_timeout_seconds
        self._client = client or httpx.AsyncClient(timeout=self.timeout)
        self.executor = executor or get_retry_executor()
        self.policy = self.executor.policy.model_copy(
            update={"max_retries": WEATHER_MAX_RETRIES}
        )

    async def close(self) -> None:
        """关闭客户端."""
        await self._client.aclose()

    async def get_current_weather(
        self,
        district: str = "Kigali",
        now: datetime | None = None,
    ) -> WeatherReport:
        """获取当前天气，失败时回退到演示数据."""
        now = now or datetime.now(UTC)

        if not self.api_key:
            logger.warning("Weather API key 未配置，使用演示数据")
            return self.get_mock_weather(district, now)

        lat, lon = get_district_coordinates(district)
        try:
            response = await self.executor.fetch_with_retry(
                self._client,
                f"{self.base_url}/weather",
                params={
                    "lat": lat,
                    "lon": lon,
                    "appid": self.api_key,
                    "units": "metric",
                },
                timeout=self.timeout,
                policy=self.policy,
                context=f"Weather API - {district}",
            )
            report = self._parse_weather(response.json(), district, now)
        except Exception as e:
            logger.error(f"获取 {district} 天气失败: {e}")
            return self.get_mock_weather(district, now)

        logger.info(
            f"{district} 天气已获取: {report.temperature}°C, {report.condition}",
            extra={
                "temperature": report.temperature,
                "humidity": report.humidity,
                "condition": report.condition,
            },
        )
        return report

    async def get_weather_health_tips(
        self,
        district: str = "Kigali",
        now: datetime | None = None,
    ) -> WeatherHealthTips:
        """天气 + 健康建议."""
        now = now or datetime.now(UTC)
        weather = await self.get_current_weather(district, now)
        return WeatherHealthTips(
            weather=weather,
            health_recommendations=generate_health_recommendations(weather, now),
            location=district,
            timestamp=now,
        )

    def get_mock_weather(self, district: str, now: datetime | None = None) -> WeatherReport:
        """演示天气数据."""
        logger.info(f"使用 {district} 的演示天气数据")
        return WeatherReport(
            location=district,
            temperature=22,
            feels_like=24,
            humidity=65,
            pressure=1013,
            condition="Partly Cloudy",
            description="partly cloudy",
            wind_speed=3.5,
            visibility=10,
            timestamp=now or datetime.now(UTC),
            is_mock_data=True,
        )

    def _parse_weather(
        self,
        data: dict[str, Any],
        district: str,
        now: datetime,
    ) -> WeatherReport:
        """解析 OpenWeatherMap 响应."""
        main = data["main"]
        weather = data["weather"][0]
        visibility = data.get("visibility")

        return WeatherReport(
            location=district,
            temperature=round(main["temp"]),
            feels_like=round(main["feels_like"]),
            humidity=main["humidity"],
            pressure=main["pressure"],
            condition=weather["main"],
            description=weather["description"],
            wind_speed=(data.get("wind") or {}).get("speed") or 0,
            visibility=visibility / 1000 if visibility else None,
            timestamp=now,
        )
