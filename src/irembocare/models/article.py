"""新闻文章模型."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from irembocare.core.keywords import HealthCategory


class RawArticle(BaseModel):
    """上游新闻接口返回的原始文章（可能不完整）."""

    title: str | None = None
    description: str | None = None
    url: str | None = None
    source: str | None = Field(default=None, description="来源名称")
    published_at: datetime | None = None
    url_to_image: str | None = None


class RankedArticle(BaseModel):
    """评分并分类后的文章."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    url: str | None = None
    source: str
    published_at: datetime | None = None
    url_to_image: str | None = None
    relevance_score: int
    health_category: HealthCategory


class TrendingTopic(BaseModel):
    """热门话题统计."""

    category: HealthCategory
    count: int


class NewsFeed(BaseModel):
    """新闻列表结果."""

    success: bool = True
    data: list[RankedArticle]
    count: int
    timestamp: datetime
    is_mock_data: bool = False
