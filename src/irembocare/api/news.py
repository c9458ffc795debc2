"""健康新闻 API."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends, Query

from irembocare.api.deps import get_news_service
from irembocare.core.news import NewsService

router = APIRouter(prefix="/api/health-news", tags=["news"])


@router.get("")
async def list_health_news(
    country: str = Query("rw", description="国家代码"),
    category: str = Query("health", description="NewsAPI 分类"),
    page_size: int = Query(10, ge=1, le=100, alias="pageSize", description="数量"),
    language: str = Query("en", description="语言"),
    news: NewsService = Depends(get_news_service),
) -> dict:
    """获取健康新闻（按相关度排序）."""
    feed = await news.get_health_news(
        country=country,
        category=category,
        page_size=page_size,
        language=language,
    )
    return feed.model_dump(mode="json")


@router.get("/trending")
async def trending_topics(
    news: NewsService = Depends(get_news_service),
) -> dict:
    """热门健康话题."""
    topics = await news.get_trending_topics()
    return {
        "success": True,
        "data": [topic.model_dump(mode="json") for topic in topics],
    }


@router.get("/category/{category}")
async def health_news_by_category(
    category: str,
    news: NewsService = Depends(get_news_service),
) -> dict:
    """按话题筛选健康新闻."""
    articles = await news.get_health_news_by_category(category)
    return {
        "success": True,
        "category": category,
        "count": len(articles),
        "timestamp": datetime.now(UTC).isoformat(),
        "data": [article.model_dump(mode="json") for article in articles],
    }
