"""健康新闻服务（NewsAPI）."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

import httpx

from irembocare.config import Settings
from irembocare.core.errors import PermanentError
from irembocare.core.ranking import ArticleRanker
from irembocare.core.retry import RetryExecutor, get_retry_executor
from irembocare.models.article import NewsFeed, RankedArticle, RawArticle, TrendingTopic

logger = logging.getLogger(__name__)

# 新闻接口最多重试 2 次
NEWS_MAX_RETRIES = 2

# (标题, 摘要, 来源, 距今小时数)
MOCK_ARTICLES: tuple[tuple[str, str, str, int], ...] = (
    (
        "Rwanda Launches New Malaria Prevention Campaign",
        "The Ministry of Health announces a comprehensive malaria prevention "
        "program targeting high-risk areas across Rwanda.",
        "Rwanda Health Ministry",
        2,
    ),
    (
        "COVID-19 Vaccination Drive Reaches Rural Communities",
        "Mobile vaccination units are bringing COVID-19 vaccines to remote areas "
        "of Rwanda, improving accessibility for all citizens.",
        "Rwanda Biomedical Centre",
        6,
    ),
    (
        "Maternal Health Services Expanded in Eastern Province",
        "New maternal health centers are being established to reduce maternal "
        "mortality rates and improve prenatal care.",
        "Rwanda Health News",
        12,
    ),
    (
        "Digital Health Records System Improves Patient Care",
        "Rwanda's new electronic health records system is streamlining patient "
        "care and improving health outcomes nationwide.",
        "Health Tech Rwanda",
        24,
    ),
    (
        "Nutrition Program Targets Child Malnutrition",
        "A new government initiative aims to reduce child malnutrition rates "
        "through community-based nutrition programs.",
        "UNICEF Rwanda",
        36,
    ),
)


def _parse_published_at(value: Any) -> datetime | None:
    """解析 ISO 时间，失败返回 None."""
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


class NewsService:
    """健康新闻服务."""

    def __init__(
        self,
        settings: Settings,
        client: httpx.AsyncClient | None = None,
        executor: RetryExecutor | None = None,
        ranker: ArticleRanker | None = None,
    ) -> None:
        self.api_key = settings.news_api_key
        self.base_url = settings.news_api_url.rstrip("/")
        self.timeout = settings.external_timeout_seconds
        self._client = client or httpx.AsyncClient(timeout=self.timeout)
        self.executor = executor or get_retry_executor()
        self.ranker = ranker or ArticleRanker()
        self.policy = self.executor.policy.model_copy(
            update={"max_retries": NEWS_MAX_RETRIES}
        )

    async def close(self) -> None:
        """关闭客户端."""
        await self._client.aclose()

    async def get_health_news(
        self,
        country: str = "rw",
        category: str = "health",
        page_size: int = 10,
        language: str = "en",
        now: datetime | None = None,
    ) -> NewsFeed:
        """
        获取健康新闻.

        优先取国家头条，无结果时按关键词搜索；任何失败都回退到演示数据。
        """
        now = now or datetime.now(UTC)

        if not self.api_key:
            logger.warning("News API key 未配置，使用演示数据")
            return self.get_mock_news(page_size, now)

        try:
            data = await self._get_json(
                "/top-headlines",
                {
                    "country": country,
                    "category": category,
                    "pageSize": page_size,
                },
                context="News API - Country Headlines",
            )

            if not data.get("articles"):
                data = await self._get_json(
                    "/everything",
                    {
                        "q": "health AND (Rwanda OR Africa)",
                        "language": language,
                        "pageSize": page_size,
                        "sortBy": "publishedAt",
                    },
                    context="News API - General Health",
                )

            if data.get("status") == "error":
                msg = data.get("message") or "News API error"
                raise PermanentError(msg)

            raw_articles = self._parse_articles(data.get("articles") or [])
            logger.info(
                f"健康新闻已获取: {len(raw_articles)} 篇",
                extra={"country": country, "category": category},
            )

            ranked = self.ranker.rank(raw_articles, now)
            return NewsFeed(data=ranked, count=len(ranked), timestamp=now)

        except Exception as e:
            logger.error(
                f"获取健康新闻失败: {e}",
                extra={"country": country, "category": category},
            )
            return self.get_mock_news(page_size, now)

    async def get_health_news_by_category(
        self,
        category: str,
        page_size: int = 10,
        now: datetime | None = None,
    ) -> list[RankedArticle]:
        """按话题筛选健康新闻."""
        feed = await self.get_health_news(page_size=page_size, now=now)
        return self.ranker.filter_by_topic(feed.data, category)

    async def get_trending_topics(self, now: datetime | None = None) -> list[TrendingTopic]:
        """热门健康话题."""
        feed = await self.get_health_news(page_size=50, now=now)
        return self.ranker.trending(feed.data)

    def get_mock_news(self, page_size: int = 10, now: datetime | None = None) -> NewsFeed:
        """演示新闻数据."""
        now = now or datetime.now(UTC)
        raw_articles = [
            RawArticle(
                title=title,
                description=description,
                url=f"https://example.com/news/{index}",
                source=source,
                published_at=now - timedelta(hours=hours_ago),
            )
            for index, (title, description, source, hours_ago) in enumerate(
                MOCK_ARTICLES, 1
            )
        ]
        ranked = self.ranker.rank(raw_articles, now)[:page_size]

        logger.info("使用演示健康新闻数据")
        return NewsFeed(
            data=ranked,
            count=len(ranked),
            timestamp=now,
            is_mock_data=True,
        )

    async def _get_json(
        self,
        path: str,
        params: dict[str, Any],
        context: str,
    ) -> dict[str, Any]:
        """带重试的 GET 请求."""
        response = await self.executor.fetch_with_retry(
            self._client,
            f"{self.base_url}{path}",
            params={**params, "apiKey": self.api_key},
            timeout=self.timeout,
            policy=self.policy,
            context=context,
        )
        return response.json()

    def _parse_articles(self, items: list[dict[str, Any]]) -> list[RawArticle]:
        """解析 NewsAPI 文章列表."""
        articles: list[RawArticle] = []

        for item in items:
            source = item.get("source") or {}
            articles.append(
                RawArticle(
                    title=item.get("title"),
                    description=item.get("description"),
                    url=item.get("url"),
                    source=source.get("name") if isinstance(source, dict) else None,
                    published_at=_parse_published_at(item.get("publishedAt")),
                    url_to_image=item.get("urlToImage"),
                )
            )

        return articles
