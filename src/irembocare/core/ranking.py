"""健康新闻排序服务."""

import base64
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime

from irembocare.core.keywords import (
    CATEGORY_RULES,
    KEYWORD_WEIGHTS,
    RECENCY_BONUSES,
    HealthCategory,
)
from irembocare.models.article import RankedArticle, RawArticle, TrendingTopic

# 来源标记为已删除的文章标题
REMOVED_TITLE = "[Removed]"

DEFAULT_DESCRIPTION = "No description available"
DEFAULT_SOURCE = "Unknown Source"


def _as_utc(value: datetime) -> datetime:
    """无时区的时间按 UTC 处理."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class ArticleRanker:
    """文章排序器（纯函数，不做任何 I/O）."""

    def rank(
        self,
        raw_articles: Iterable[RawArticle],
        now: datetime | None = None,
    ) -> list[RankedArticle]:
        """
        过滤、评分、分类并排序文章.

        相同输入和 now 得到完全相同的结果；同分文章保持输入顺序。
        """
        now = _as_utc(now or datetime.now(UTC))

        ranked = [
            self._build_ranked_article(article, now)
            for article in raw_articles
            if self.is_valid(article)
        ]
        # sorted 是稳定排序
        return sorted(ranked, key=lambda a: a.relevance_score, reverse=True)

    def trending(
        self,
        ranked_articles: Iterable[RankedArticle],
        limit: int = 10,
    ) -> list[TrendingTopic]:
        """按分类统计文章数，返回数量最多的前 limit 个."""
        counts: dict[HealthCategory, int] = {}
        for article in ranked_articles:
            counts[article.health_category] = counts.get(article.health_category, 0) + 1

        sorted_counts = sorted(counts.items(), key=lambda x: x[1], reverse=True)
        return [
            TrendingTopic(category=category, count=count)
            for category, count in sorted_counts[:limit]
        ]

    def filter_by_topic(
        self,
        ranked_articles: Sequence[RankedArticle],
        topic: str,
    ) -> list[RankedArticle]:
        """按话题筛选（分类、标题或摘要包含话题词）."""
        needle = topic.lower()
        return [
            article
            for article in ranked_articles
            if needle in article.health_category.lower()
            or needle in article.title.lower()
            or needle in article.description.lower()
        ]

    @staticmethod
    def is_valid(article: RawArticle) -> bool:
        """标题为空或已被来源删除的文章丢弃."""
        return bool(article.title) and article.title != REMOVED_TITLE

    @staticmethod
    def article_id(article: RawArticle) -> str:
        """由标题和来源生成 16 位标识（允许碰撞）."""
        raw = f"{article.title or ''}-{article.source or ''}"
        return base64.b64encode(raw.encode("utf-8")).decode("ascii")[:16]

    @staticmethod
    def _text(article: RawArticle) -> str:
        return f"{article.title or ''} {article.description or ''}".lower()

    def score(self, article: RawArticle, now: datetime) -> int:
        """
        计算相关度分数.

        每个关键词出现即加分（不计次数），各关键词表分数累加不封顶；
        再按发布时间加时效分。
        """
        text = self._text(article)
        score = 0

        for keywords, weight in KEYWORD_WEIGHTS:
            for keyword in keywords:
                if keyword in text:
                    score += weight

        score += self.recency_bonus(article.published_at, now)
        return score

    @staticmethod
    def recency_bonus(published_at: datetime | None, now: datetime) -> int:
        """时效加分，只取一档."""
        if published_at is None:
            return 0

        elapsed = _as_utc(now) - _as_utc(published_at)
        days = elapsed.total_seconds() / 86400
        for max_days, bonus in RECENCY_BONUSES:
            if days <= max_days:
                return bonus
        return 0

    def categorize(self, article: RawArticle) -> HealthCategory:
        """按优先级规则分类，第一个命中的规则生效."""
        text = self._text(article)
        for keywords, category in CATEGORY_RULES:
            if any(keyword in text for keyword in keywords):
                return category
        return HealthCategory.GENERAL

    def _build_ranked_article(self, article: RawArticle, now: datetime) -> RankedArticle:
        """构建排序结果."""
        return RankedArticle(
            id=self.article_id(article),
            title=article.title or "",
            description=article.description or DEFAULT_DESCRIPTION,
            url=article.url,
            source=article.source or DEFAULT_SOURCE,
            published_at=article.published_at,
            url_to_image=article.url_to_image,
            relevance_score=self.score(article, now),
            health_category=self.categorize(article),
        )
