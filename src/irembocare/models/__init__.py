"""数据模型."""

from irembocare.models.article import NewsFeed, RankedArticle, RawArticle, TrendingTopic
from irembocare.models.database import get_session, init_db
from irembocare.models.record import StoredRecord

__all__ = [
    "NewsFeed",
    "RankedArticle",
    "RawArticle",
    "StoredRecord",
    "TrendingTopic",
    "get_session",
    "init_db",
]
