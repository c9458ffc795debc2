"""新闻评分关键词表与分类规则."""

from enum import StrEnum


class HealthCategory(StrEnum):
    """健康新闻分类."""

    MALARIA = "Malaria & Vector Control"
    COVID = "COVID-19"
    VACCINATION = "Vaccination"
    MATERNAL = "Maternal Health"
    CHILD = "Child Health"
    NUTRITION = "Nutrition"
    MENTAL = "Mental Health"
    HIV = "HIV/AIDS"
    CANCER = "Cancer"
    NCD = "Non-Communicable Diseases"
    GENERAL = "General Health"


# 卢旺达 / 东非相关关键词，每个命中 +10
REGIONAL_KEYWORDS: tuple[str, ...] = (
    "rwanda",
    "kigali",
    "rwandan",
    "east africa",
)

# 重点健康议题，每个命中 +8
PRIORITY_HEALTH_KEYWORDS: tuple[str, ...] = (
    "malaria",
    "covid",
    "vaccination",
    "epidemic",
    "outbreak",
    "maternal health",
    "child health",
    "nutrition",
    "hiv",
    "aids",
)

# 一般健康词汇，每个命中 +3
GENERAL_HEALTH_KEYWORDS: tuple[str, ...] = (
    "health",
    "medical",
    "hospital",
    "doctor",
    "treatment",
    "disease",
    "medicine",
    "healthcare",
    "clinic",
    "patient",
)

# (关键词表, 每个命中的分值)
KEYWORD_WEIGHTS: tuple[tuple[tuple[str, ...], int], ...] = (
    (REGIONAL_KEYWORDS, 10),
    (PRIORITY_HEALTH_KEYWORDS, 8),
    (GENERAL_HEALTH_KEYWORDS, 3),
)

# 时效加分：(距发布天数上限, 加分)，按顺序取第一个满足的
RECENCY_BONUSES: tuple[tuple[int, int], ...] = (
    (1, 5),
    (7, 3),
    (30, 1),
)

# 分类规则，按优先级顺序匹配，第一个命中的生效
CATEGORY_RULES: tuple[tuple[tuple[str, ...], HealthCategory], ...] = (
    (("malaria", "mosquito"), HealthCategory.MALARIA),
    (("covid", "coronavirus"), HealthCategory.COVID),
    (("vaccination", "vaccine"), HealthCategory.VACCINATION),
    (("maternal", "pregnancy"), HealthCategory.MATERNAL),
    (("child", "pediatric"), HealthCategory.CHILD),
    (("nutrition", "malnutrition"), HealthCategory.NUTRITION),
    (("mental health", "depression"), HealthCategory.MENTAL),
    (("hiv", "aids"), HealthCategory.HIV),
    (("cancer", "oncology"), HealthCategory.CANCER),
    (("diabetes", "hypertension"), HealthCategory.NCD),
)
