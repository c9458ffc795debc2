"""药品与急救指南 API."""

from fastapi import APIRouter, Query

from irembocare.core.catalog import list_first_aid, list_medications, search_medications
from irembocare.data.medications import FIRST_AID_DISCLAIMER, MEDICATION_DISCLAIMER

router = APIRouter(prefix="/api", tags=["medication"])

DEFAULT_SEARCH_LIMIT = 10


def _parse_limit(value: str | None, default: int = DEFAULT_SEARCH_LIMIT) -> int:
    """解析 limit 参数，非法值回退到默认值."""
    try:
        limit = int(value) if value is not None else default
    except ValueError:
        return default
    return limit if limit > 0 else default


@router.get("/medication")
async def medication(
    disease: str | None = Query(None, description="疾病"),
    limit: int = Query(10, ge=1, le=50, description="数量"),
) -> dict:
    """按疾病列出药品."""
    medications = list_medications(disease, limit=limit)
    return {
        "success": True,
        "count": len(medications),
        "data": medications,
        "disclaimer": MEDICATION_DISCLAIMER,
    }


@router.get("/medication/search")
async def medication_search(
    disease: str | None = Query(None, description="疾病"),
    symptoms: str | None = Query(None, description="逗号分隔的症状"),
    med_type: str | None = Query(None, alias="type", description="brand / generic"),
    sort: str | None = Query(None, description="name / effectiveness"),
    limit: str | None = Query(None, description="数量"),
) -> dict:
    """药品搜索."""
    parsed_limit = _parse_limit(limit)
    medications = search_medications(
        disease=disease,
        symptoms=symptoms,
        med_type=med_type,
        sort=sort,
        limit=parsed_limit,
    )
    return {
        "success": True,
        "count": len(medications),
        "query": {
            "disease": disease,
            "symptoms": symptoms,
            "type": med_type,
            "sort": sort,
            "limit": parsed_limit,
        },
        "data": medications,
        "disclaimer": MEDICATION_DISCLAIMER,
    }


@router.get("/first-aid")
async def first_aid(
    condition: str | None = Query(None, description="急症名称"),
    limit: int = Query(20, ge=1, le=50, description="数量"),
) -> dict:
    """急救指南."""
    tips = list_first_aid(condition, limit=limit)
    return {
        "success": True,
        "count": len(tips),
        "data": tips,
        "disclaimer": FIRST_AID_DISCLAIMER,
    }
