"""药品与急救指南查询."""

from typing import Any

from irembocare.data.medications import FIRST_AID_TIPS, MEDICATIONS_BY_DISEASE


def list_medications(disease: str | None = None, limit: int = 10) -> list[dict[str, Any]]:
    """按疾病列出药品，未指定疾病时返回全部."""
    if disease:
        medications = MEDICATIONS_BY_DISEASE.get(disease.lower().strip(), [])
    else:
        medications = [m for meds in MEDICATIONS_BY_DISEASE.values() for m in meds]
    return medications[:limit]


def search_medications(
    disease: str | None = None,
    symptoms: str | None = None,
    med_type: str | None = None,
    sort: str | None = None,
    limit: int = 10,
) -> list[dict[str, Any]]:
    """
    药品搜索.

    symptoms 为逗号分隔的症状列表，与 disease 合并查询，结果按品牌名去重；
    sort 支持 name（品牌名升序）和 effectiveness（降序）。
    """
    keys: list[str] = []
    if disease:
        keys.append(disease.lower().strip())
    if symptoms:
        keys.extend(s.lower().strip() for s in symptoms.split(",") if s.strip())

    if keys:
        candidates = [m for key in keys for m in MEDICATIONS_BY_DISEASE.get(key, [])]
    else:
        candidates = [m for meds in MEDICATIONS_BY_DISEASE.values() for m in meds]

    # 同一药品可能出现在多种疾病下
    seen: set[str] = set()
    medications: list[dict[str, Any]] = []
    for medication in candidates:
        name = medication["openfda"]["brand_name"][0]
        if name in seen:
            continue
        seen.add(name)
        medications.append(medication)

    if med_type in ("brand", "generic"):
        medications = [m for m in medications if m["type"] == med_type]

    if sort == "name":
        medications.sort(key=lambda m: m["openfda"]["brand_name"][0])
    elif sort == "effectiveness":
        medications.sort(key=lambda m: m["effectiveness"], reverse=True)

    return medications[:limit]


def list_first_aid(condition: str | None = None, limit: int = 20) -> list[dict[str, Any]]:
    """急救指南，condition 按子串匹配."""
    if condition:
        needle = condition.lower().strip()
        tips = [t for t in FIRST_AID_TIPS if needle in t["condition"].lower()]
    else:
        tips = FIRST_AID_TIPS
    return tips[:limit]
