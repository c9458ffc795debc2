"""医疗机构查询与远程问诊申请."""

import logging
import uuid
from datetime import UTC, datetime
from typing import Any

from irembocare.data.hospitals import HOSPITALS_BY_DISTRICT
from irembocare.models.hospital import Hospital, TelemedicineRequest

logger = logging.getLogger(__name__)


class DirectoryError(Exception):
    """机构查询错误."""


class DistrictNotFoundError(DirectoryError):
    """地区不存在."""


class HospitalNotFoundError(DirectoryError):
    """机构不存在."""


class TelemedicineUnavailableError(DirectoryError):
    """机构不提供远程问诊."""


def available_districts() -> list[str]:
    """有机构数据的地区列表."""
    return list(HOSPITALS_BY_DISTRICT)


def list_hospitals(location: str) -> list[Hospital] | None:
    """按地区列出机构，地区不存在返回 None."""
    return HOSPITALS_BY_DISTRICT.get(location.strip())


def search_hospitals(
    location: str,
    telemedicine: str | None = None,
    specialty: str | None = None,
    facility_type: str | None = None,
    sort: str | None = None,
) -> list[Hospital]:
    """
    按条件搜索机构.

    telemedicine 只接受 "true" / "false"，其他值忽略；
    sort 支持 name / type，其他值保持原顺序。
    """
    hospitals = list(HOSPITALS_BY_DISTRICT.get(location.strip(), []))

    if telemedicine in ("true", "false"):
        wanted = telemedicine == "true"
        hospitals = [h for h in hospitals if h.telemedicine is wanted]

    if specialty:
        needle = specialty.lower()
        hospitals = [
            h for h in hospitals if any(needle in s.lower() for s in h.specialties)
        ]

    if facility_type:
        hospitals = [h for h in hospitals if h.type.lower() == facility_type.lower()]

    if sort == "name":
        hospitals.sort(key=lambda h: h.name)
    elif sort == "type":
        hospitals.sort(key=lambda h: h.type)

    return hospitals


def find_hospital(district: str, name: str) -> Hospital:
    """按地区和名称查找机构."""
    hospitals = HOSPITALS_BY_DISTRICT.get(district)
    if hospitals is None:
        msg = f"地区不存在: {district}"
        raise DistrictNotFoundError(msg)

    for hospital in hospitals:
        if hospital.name == name:
            return hospital

    msg = f"机构不存在: {district}/{name}"
    raise HospitalNotFoundError(msg)


def create_telemedicine_request(
    request: TelemedicineRequest,
    now: datetime | None = None,
) -> dict[str, Any]:
    """创建远程问诊申请（只生成记录，不通知机构）."""
    hospital = find_hospital(request.district, request.hospital_name)
    if not hospital.telemedicine:
        msg = f"机构不提供远程问诊: {hospital.name}"
        raise TelemedicineUnavailableError(msg)

    now = now or datetime.now(UTC)
    request_id = f"TMC-{int(now.timestamp() * 1000)}-{uuid.uuid4().hex[:9]}"

    logger.info(f"远程问诊申请: {request_id} -> {hospital.name}")

    return {
        "id": request_id,
        "patient_name": request.patient_name,
        "district": request.district,
        "symptoms": request.symptoms,
        "hospital": {
            "name": hospital.name,
            "phone": hospital.phone,
            "email": hospital.email,
        },
        "contact_method": request.contact_method,
        "urgency": request.urgency,
        "status": "pending",
        "created_at": now.isoformat(),
        "estimated_response_time": (
            "15-30 minutes" if request.urgency == "urgent" else "1-2 hours"
        ),
    }
