"""医疗机构与远程问诊 API."""

from fastapi import APIRouter, HTTPException, Query

from irembocare.core.directory import (
    DistrictNotFoundError,
    HospitalNotFoundError,
    TelemedicineUnavailableError,
    available_districts,
    create_telemedicine_request,
    list_hospitals,
    search_hospitals,
)
from irembocare.models.hospital import TelemedicineRequest

router = APIRouter(prefix="/api", tags=["services"])


@router.get("/health-services")
async def health_services(
    location: str | None = Query(None, description="地区"),
) -> dict:
    """按地区列出医疗机构."""
    if not location or not location.strip():
        raise HTTPException(status_code=400, detail="Location parameter is required")

    hospitals = list_hospitals(location)
    if hospitals is None:
        return {
            "success": True,
            "data": [],
            "message": f"No health services found for {location}",
            "availableDistricts": available_districts(),
        }

    return {
        "success": True,
        "location": location.strip(),
        "count": len(hospitals),
        "data": [hospital.model_dump() for hospital in hospitals],
    }


@router.get("/health-services/search")
async def search_health_services(
    location: str | None = Query(None, description="地区"),
    telemedicine: str | None = Query(None, description="true / false"),
    specialty: str | None = Query(None, description="专科关键字"),
    facility_type: str | None = Query(None, alias="type", description="Public / Private"),
    sort: str | None = Query(None, description="name / type"),
) -> dict:
    """带筛选条件的机构搜索."""
    if not location or not location.strip():
        raise HTTPException(
            status_code=400,
            detail={"success": False, "error": "Location parameter is required"},
        )

    hospitals = search_hospitals(
        location,
        telemedicine=telemedicine,
        specialty=specialty,
        facility_type=facility_type,
        sort=sort,
    )
    return {
        "success": True,
        "count": len(hospitals),
        "filters": {
            "location": location,
            "telemedicine": telemedicine,
            "specialty": specialty,
            "type": facility_type,
            "sort": sort,
        },
        "data": [hospital.model_dump() for hospital in hospitals],
    }


@router.post("/telemedicine-request")
async def telemedicine_request(request: TelemedicineRequest) -> dict:
    """提交远程问诊申请."""
    try:
        record = create_telemedicine_request(request)
    except (DistrictNotFoundError, HospitalNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except TelemedicineUnavailableError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return {
        "success": True,
        "message": "Telemedicine request submitted successfully",
        "data": record,
    }
