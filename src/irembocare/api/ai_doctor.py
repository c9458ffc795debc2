"""AI 医生 API."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from irembocare.api.deps import get_ai_doctor
from irembocare.core.ai_doctor import AIDoctorClient, AIDoctorError, AIDoctorQuery
from irembocare.core.errors import (
    RequestTimeoutError,
    ServiceError,
    TransientNetworkError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai-doctor", tags=["ai-doctor"])


@router.post("")
async def ask_ai_doctor(
    query: AIDoctorQuery,
    doctor: AIDoctorClient = Depends(get_ai_doctor),
) -> dict:
    """AI 问诊."""
    try:
        reply = await doctor.ask(query)
    except RequestTimeoutError as e:
        raise HTTPException(
            status_code=408,
            detail="AI service request timed out. Please try again.",
        ) from e
    except TransientNetworkError as e:
        raise HTTPException(
            status_code=503,
            detail="AI service is currently unavailable. Please try again later.",
        ) from e
    except ServiceError as e:
        if e.status_code == 429:
            raise HTTPException(
                status_code=429,
                detail="Too many requests. Please wait a moment and try again.",
            ) from e
        logger.error(f"AI 问诊失败，返回演示回复: {e}")
        reply = doctor.demo_reply()
    except AIDoctorError as e:
        logger.error(f"AI 问诊返回无效内容，返回演示回复: {e}")
        reply = doctor.demo_reply()

    result: dict = {"success": True, "data": reply.data}
    if reply.note:
        result["note"] = reply.note
    return result
