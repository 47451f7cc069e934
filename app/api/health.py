"""
헬스체크 엔드포인트
서버 및 LLM 제공자 설정 상태 확인
"""
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """헬스체크 응답"""

    status: Literal["healthy", "degraded", "unhealthy"]
    openai: Literal["configured", "missing"]
    gemini: Literal["configured", "missing"]


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    서버 상태 확인

    Returns:
        HealthResponse: LLM API 키 설정 여부
    """
    settings = get_settings()

    openai_configured = bool(settings.openai_api_key)
    gemini_configured = bool(settings.google_api_key)

    # 전체 상태 결정
    if openai_configured and gemini_configured:
        status = "healthy"
    elif openai_configured or gemini_configured:
        status = "degraded"
    else:
        status = "unhealthy"

    return HealthResponse(
        status=status,
        openai="configured" if openai_configured else "missing",
        gemini="configured" if gemini_configured else "missing",
    )
