"""
응답 모델 정의
AI 엔드포인트 공통 응답 봉투
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from app.models.product import ProductSummary


class DescriptionResponse(BaseModel):
    """상품 설명 생성 응답"""

    success: bool = True
    description: str


class ChatResponse(BaseModel):
    """채팅 응답"""

    success: bool = True
    response: str


class RecommendationResponse(BaseModel):
    """상품 추천 응답"""

    success: bool = True
    products: List[ProductSummary] = Field(default_factory=list)


class SentimentResponse(BaseModel):
    """리뷰 감성 분석 응답 (모델 출력 그대로)"""

    success: bool = True
    analysis: str


class ErrorResponse(BaseModel):
    """에러 응답"""

    error: str = Field(..., description="사용자용 에러 문구")
    message: Optional[str] = Field(None, description="원인 메시지 (5xx)")
