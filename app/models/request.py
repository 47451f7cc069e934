"""
요청 모델 정의
AI 엔드포인트 요청 본문 (camelCase 필드명 유지)

필수 필드도 Optional로 선언합니다. 누락 검증은 엔드포인트에서 400으로 처리합니다.
"""
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field

from app.models.chat import ChatMessage


class _CamelModel(BaseModel):
    model_config = {"populate_by_name": True}


class DescriptionRequest(_CamelModel):
    """상품 설명 생성 요청"""

    product_name: Optional[str] = Field(None, alias="productName", description="상품명")
    category: Optional[str] = Field(None, description="카테고리")
    price: Optional[Union[int, float, str]] = Field(None, description="가격")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {"productName": "Wool Scarf", "category": "Accessories", "price": 39.99}
        },
    }


class ChatRequest(_CamelModel):
    """채팅 요청"""

    message: Optional[str] = Field(None, description="사용자 메시지")
    conversation_history: List[ChatMessage] = Field(
        default_factory=list,
        alias="conversationHistory",
        description="이전 대화 기록 (클라이언트 보관)",
    )


class RecommendationRequest(_CamelModel):
    """상품 추천 요청"""

    query: Optional[str] = Field(None, description="자연어 검색어")


class SentimentRequest(_CamelModel):
    """리뷰 감성 분석 요청"""

    # 리스트 여부는 엔드포인트에서 검사 (문자열이면 400)
    reviews: Optional[Any] = Field(None, description="리뷰 텍스트 목록")
