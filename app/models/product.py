"""
상품 모델 정의
카탈로그 테이블 및 AI 엔드포인트가 반환하는 상품 요약 모델
"""
from datetime import datetime
from typing import Optional, Union
import uuid

from pydantic import BaseModel, Field
from sqlalchemy import String, Text, Numeric, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.database import Base


class Product(Base):
    """상품 모델 (카탈로그 서비스 소유)"""

    __tablename__ = "products"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[float] = mapped_column(Numeric(10, 2), nullable=False)
    image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
    )

    __table_args__ = (
        {"comment": "상품 카탈로그 테이블"},
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name={self.name})>"


class ProductSummary(BaseModel):
    """필드 프로젝션된 상품 행"""

    id: str = Field(..., description="상품 고유 ID")
    name: Optional[str] = Field(None, description="상품명")
    category: Optional[str] = Field(None, description="카테고리")
    price: Optional[Union[int, float]] = Field(None, description="가격 (USD)")
    description: Optional[str] = Field(None, description="상품 설명")
    image: Optional[str] = Field(None, description="이미지 URL")

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "6f1c2a4e-0d6b-4c55-9a43-0f7d0d3a5b21",
                "name": "Wool Scarf",
                "category": "Accessories",
                "price": 39.99,
                "description": "Soft merino wool scarf for cold days.",
                "image": "https://cdn.example.com/products/wool-scarf.jpg",
            }
        }
    }
