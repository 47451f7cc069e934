"""
상품 카탈로그 조회기
AI 프롬프트에 실제 재고 정보를 넣기 위한 읽기 전용 조회 계층
"""
import logging
from typing import Iterable, List, Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.product import Product, ProductSummary

logger = logging.getLogger(__name__)

# 프로젝션 가능한 필드
PRODUCT_FIELDS = ("name", "category", "price", "description", "image")


class CatalogUnavailableError(Exception):
    """카탈로그 저장소 접근 실패"""

    pass


def _to_json_number(value):
    """Numeric(Decimal) 값을 JSON 숫자로 변환"""
    if value is None:
        return None
    number = float(value)
    return int(number) if number.is_integer() else number


class CatalogAccessor:
    """상품 카탈로그 조회기"""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def list_products(
        self,
        fields: Iterable[str],
        limit: Optional[int] = None,
    ) -> List[ProductSummary]:
        """
        필드 프로젝션 상품 목록 조회

        Args:
            fields: 조회할 필드명 (id는 항상 포함)
            limit: 최대 개수 (None이면 전체)

        Returns:
            List[ProductSummary]

        Raises:
            CatalogUnavailableError: 저장소 연결/조회 실패
        """
        requested = set(fields)
        unknown = requested - set(PRODUCT_FIELDS)
        if unknown:
            raise ValueError(f"지원하지 않는 상품 필드: {sorted(unknown)}")
        field_names = [f for f in PRODUCT_FIELDS if f in requested]

        columns = [Product.id] + [getattr(Product, f) for f in field_names]
        stmt = select(*columns).order_by(Product.created_at)
        if limit is not None:
            stmt = stmt.limit(limit)

        try:
            result = await self._db.execute(stmt)
            rows = result.all()
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"[Catalog] 상품 조회 실패: {e}", exc_info=True)
            raise CatalogUnavailableError(str(e)) from e

        products: List[ProductSummary] = []
        for row in rows:
            data = {"id": str(row.id)}
            for f in field_names:
                value = getattr(row, f)
                data[f] = _to_json_number(value) if f == "price" else value
            products.append(ProductSummary(**data))

        logger.info(f"[Catalog] 조회 완료 - fields: {field_names}, limit: {limit}, count: {len(products)}")
        return products


def get_catalog(db: AsyncSession = Depends(get_db)) -> CatalogAccessor:
    """카탈로그 조회기 의존성"""
    return CatalogAccessor(db)
