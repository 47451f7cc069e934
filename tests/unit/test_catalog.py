"""
카탈로그 조회기 유닛 테스트
"""
import asyncio
import uuid
from decimal import Decimal
from types import SimpleNamespace

import pytest
from sqlalchemy.exc import SQLAlchemyError

from app.services.catalog import CatalogAccessor, CatalogUnavailableError


class FakeResult:
    def __init__(self, rows):
        self._rows = rows

    def all(self):
        return self._rows


class FakeSession:
    """execute 호출을 기록하는 세션"""

    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.statements = []

    async def execute(self, stmt):
        self.statements.append(stmt)
        if self.error is not None:
            raise self.error
        return FakeResult(self.rows)


def _sql(stmt) -> str:
    return str(stmt.compile(compile_kwargs={"literal_binds": True}))


class TestCatalogAccessor:
    """카탈로그 조회 테스트"""

    def test_projection_and_limit(self):
        """요청 필드만 조회하고 개수 제한 적용"""
        product_id = uuid.uuid4()
        session = FakeSession(
            rows=[SimpleNamespace(id=product_id, name="Wool Scarf", category="Accessories", price=Decimal("39.99"))]
        )
        catalog = CatalogAccessor(session)

        products = asyncio.run(catalog.list_products({"name", "category", "price"}, limit=10))

        assert len(products) == 1
        assert products[0].id == str(product_id)
        assert products[0].name == "Wool Scarf"
        assert products[0].price == 39.99
        assert products[0].description is None

        sql = _sql(session.statements[0])
        assert "LIMIT 10" in sql
        assert "products.description" not in sql

    def test_all_rows_without_limit(self):
        """limit 없으면 전체 조회"""
        session = FakeSession(rows=[])
        catalog = CatalogAccessor(session)

        products = asyncio.run(catalog.list_products({"name"}))

        assert products == []
        assert "LIMIT" not in _sql(session.statements[0])

    def test_whole_number_price(self):
        """정수 가격은 정수로 변환"""
        session = FakeSession(rows=[SimpleNamespace(id=uuid.uuid4(), price=Decimal("19.00"))])

        products = asyncio.run(CatalogAccessor(session).list_products({"price"}))

        assert products[0].price == 19
        assert isinstance(products[0].price, int)

    def test_store_failure(self):
        """저장소 오류는 CatalogUnavailableError"""
        session = FakeSession(error=SQLAlchemyError("connection refused"))

        with pytest.raises(CatalogUnavailableError) as exc_info:
            asyncio.run(CatalogAccessor(session).list_products({"name"}))

        assert "connection refused" in str(exc_info.value)

    def test_unknown_field(self):
        """지원하지 않는 필드"""
        with pytest.raises(ValueError):
            asyncio.run(CatalogAccessor(FakeSession()).list_products({"name", "stock"}))
