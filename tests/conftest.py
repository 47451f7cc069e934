"""
pytest 공통 fixture
외부 협력자(인증, 카탈로그, LLM 제공자)는 dependency_overrides로 대체합니다.
"""
from types import SimpleNamespace
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from app.dependencies.auth import get_current_user
from app.main import app
from app.models.product import ProductSummary
from app.services.catalog import get_catalog
from app.services.llm_provider import get_gemini_provider, get_openai_provider


class FakeProvider:
    """호출 내역을 기록하는 LLM 제공자"""

    def __init__(self, text: str = "Generated text", error: Optional[Exception] = None) -> None:
        self.text = text
        self.error = error
        self.calls: List[dict] = []

    async def complete(self, system_prompt, messages, max_output_tokens, temperature) -> str:
        self.calls.append(
            {
                "system_prompt": system_prompt,
                "messages": list(messages),
                "max_output_tokens": max_output_tokens,
                "temperature": temperature,
            }
        )
        if self.error is not None:
            raise self.error
        return self.text


class FakeCatalog:
    """메모리 상품 목록 카탈로그"""

    def __init__(self, products: List[ProductSummary], error: Optional[Exception] = None) -> None:
        self.products = products
        self.error = error
        self.calls: List[dict] = []

    async def list_products(self, fields, limit=None) -> List[ProductSummary]:
        self.calls.append({"fields": set(fields), "limit": limit})
        if self.error is not None:
            raise self.error
        rows = self.products if limit is None else self.products[:limit]
        return list(rows)


def make_product(name: str, category: str = "Accessories", price=20, description: str = "") -> ProductSummary:
    """테스트 상품 생성"""
    return ProductSummary(
        id=f"id-{name.lower().replace(' ', '-')}",
        name=name,
        category=category,
        price=price,
        description=description or f"{name} description",
        image=f"https://cdn.example.com/{name.lower().replace(' ', '-')}.jpg",
    )


@pytest.fixture
def admin_user():
    """관리자 사용자"""
    return SimpleNamespace(id="admin-1", email="admin@example.com", role="admin", is_admin=True)


@pytest.fixture
def customer_user():
    """일반 사용자"""
    return SimpleNamespace(id="user-1", email="user@example.com", role="customer", is_admin=False)


@pytest.fixture
def openai_llm():
    """OpenAI 대체 제공자"""
    return FakeProvider("OpenAI text")


@pytest.fixture
def gemini_llm():
    """Gemini 대체 제공자"""
    return FakeProvider("Gemini text")


@pytest.fixture
def catalog():
    """기본 카탈로그"""
    return FakeCatalog(
        [
            make_product("Wool Scarf", price=39.99),
            make_product("Red Scarf", price=24.5),
            make_product("Blue Hat", price=19),
        ]
    )


@pytest.fixture
def make_client(openai_llm, gemini_llm, catalog, admin_user):
    """의존성을 대체한 테스트 클라이언트 생성기"""

    def _make(user=admin_user, openai=None, gemini=None, catalog_override=None):
        app.dependency_overrides[get_current_user] = lambda: user
        app.dependency_overrides[get_openai_provider] = lambda: openai or openai_llm
        app.dependency_overrides[get_gemini_provider] = lambda: gemini or gemini_llm
        app.dependency_overrides[get_catalog] = lambda: catalog_override or catalog
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client):
    """관리자 권한 테스트 클라이언트"""
    return make_client()


@pytest.fixture
def provider_factory():
    """FakeProvider 생성기"""
    return FakeProvider


@pytest.fixture
def catalog_factory():
    """FakeCatalog 생성기"""
    return FakeCatalog


@pytest.fixture
def product_factory():
    """테스트 상품 생성기"""
    return make_product
