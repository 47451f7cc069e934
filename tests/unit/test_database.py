"""
데이터베이스 세션/스키마/설정 유닛 테스트
"""
import asyncio

from app import database
from app.config import Settings
from app.models.product import Product


class FakeSession:
    """commit 호출과 종료 여부를 기록하는 세션"""

    def __init__(self):
        self.committed = False
        self.closed = False

    async def commit(self):
        self.committed = True

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        self.closed = True


class TestReadOnlySession:
    """읽기 전용 세션 의존성 테스트"""

    def test_request_session_is_never_committed(self, monkeypatch):
        """요청 종료 시 커밋 없이 세션만 닫힘"""
        session = FakeSession()
        monkeypatch.setattr(database, "async_session_factory", lambda: session)

        async def run():
            gen = database.get_db()
            assert await gen.__anext__() is session
            await gen.aclose()

        asyncio.run(run())

        assert session.committed is False
        assert session.closed is True

    def test_no_schema_creation_at_startup(self):
        """스키마 생성은 Alembic 마이그레이션 담당"""
        assert not hasattr(database, "init_db")


class TestProductSchema:
    def test_product_columns(self):
        """카탈로그 행 필드만 보유"""
        assert set(Product.__table__.columns.keys()) == {
            "id",
            "name",
            "description",
            "price",
            "image",
            "category",
            "created_at",
        }


class TestSettings:
    def test_port_from_environment(self, monkeypatch):
        """PORT 환경변수로 서버 포트 지정"""
        monkeypatch.setenv("PORT", "9001")

        assert Settings().port == 9001
