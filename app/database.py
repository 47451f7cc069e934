"""
데이터베이스 연결 및 세션 관리 모듈
SQLAlchemy 비동기 설정
"""

from typing import AsyncGenerator
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.config import get_settings

settings = get_settings()


class Base(DeclarativeBase):
    """SQLAlchemy 모델 베이스 클래스"""
    pass


# 비동기 엔진 생성
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
    pool_size=5,
    max_overflow=10,
)

# 비동기 세션 팩토리
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    읽기 전용 데이터베이스 세션 의존성
    카탈로그/사용자 조회만 하므로 커밋하지 않고, 종료 시 트랜잭션을 롤백합니다.
    """
    async with async_session_factory() as session:
        yield session


async def check_db() -> None:
    """
    데이터베이스 연결 확인
    스키마는 Alembic 마이그레이션(alembic upgrade head)으로만 생성합니다.
    """
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def close_db() -> None:
    """데이터베이스 연결 종료"""
    await engine.dispose()
