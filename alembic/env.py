"""
Alembic 환경 설정
애플리케이션과 같은 asyncpg 드라이버로 마이그레이션 실행
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

# 애플리케이션 설정 및 모델 임포트
from app.config import get_settings
from app.database import Base

# 모델 임포트 (마이그레이션에서 인식하도록)
from app.models.user import User  # noqa: F401
from app.models.product import Product  # noqa: F401

config = context.config

# 로깅 설정
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata
settings = get_settings()


def run_migrations_offline() -> None:
    """
    오프라인 모드에서 마이그레이션 실행
    실제 DB 연결 없이 SQL 스크립트만 생성
    """
    context.configure(
        url=settings.database_url_sync,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """
    온라인 모드에서 마이그레이션 실행
    비동기 엔진 연결 위에서 동기 마이그레이션 함수를 실행
    """
    connectable = create_async_engine(settings.database_url, poolclass=pool.NullPool)

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
