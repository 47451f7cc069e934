"""
FastAPI 메인 애플리케이션
Storefront AI 엔드포인트 백엔드
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.api import ai, health
from app.config import get_settings
from app.database import check_db, close_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """애플리케이션 생명주기 관리"""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"🛒 Storefront AI 서버 시작 (OpenAI: {settings.openai_model}, Gemini: {settings.gemini_model})")

    # 데이터베이스 연결 확인
    try:
        await check_db()
        logger.info("✅ 데이터베이스 연결 성공")
    except Exception as e:
        logger.warning(f"⚠️ 데이터베이스 연결 실패 (DB 없이 실행): {e}")

    yield

    await close_db()
    logger.info("🛒 Storefront AI 서버 종료")


def create_app() -> FastAPI:
    """FastAPI 앱 팩토리"""
    settings = get_settings()

    app = FastAPI(
        title="Storefront AI",
        description="상품 설명 생성, 고객지원 채팅, 상품 추천, 리뷰 감성 분석 API (OpenAI / Gemini)",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # CORS 설정 (쿠키 인증이므로 credentials 허용)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 라우터 등록
    app.include_router(health.router, prefix="/api", tags=["Health"])
    app.include_router(ai.router, prefix="/api")

    # AI 엔드포인트 요청 형식 오류는 422 대신 400 에러 응답
    app.add_exception_handler(RequestValidationError, ai.request_validation_handler)

    # Docker healthcheck용 루트 레벨 헬스체크
    @app.get("/health")
    async def root_health():
        return {"status": "ok"}

    return app


# 앱 인스턴스
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.api_host,
        port=settings.port,
        reload=settings.debug,
    )
