"""
AI 엔드포인트
OpenAI(gpt) / Gemini 두 계열의 상품 설명, 고객지원 채팅, 추천, 리뷰 감성 분석

모든 엔드포인트는 검증 → (카탈로그 조회) → 프롬프트 생성 → 모델 호출 → 응답 순서로
한 번에 처리하며 서버 측 상태를 남기지 않습니다.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.dependencies.auth import get_current_admin, get_current_user
from app.models.request import (
    ChatRequest,
    DescriptionRequest,
    RecommendationRequest,
    SentimentRequest,
)
from app.models.response import (
    ChatResponse,
    DescriptionResponse,
    ErrorResponse,
    RecommendationResponse,
    SentimentResponse,
)
from app.models.user import User
from app.services.catalog import CatalogAccessor, get_catalog
from app.services.llm_provider import (
    LLMProvider,
    get_gemini_provider,
    get_openai_provider,
    user_message,
)
from app.services.prompts import (
    DESCRIPTION_SYSTEM_PROMPT,
    RECOMMENDATION_SYSTEM_PROMPT,
    SUPPORT_CATALOG_LIMIT,
    build_description_prompt,
    build_recommendation_prompt,
    build_sentiment_prompt,
    build_single_prompt_support,
    build_support_prompt,
    match_recommendations,
    parse_recommended_names,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["AI"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "필수 입력 누락 또는 형식 오류"},
    500: {"model": ErrorResponse, "description": "카탈로그/모델 호출 실패"},
}

# OpenAI 호출 파라미터 (max_tokens, temperature)
DESCRIPTION_PARAMS = (200, 0.7)
CHAT_PARAMS = (300, 0.7)
RECOMMENDATION_PARAMS = (150, 0.5)

SUPPORT_FIELDS = {"name", "category", "price"}
RECOMMENDATION_FIELDS = {"name", "description", "category", "price", "image"}


def _bad_request(error: str) -> JSONResponse:
    """400 검증 실패 응답"""
    return JSONResponse(status_code=400, content={"error": error})


def _upstream_failure(error: str, exc: Exception) -> JSONResponse:
    """500 외부 호출 실패 응답"""
    return JSONResponse(status_code=500, content={"error": error, "message": str(exc)})


def _gemini_params() -> tuple:
    settings = get_settings()
    return settings.gemini_max_output_tokens, settings.gemini_temperature


# 요청 본문 필드별 400 에러 메시지 (타입/형식 오류)
FIELD_ERRORS = {
    "productName": "Product name is required",
    "message": "Message is required",
    "conversationHistory": "Conversation history is invalid",
    "query": "Query is required",
    "reviews": "Reviews array is required",
}


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    AI 엔드포인트의 요청 본문 검증 오류를 422 대신 400 에러 응답으로 변환

    다른 경로는 FastAPI 기본 처리기를 그대로 사용합니다.
    """
    if f"{router.prefix}/" not in request.url.path:
        return await request_validation_exception_handler(request, exc)

    errors = exc.errors()
    loc = errors[0].get("loc", ()) if errors else ()
    field = next((part for part in loc[1:] if part in FIELD_ERRORS), None)
    detail = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ())[1:]) or 'body'}: {err.get('msg')}"
        for err in errors
    )

    logger.info(f"[AI] 요청 검증 실패 - {request.url.path}: {detail}")
    return JSONResponse(
        status_code=400,
        content={"error": FIELD_ERRORS.get(field, "Invalid request body"), "message": detail},
    )


# ==================== GPT (OpenAI) ====================
@router.post(
    "/gpt/generate-description",
    response_model=DescriptionResponse,
    responses=ERROR_RESPONSES,
)
async def generate_product_description(
    request: Optional[DescriptionRequest] = None,
    current_user: User = Depends(get_current_admin),
    llm: LLMProvider = Depends(get_openai_provider),
):
    """상품 설명 생성 (관리자 전용)"""
    request = request or DescriptionRequest()
    if not request.product_name:
        return _bad_request("Product name is required")

    try:
        prompt = build_description_prompt(request.product_name, request.category, request.price)
        description = await llm.complete(
            DESCRIPTION_SYSTEM_PROMPT,
            [user_message(prompt)],
            *DESCRIPTION_PARAMS,
        )
        return DescriptionResponse(description=description)

    except Exception as e:
        logger.error(f"[AI:gpt] 상품 설명 생성 실패: {e}", exc_info=True)
        return _upstream_failure("Failed to generate product description", e)


@router.post("/gpt/chat", response_model=ChatResponse, responses=ERROR_RESPONSES)
async def chat_with_ai(
    request: Optional[ChatRequest] = None,
    current_user: User = Depends(get_current_user),
    catalog: CatalogAccessor = Depends(get_catalog),
    llm: LLMProvider = Depends(get_openai_provider),
):
    """
    고객지원 채팅

    대화 기록은 클라이언트가 보관하며 매 요청마다 전체를 전송합니다.
    모델에는 [시스템 프롬프트] + 대화 기록 + 새 사용자 메시지 순서로 전달합니다.
    """
    request = request or ChatRequest()
    if not request.message:
        return _bad_request("Message is required")

    try:
        rows = await catalog.list_products(SUPPORT_FIELDS, limit=SUPPORT_CATALOG_LIMIT)
        system_prompt, user_prompt = build_support_prompt(request.message, rows)
        messages = [*request.conversation_history, user_message(user_prompt)]

        response = await llm.complete(system_prompt, messages, *CHAT_PARAMS)
        return ChatResponse(response=response)

    except Exception as e:
        logger.error(f"[AI:gpt] 채팅 처리 실패: {e}", exc_info=True)
        return _upstream_failure("Failed to process chat message", e)


@router.post(
    "/gpt/recommendations",
    response_model=RecommendationResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def get_ai_recommendations(
    request: Optional[RecommendationRequest] = None,
    current_user: User = Depends(get_current_user),
    catalog: CatalogAccessor = Depends(get_catalog),
    llm: LLMProvider = Depends(get_openai_provider),
):
    """
    자연어 검색어 기반 상품 추천

    모델이 돌려준 쉼표 구분 상품명과 카탈로그를 대소문자 무시 부분 문자열로 매칭합니다.
    매칭 결과가 없으면 빈 목록으로 성공 응답합니다.
    """
    request = request or RecommendationRequest()
    if not request.query:
        return _bad_request("Query is required")

    try:
        products = await catalog.list_products(RECOMMENDATION_FIELDS)
        prompt = build_recommendation_prompt(request.query, products)

        text = await llm.complete(
            RECOMMENDATION_SYSTEM_PROMPT,
            [user_message(prompt)],
            *RECOMMENDATION_PARAMS,
        )
        names = parse_recommended_names(text)
        matched = match_recommendations(products, names)

        logger.info(f"[AI:gpt] 추천 완료 - 제안: {names}, 매칭: {len(matched)}개")
        return RecommendationResponse(products=matched)

    except Exception as e:
        logger.error(f"[AI:gpt] 추천 실패: {e}", exc_info=True)
        return _upstream_failure("Failed to get recommendations", e)


# ==================== Gemini ====================
@router.post(
    "/gemini/generate-description",
    response_model=DescriptionResponse,
    responses=ERROR_RESPONSES,
)
async def generate_product_description_gemini(
    request: Optional[DescriptionRequest] = None,
    current_user: User = Depends(get_current_admin),
    llm: LLMProvider = Depends(get_gemini_provider),
):
    """상품 설명 생성 - Gemini (관리자 전용)"""
    request = request or DescriptionRequest()
    if not request.product_name:
        return _bad_request("Product name is required")

    try:
        prompt = build_description_prompt(request.product_name, request.category, request.price)
        description = await llm.complete(None, [user_message(prompt)], *_gemini_params())
        return DescriptionResponse(description=description)

    except Exception as e:
        logger.error(f"[AI:gemini] 상품 설명 생성 실패: {e}", exc_info=True)
        return _upstream_failure("Failed to generate product description", e)


@router.post("/gemini/chat", response_model=ChatResponse, responses=ERROR_RESPONSES)
async def chat_with_gemini(
    request: Optional[ChatRequest] = None,
    current_user: User = Depends(get_current_user),
    catalog: CatalogAccessor = Depends(get_catalog),
    llm: LLMProvider = Depends(get_gemini_provider),
):
    """고객지원 채팅 - Gemini (대화 기록 미사용, 카탈로그와 질문을 한 프롬프트로 전달)"""
    request = request or ChatRequest()
    if not request.message:
        return _bad_request("Message is required")

    try:
        rows = await catalog.list_products(SUPPORT_FIELDS, limit=SUPPORT_CATALOG_LIMIT)
        prompt = build_single_prompt_support(request.message, rows)

        response = await llm.complete(None, [user_message(prompt)], *_gemini_params())
        return ChatResponse(response=response)

    except Exception as e:
        logger.error(f"[AI:gemini] 채팅 처리 실패: {e}", exc_info=True)
        return _upstream_failure("Failed to process chat message", e)


@router.post(
    "/gemini/analyze-sentiment",
    response_model=SentimentResponse,
    responses=ERROR_RESPONSES,
)
async def analyze_product_sentiment(
    request: Optional[SentimentRequest] = None,
    current_user: User = Depends(get_current_admin),
    llm: LLMProvider = Depends(get_gemini_provider),
):
    """리뷰 감성 분석 - Gemini (관리자 전용, 모델 출력 그대로 반환)"""
    request = request or SentimentRequest()
    if not isinstance(request.reviews, list):
        return _bad_request("Reviews array is required")

    try:
        prompt = build_sentiment_prompt(request.reviews)
        analysis = await llm.complete(None, [user_message(prompt)], *_gemini_params())
        return SentimentResponse(analysis=analysis)

    except Exception as e:
        logger.error(f"[AI:gemini] 감성 분석 실패: {e}", exc_info=True)
        return _upstream_failure("Failed to analyze sentiment", e)
