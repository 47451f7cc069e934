"""
프롬프트 빌더
사용자 입력과 카탈로그 행을 고정 템플릿에 채워 넣는 순수 함수 모음
"""
from typing import List, Optional, Sequence, Tuple, Union

from app.models.product import ProductSummary

# 상품 설명 생성 시스템 프롬프트
DESCRIPTION_SYSTEM_PROMPT = (
    "You are an expert e-commerce copywriter specializing in product descriptions."
)

# 상품 추천 시스템 프롬프트
RECOMMENDATION_SYSTEM_PROMPT = (
    "You are a product recommendation assistant. Return only product names."
)

# 고객지원 프롬프트에 넣을 최대 상품 수
SUPPORT_CATALOG_LIMIT = 10

# 추천 결과 최대 개수
RECOMMENDATION_LIMIT = 5

DESCRIPTION_PROMPT = """Write a compelling, SEO-friendly product description for an e-commerce website.
Product: {name}
Category: {category}
Price: ${price}

Make it engaging, highlight key features, and keep it between 100-150 words."""

SUPPORT_SYSTEM_PROMPT = """You are a helpful customer support assistant for an e-commerce website.
You can help customers with:
- Product information and recommendations
- Order inquiries
- General questions about the store

Available products:
{product_list}

Be friendly, concise, and helpful. If you don't know something, politely say so."""

SINGLE_PROMPT_SUPPORT = """You are a helpful customer support assistant for an e-commerce website.
You can help customers with product information, order inquiries, and general questions.

Available products:
{product_list}

User question: {message}

Provide a helpful, friendly response."""

RECOMMENDATION_PROMPT = """Based on this user query: "{query}"

Here are our available products:
{product_list}

Recommend 3-5 products that best match the user's query. Return only the product names in a comma-separated list."""

SENTIMENT_PROMPT = """Analyze these product reviews and provide:
1. Overall sentiment (positive/negative/neutral)
2. Key positive points mentioned
3. Key negative points mentioned
4. Overall rating estimate (1-5)

Reviews:
{reviews}"""


def _format_price(price: Optional[Union[int, float, str]]) -> Union[int, float, str]:
    """정수값 float는 소수점 없이 표기 (25.0 → 25)"""
    if not price:
        return "Not specified"
    if isinstance(price, float) and price.is_integer():
        return int(price)
    return price


def build_description_prompt(
    name: str,
    category: Optional[str] = None,
    price: Optional[Union[int, float, str]] = None,
) -> str:
    """상품 설명 프롬프트 생성 (카테고리 기본값 General, 가격 없으면 Not specified)"""
    return DESCRIPTION_PROMPT.format(
        name=name,
        category=category or "General",
        price=_format_price(price),
    )


def format_support_rows(rows: Sequence[ProductSummary]) -> str:
    """'이름 (카테고리) - $가격' 형식으로 최대 10개 행 렌더링"""
    return "\n".join(
        f"{p.name} ({p.category}) - ${p.price}" for p in rows[:SUPPORT_CATALOG_LIMIT]
    )


def build_support_prompt(
    user_message: str,
    catalog_rows: Sequence[ProductSummary],
) -> Tuple[str, str]:
    """
    고객지원 채팅 프롬프트 생성

    Returns:
        (시스템 프롬프트, 사용자 프롬프트)
    """
    system_prompt = SUPPORT_SYSTEM_PROMPT.format(product_list=format_support_rows(catalog_rows))
    return system_prompt, user_message


def build_single_prompt_support(
    user_message: str,
    catalog_rows: Sequence[ProductSummary],
) -> str:
    """카탈로그와 질문을 하나의 텍스트로 합친 고객지원 프롬프트 (단일 프롬프트 제공자용)"""
    return SINGLE_PROMPT_SUPPORT.format(
        product_list=format_support_rows(catalog_rows),
        message=user_message,
    )


def build_recommendation_prompt(query: str, catalog_rows: Sequence[ProductSummary]) -> str:
    """전체 카탈로그를 포함한 추천 프롬프트 생성"""
    product_list = "\n\n".join(
        f"Name: {p.name}, Category: {p.category}, Description: {p.description}"
        for p in catalog_rows
    )
    return RECOMMENDATION_PROMPT.format(query=query, product_list=product_list)


def build_sentiment_prompt(reviews: Sequence[str]) -> str:
    """리뷰 감성 분석 프롬프트 생성 (리뷰는 빈 줄로 구분)"""
    return SENTIMENT_PROMPT.format(reviews="\n\n".join(str(r) for r in reviews))


def parse_recommended_names(text: str) -> List[str]:
    """모델 출력을 쉼표로 분리하고 공백 제거"""
    return [name.strip() for name in text.split(",")]


def match_recommendations(
    products: Sequence[ProductSummary],
    names: Sequence[str],
    limit: int = RECOMMENDATION_LIMIT,
) -> List[ProductSummary]:
    """
    추천 이름과 카탈로그 매칭

    상품명(소문자)에 추천 이름(소문자)이 부분 문자열로 포함되면 채택합니다.
    카탈로그 순서를 유지하고 최대 limit개까지 반환합니다.
    """
    lowered = [name.lower() for name in names]
    matched = [
        p for p in products
        if any(name in (p.name or "").lower() for name in lowered)
    ]
    return matched[:limit]
