# Pydantic Models
from app.models.chat import ChatMessage
from app.models.request import (
    DescriptionRequest,
    ChatRequest,
    RecommendationRequest,
    SentimentRequest,
)
from app.models.product import Product, ProductSummary
from app.models.response import (
    DescriptionResponse,
    ChatResponse,
    RecommendationResponse,
    SentimentResponse,
    ErrorResponse,
)
from app.models.user import User

__all__ = [
    # Chat models
    "ChatMessage",
    # Request models
    "DescriptionRequest",
    "ChatRequest",
    "RecommendationRequest",
    "SentimentRequest",
    # Product models
    "Product",
    "ProductSummary",
    # Response models
    "DescriptionResponse",
    "ChatResponse",
    "RecommendationResponse",
    "SentimentResponse",
    "ErrorResponse",
    # ORM models
    "User",
]
