"""
FastAPI 의존성 모듈
"""

from app.dependencies.auth import get_current_user, get_current_admin

__all__ = ["get_current_user", "get_current_admin"]
