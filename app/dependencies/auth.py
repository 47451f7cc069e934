"""
인증 의존성
accessToken 쿠키 기반 세션 인증 및 관리자 권한 확인
"""

import logging
import uuid

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyCookie
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.config import get_settings
from app.database import get_db
from app.services.jwt_service import jwt_service
from app.models.user import User

logger = logging.getLogger(__name__)

# 쿠키 스키마
access_cookie = APIKeyCookie(name=get_settings().access_token_cookie, auto_error=False)


async def get_current_user(
    token: str = Depends(access_cookie),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    현재 로그인된 사용자 조회 (필수)
    쿠키가 없거나 토큰이 유효하지 않으면 401 에러
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized - No access token provided",
        )

    token_data = jwt_service.verify_token(token)

    if token_data is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized - Invalid access token",
        )

    try:
        user_id = uuid.UUID(token_data.user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized - Invalid access token",
        )

    # 사용자 조회
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="비활성화된 계정입니다",
        )

    return user


async def get_current_admin(
    user: User = Depends(get_current_user),
) -> User:
    """
    관리자 사용자 조회
    관리자가 아니면 403 에러
    """
    if not user.is_admin:
        logger.warning(f"[Auth] 관리자 전용 접근 거부 - user: {user.id}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied - Admin only",
        )

    return user
