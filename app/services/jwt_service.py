"""
JWT 토큰 서비스
인증 서비스가 발급한 accessToken 쿠키를 검증합니다.
"""

from datetime import datetime, timedelta
from typing import Optional
from jose import jwt, JWTError
from pydantic import BaseModel

from app.config import get_settings

settings = get_settings()


class TokenData(BaseModel):
    """토큰 데이터"""

    user_id: str
    exp: datetime


class JWTService:
    """JWT 토큰 서비스"""

    def __init__(self):
        self.secret_key = settings.jwt_secret_key
        self.algorithm = settings.jwt_algorithm
        self.expire_minutes = settings.jwt_expire_minutes

    def create_access_token(
        self,
        user_id: str,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """액세스 토큰 생성"""
        if expires_delta:
            expire = datetime.utcnow() + expires_delta
        else:
            expire = datetime.utcnow() + timedelta(minutes=self.expire_minutes)

        payload = {
            "sub": user_id,
            "exp": expire,
            "iat": datetime.utcnow(),
            "type": "access",
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> Optional[TokenData]:
        """토큰 검증 및 디코딩 (만료/서명 오류 시 None)"""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
            user_id: str = payload.get("sub")
            exp: int = payload.get("exp")

            if user_id is None or payload.get("type") != "access":
                return None

            return TokenData(
                user_id=user_id,
                exp=datetime.fromtimestamp(exp),
            )
        except JWTError:
            return None


# 싱글톤 인스턴스
jwt_service = JWTService()
