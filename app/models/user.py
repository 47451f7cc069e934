"""
사용자 모델
쿠키 세션 인증과 관리자 권한 확인에 필요한 필드만 보유
"""

from datetime import datetime
from typing import Optional
from sqlalchemy import String, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID
import uuid

from app.database import Base


class User(Base):
    """사용자 모델"""

    __tablename__ = "users"

    # Primary Key
    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # 기본 정보
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # 권한
    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="customer",
        comment="사용자 권한: customer, admin",
    )

    # 메타데이터
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
    )

    __table_args__ = (
        {"comment": "사용자 테이블 - 인증 서비스 소유, 읽기 전용"},
    )

    @property
    def is_admin(self) -> bool:
        """관리자 여부"""
        return self.role == "admin"

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
