"""
대화 메시지 모델
클라이언트가 보관하고 매 요청마다 통째로 전송하는 대화 기록 단위
"""
from typing import Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """대화 메시지"""

    role: Literal["user", "assistant", "system"] = Field(..., description="역할")
    content: str = Field(..., description="내용")
