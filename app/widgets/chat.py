"""
채팅 위젯
대화 기록을 메모리에 보관하고 매 요청마다 전체 기록을 전송합니다.
"""
from typing import Literal, Optional

from app.models.chat import ChatMessage
from app.widgets.base import ApiWidget, WidgetRequestError

GREETING = "Hello! I'm your AI shopping assistant. How can I help you today?"
FALLBACK_REPLY = "Sorry, I'm having trouble right now. Please try again later."


class ChatWidget(ApiWidget):
    """고객지원 채팅 위젯"""

    def __init__(self, provider: Literal["gpt", "gemini"] = "gpt", **kwargs) -> None:
        super().__init__(**kwargs)
        self.provider = provider
        self.messages = [ChatMessage(role="assistant", content=GREETING)]

    @property
    def endpoint(self) -> str:
        return f"/ai/{self.provider}/chat"

    async def send(self, text: str) -> Optional[ChatMessage]:
        """
        메시지 전송

        사용자 메시지를 먼저 기록에 추가하고, 이전 기록 전체와 함께 전송합니다.
        실패하면 고정 안내 메시지를 추가하고 에러 알림을 띄웁니다.

        Returns:
            추가된 어시스턴트 메시지 (빈 입력이거나 전송 중이면 None)
        """
        if not text.strip() or self.loading:
            return None

        history = [m.model_dump() for m in self.messages]
        self.messages.append(ChatMessage(role="user", content=text))
        self.loading = True

        try:
            data = await self._post(
                self.endpoint,
                {"message": text, "conversationHistory": history},
            )
            content = data.get("response")
            if not isinstance(content, str):
                raise WidgetRequestError("응답에 response 필드가 없습니다")
            reply = ChatMessage(role="assistant", content=content)
        except WidgetRequestError as e:
            self.notify("error", e.error or "Failed to get AI response")
            reply = ChatMessage(role="assistant", content=FALLBACK_REPLY)
        finally:
            self.loading = False

        self.messages.append(reply)
        return reply
