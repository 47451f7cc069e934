"""
위젯 공통 HTTP 계층
AI 엔드포인트를 호출하고 실패를 WidgetRequestError로 통일합니다.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Literal, Optional

import httpx

from app.config import get_settings

logger = logging.getLogger(__name__)


@dataclass
class Notification:
    """사용자에게 잠시 보여줄 알림 (토스트)"""

    level: Literal["success", "info", "error"]
    text: str


class WidgetRequestError(Exception):
    """엔드포인트 호출 실패"""

    def __init__(
        self,
        message: str,
        error: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        # 서버 응답의 error 필드 (있을 때만)
        self.error = error
        self.status_code = status_code


class ApiWidget:
    """AI 엔드포인트를 호출하는 위젯 베이스"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        cookies: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        notify: Optional[Callable[[Notification], None]] = None,
    ) -> None:
        self._base_url = base_url or get_settings().api_base_url
        self._cookies = cookies or {}
        self._transport = transport
        self._notify_callback = notify
        self.notifications: List[Notification] = []
        self.loading = False

    def notify(self, level: str, text: str) -> None:
        """알림 기록 및 콜백 호출"""
        notification = Notification(level=level, text=text)
        self.notifications.append(notification)
        if self._notify_callback is not None:
            self._notify_callback(notification)

    async def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """JSON POST 후 성공 응답 본문 반환"""
        try:
            # 모델 응답 대기 시간은 제한하지 않음
            async with httpx.AsyncClient(
                base_url=self._base_url,
                cookies=self._cookies,
                transport=self._transport,
                timeout=None,
            ) as client:
                response = await client.post(path, json=payload)
        except httpx.HTTPError as e:
            logger.warning(f"[Widget] 요청 실패: {path} - {e}")
            raise WidgetRequestError(str(e)) from e

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.status_code != 200:
            error = body.get("error") if isinstance(body, dict) else None
            raise WidgetRequestError(
                f"API 오류: {response.status_code}",
                error=error if isinstance(error, str) else None,
                status_code=response.status_code,
            )

        if not isinstance(body, dict):
            raise WidgetRequestError("응답 형식이 올바르지 않습니다", status_code=response.status_code)

        return body
