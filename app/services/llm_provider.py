"""
LLM Provider 추상화
OpenAI(채팅 완성)와 Gemini(단일 프롬프트 생성)를 하나의 complete() 계약으로 감싸는 계층

- 자동 재시도 없음 (요청당 제공자 호출 1회)
- 전송/응답 오류는 모두 ModelCallFailed로 변환
- 토큰 수, 종료 사유 등 메타데이터는 버리고 텍스트만 반환
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import (
    AIMessage,
    BaseMessage,
    HumanMessage,
    SystemMessage,
)

from app.config import get_settings
from app.models.chat import ChatMessage

logger = logging.getLogger(__name__)


class ModelCallFailed(Exception):
    """LLM 제공자 호출 실패 (원본 메시지 보존)"""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(message)
        self.provider = provider
        self.message = message


def _extract_text(provider: str, response: Any) -> str:
    """응답 객체에서 텍스트만 추출"""
    content = getattr(response, "content", None)

    if isinstance(content, str):
        return content

    # 일부 모델은 content를 파트 리스트로 반환
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)

    raise ModelCallFailed(provider, f"응답 형식이 올바르지 않습니다: {type(content).__name__}")


class LLMProvider(ABC):
    """LLM 제공자 추상 기본 클래스"""

    name: str = ""

    @abstractmethod
    def get_chat_model(self, max_output_tokens: int, temperature: float) -> BaseChatModel:
        """채팅 모델 인스턴스 반환"""
        pass

    @abstractmethod
    def build_messages(
        self,
        system_prompt: Optional[str],
        messages: Sequence[ChatMessage],
    ) -> List[BaseMessage]:
        """제공자 요청 형태로 메시지 변환"""
        pass

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """API 키 설정 여부"""
        pass

    async def complete(
        self,
        system_prompt: Optional[str],
        messages: Sequence[ChatMessage],
        max_output_tokens: int,
        temperature: float,
    ) -> str:
        """
        텍스트 생성

        Args:
            system_prompt: 시스템 지시문 (없으면 None)
            messages: 순서가 유지된 대화 메시지
            max_output_tokens: 최대 출력 토큰
            temperature: 샘플링 온도

        Returns:
            생성된 텍스트

        Raises:
            ModelCallFailed: 키 미설정, 전송 실패, 응답 형식 오류
        """
        if not self.is_configured:
            raise ModelCallFailed(self.name, f"{self.name} API 키가 설정되지 않았습니다")

        payload = self.build_messages(system_prompt, messages)
        logger.info(f"[LLM:{self.name}] 호출 - messages: {len(payload)}, max_tokens: {max_output_tokens}")

        try:
            model = self.get_chat_model(max_output_tokens, temperature)
            response = await model.ainvoke(payload)
        except Exception as e:
            logger.error(f"[LLM:{self.name}] 호출 실패: {e}")
            raise ModelCallFailed(self.name, str(e)) from e

        return _extract_text(self.name, response)


class OpenAIProvider(LLMProvider):
    """OpenAI LLM 제공자 (역할 구분 메시지 리스트)"""

    name = "openai"

    def __init__(self) -> None:
        settings = get_settings()
        self._api_key = settings.openai_api_key
        self._model = settings.openai_model

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def get_chat_model(self, max_output_tokens: int, temperature: float) -> BaseChatModel:
        """ChatOpenAI 인스턴스 반환"""
        from langchain_openai import ChatOpenAI

        return ChatOpenAI(
            api_key=self._api_key,
            model=self._model,
            temperature=temperature,
            max_tokens=max_output_tokens,
            max_retries=0,
        )

    def build_messages(
        self,
        system_prompt: Optional[str],
        messages: Sequence[ChatMessage],
    ) -> List[BaseMessage]:
        """선택적 시스템 메시지 + 대화 메시지"""
        result: List[BaseMessage] = []
        if system_prompt:
            result.append(SystemMessage(content=system_prompt))

        for message in messages:
            if message.role == "system":
                result.append(SystemMessage(content=message.content))
            elif message.role == "assistant":
                result.append(AIMessage(content=message.content))
            else:
                result.append(HumanMessage(content=message.content))
        return result


def flatten_prompt(system_prompt: Optional[str], messages: Sequence[ChatMessage]) -> str:
    """
    시스템 지시문과 대화 기록을 하나의 프롬프트 문자열로 합침

    사용자 메시지 하나만 있으면 내용을 그대로 사용하고,
    여러 턴이면 'Role: 내용' 줄로 풀어 씁니다.
    """
    parts: List[str] = []
    if system_prompt:
        parts.append(system_prompt)

    if len(messages) == 1 and messages[0].role == "user":
        parts.append(messages[0].content)
    else:
        parts.extend(f"{m.role.capitalize()}: {m.content}" for m in messages)

    return "\n\n".join(parts)


class GeminiProvider(LLMProvider):
    """Google Gemini LLM 제공자 (단일 프롬프트)"""

    name = "gemini"

    def __init__(self) -> None:
        settings = get_settings()
        self._api_key = settings.google_api_key
        self._model = settings.gemini_model

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def get_chat_model(self, max_output_tokens: int, temperature: float) -> BaseChatModel:
        """ChatGoogleGenerativeAI 인스턴스 반환"""
        from langchain_google_genai import ChatGoogleGenerativeAI

        return ChatGoogleGenerativeAI(
            google_api_key=self._api_key,
            model=self._model,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
            max_retries=0,
        )

    def build_messages(
        self,
        system_prompt: Optional[str],
        messages: Sequence[ChatMessage],
    ) -> List[BaseMessage]:
        """모든 입력을 하나의 사용자 프롬프트로 평탄화"""
        return [HumanMessage(content=flatten_prompt(system_prompt, messages))]


# 싱글톤 인스턴스
_openai_provider: Optional[OpenAIProvider] = None
_gemini_provider: Optional[GeminiProvider] = None


def get_openai_provider() -> LLMProvider:
    """OpenAI 제공자 싱글톤 반환"""
    global _openai_provider
    if _openai_provider is None:
        _openai_provider = OpenAIProvider()
    return _openai_provider


def get_gemini_provider() -> LLMProvider:
    """Gemini 제공자 싱글톤 반환"""
    global _gemini_provider
    if _gemini_provider is None:
        _gemini_provider = GeminiProvider()
    return _gemini_provider


def user_message(content: str) -> ChatMessage:
    """사용자 메시지 생성 헬퍼"""
    return ChatMessage(role="user", content=content)
