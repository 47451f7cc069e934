"""
LLM 제공자 어댑터 유닛 테스트
"""
import asyncio

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from app.models.chat import ChatMessage
from app.services.llm_provider import (
    GeminiProvider,
    ModelCallFailed,
    OpenAIProvider,
    flatten_prompt,
)


class FakeChatModel:
    """ainvoke 호출을 기록하는 채팅 모델"""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.payloads = []

    async def ainvoke(self, messages):
        self.payloads.append(messages)
        if self.error is not None:
            raise self.error
        return self.response


def _configured(provider_cls, model):
    provider = provider_cls()
    provider._api_key = "test-key"
    provider.get_chat_model = lambda max_output_tokens, temperature: model
    return provider


HISTORY = [
    ChatMessage(role="user", content="hi"),
    ChatMessage(role="assistant", content="Hello! How can I help?"),
    ChatMessage(role="user", content="price of scarf?"),
]


class TestOpenAIProvider:
    """OpenAI 어댑터 테스트"""

    def test_role_tagged_messages(self):
        """시스템 메시지 + 역할별 메시지"""
        model = FakeChatModel(AIMessage(content="It is $39.99"))
        provider = _configured(OpenAIProvider, model)

        text = asyncio.run(provider.complete("Be helpful", HISTORY, 300, 0.7))

        assert text == "It is $39.99"
        payload = model.payloads[0]
        assert [type(m) for m in payload] == [SystemMessage, HumanMessage, AIMessage, HumanMessage]
        assert payload[0].content == "Be helpful"
        assert payload[-1].content == "price of scarf?"

    def test_without_system_prompt(self):
        """시스템 프롬프트 없으면 생략"""
        provider = OpenAIProvider()
        payload = provider.build_messages(None, [ChatMessage(role="user", content="hi")])

        assert len(payload) == 1
        assert isinstance(payload[0], HumanMessage)

    def test_transport_error_mapped(self):
        """전송 오류는 ModelCallFailed로 변환"""
        model = FakeChatModel(error=TimeoutError("Request timed out."))
        provider = _configured(OpenAIProvider, model)

        with pytest.raises(ModelCallFailed) as exc_info:
            asyncio.run(provider.complete(None, HISTORY, 300, 0.7))

        assert exc_info.value.message == "Request timed out."
        assert exc_info.value.provider == "openai"
        assert len(model.payloads) == 1

    def test_missing_api_key(self):
        """API 키 미설정 시 호출하지 않고 실패"""
        model = FakeChatModel(AIMessage(content="unused"))
        provider = _configured(OpenAIProvider, model)
        provider._api_key = ""

        with pytest.raises(ModelCallFailed):
            asyncio.run(provider.complete(None, HISTORY, 300, 0.7))

        assert model.payloads == []

    def test_chat_model_never_retries(self):
        """자동 재시도 비활성화"""
        provider = OpenAIProvider()
        provider._api_key = "sk-test"

        model = provider.get_chat_model(200, 0.7)

        assert model.max_retries == 0
        assert model.temperature == 0.7


class TestGeminiProvider:
    """Gemini 어댑터 테스트"""

    def test_single_prompt(self):
        """모든 입력을 하나의 사용자 메시지로 전달"""
        model = FakeChatModel(AIMessage(content="Positive overall"))
        provider = _configured(GeminiProvider, model)

        text = asyncio.run(
            provider.complete(None, [ChatMessage(role="user", content="Analyze these")], 1024, 0.7)
        )

        assert text == "Positive overall"
        payload = model.payloads[0]
        assert len(payload) == 1
        assert isinstance(payload[0], HumanMessage)
        assert payload[0].content == "Analyze these"

    def test_content_parts_joined(self):
        """파트 리스트 응답은 텍스트만 이어 붙임"""
        response = AIMessage(content=[{"type": "text", "text": "Hello "}, {"type": "text", "text": "there"}])
        provider = _configured(GeminiProvider, FakeChatModel(response))

        text = asyncio.run(provider.complete(None, [ChatMessage(role="user", content="hi")], 1024, 0.7))

        assert text == "Hello there"

    def test_malformed_payload(self):
        """텍스트가 없는 응답은 ModelCallFailed"""
        provider = _configured(GeminiProvider, FakeChatModel(object()))

        with pytest.raises(ModelCallFailed):
            asyncio.run(provider.complete(None, [ChatMessage(role="user", content="hi")], 1024, 0.7))


class TestFlattenPrompt:
    """단일 프롬프트 평탄화 테스트"""

    def test_single_user_message(self):
        """사용자 메시지 하나는 그대로"""
        assert flatten_prompt(None, [ChatMessage(role="user", content="hi")]) == "hi"

    def test_system_prompt_first(self):
        """시스템 지시문이 앞에 옴"""
        assert flatten_prompt("Be brief", [ChatMessage(role="user", content="hi")]) == "Be brief\n\nhi"

    def test_multi_turn(self):
        """여러 턴은 역할 표기"""
        prompt = flatten_prompt("Be brief", HISTORY)

        assert prompt == (
            "Be brief\n\n"
            "User: hi\n\n"
            "Assistant: Hello! How can I help?\n\n"
            "User: price of scarf?"
        )
