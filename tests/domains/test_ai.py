# tests/domains/test_ai.py

"""
'ai' 도메인 (AI 어시스턴트) 테스트 모듈입니다.

Gemini API는 호출하지 않고, get_ai_service 의존성을 가짜 서비스로 교체합니다.
"""

from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
import pytest_asyncio
from httpx import AsyncClient

from bizdesk.main import app as main_app
from bizdesk.domains.ai import functions
from bizdesk.domains.ai.services import (
    AIServiceError,
    ChatContext,
    ChatMessage,
    ChatReply,
    FunctionCall,
    FunctionCallResult,
    get_ai_service,
    parse_response,
)

AI_API = "/api/v1/ai"


class FakeChatService:
    """호출 인자를 기록하고 미리 정한 응답을 돌려주는 가짜 서비스."""

    def __init__(self, text: str = "Hallo!", calls: Optional[List[FunctionCall]] = None, fail: bool = False):
        self.text = text
        self.calls = calls or []
        self.fail = fail
        self.received: List[Dict[str, Any]] = []

    async def send_message(self, message, context=ChatContext(), *, system_instruction=None, functions=None):
        self.received.append({"message": message, "context": context, "system_instruction": system_instruction})
        if self.fail:
            raise AIServiceError("Failed to communicate with AI service")
        model_turn = self.text or "[function call]"
        new_context = context.append(ChatMessage("user", message), ChatMessage("model", model_turn))
        return ChatReply(text=self.text, function_calls=self.calls, context=new_context)

    async def call_function(self, prompt, functions):
        self.received.append({"prompt": prompt})
        if self.fail:
            raise AIServiceError("Failed to execute function call with AI service")
        return FunctionCallResult(text=self.text, function_calls=self.calls)


@pytest_asyncio.fixture
async def fake_service():
    service = FakeChatService()
    main_app.dependency_overrides[get_ai_service] = lambda: service
    yield service
    main_app.dependency_overrides.pop(get_ai_service, None)


# =============================================================================
# 1. 대화 컨텍스트 값 객체
# =============================================================================
def test_chat_context_is_immutable():
    empty = ChatContext()
    first = empty.append(ChatMessage("user", "hi"))
    second = first.append(ChatMessage("model", "hello"))

    assert empty.messages == ()
    assert len(first.messages) == 1
    assert len(second.messages) == 2
    assert second.to_contents() == [
        {"role": "user", "parts": ["hi"]},
        {"role": "model", "parts": ["hello"]},
    ]


def test_chat_context_last():
    context = ChatContext(tuple(ChatMessage("user", str(i)) for i in range(5)))

    assert [m.text for m in context.last(2).messages] == ["3", "4"]
    assert context.last(0).messages == ()


def test_parse_response_splits_text_and_function_calls():
    response = SimpleNamespace(
        candidates=[
            SimpleNamespace(
                content=SimpleNamespace(
                    parts=[
                        SimpleNamespace(text="Sure. ", function_call=None),
                        SimpleNamespace(
                            text="",
                            function_call=SimpleNamespace(name="create_customer", args={"companyName": "Acme"}),
                        ),
                    ]
                )
            )
        ]
    )

    text, calls = parse_response(response)

    assert text == "Sure. "
    assert calls == [FunctionCall(name="create_customer", args={"companyName": "Acme"})]


def test_parse_response_without_candidates():
    assert parse_response(SimpleNamespace(candidates=[])) == ("", [])


def test_confirmation_messages():
    assert functions.confirmation_message("get_customers", {}) == (
        "I can help you find customers. Let me search for that information."
    )
    assert functions.confirmation_message("get_documents", {"type": "INVOICE"}) == "I'll find the invoices for you."
    assert "Acme" in functions.confirmation_message("create_customer", {"companyName": "Acme"})
    assert functions.confirmation_message("unknown", {}).startswith("I understand what you want to do")


def test_function_declarations_are_unique_per_set():
    for declarations in (functions.CHAT_FUNCTIONS, functions.ACTION_FUNCTIONS):
        names = [declaration["name"] for declaration in declarations]
        assert len(names) == len(set(names)) == 6


# =============================================================================
# 2. /ai/chat
# =============================================================================
@pytest.mark.asyncio
async def test_chat_returns_reply_and_history(authorized_client: AsyncClient, fake_service: FakeChatService):
    history = [{"role": "user", "text": "Hoi"}, {"role": "model", "text": "Hallo, hoe kan ik helpen?"}]

    response = await authorized_client.post(f"{AI_API}/chat", json={"message": "Wat kun je?", "history": history})

    assert response.status_code == 200
    data = response.json()
    assert data["content"] == "Hallo!"
    assert "functionCall" not in data
    assert [m["text"] for m in data["history"]] == ["Hoi", "Hallo, hoe kan ik helpen?", "Wat kun je?", "Hallo!"]

    received = fake_service.received[0]
    assert len(received["context"].messages) == 2
    assert "Acme B.V." in received["system_instruction"]
    assert "owner@example.com" in received["system_instruction"]


@pytest.mark.asyncio
async def test_chat_function_call_returns_confirmation(authorized_client: AsyncClient, fake_service: FakeChatService):
    fake_service.text = ""
    fake_service.calls = [FunctionCall(name="convert_offer_to_invoice", args={"offerId": "12"})]

    response = await authorized_client.post(f"{AI_API}/chat", json={"message": "Zet offerte 12 om"})

    assert response.status_code == 200
    data = response.json()
    assert data["content"] == "I can convert that offer to an invoice. Would you like me to proceed?"
    assert data["functionCall"] == {"name": "convert_offer_to_invoice", "args": {"offerId": "12"}}


@pytest.mark.asyncio
async def test_chat_empty_reply_uses_fallback(authorized_client: AsyncClient, fake_service: FakeChatService):
    fake_service.text = ""

    response = await authorized_client.post(f"{AI_API}/chat", json={"message": "???"})

    assert response.json()["content"] == functions.FALLBACK_REPLY


@pytest.mark.asyncio
async def test_chat_truncates_long_history(authorized_client: AsyncClient, fake_service: FakeChatService):
    history = [{"role": "user" if i % 2 == 0 else "model", "text": f"m{i}"} for i in range(60)]

    response = await authorized_client.post(f"{AI_API}/chat", json={"message": "next", "history": history})

    assert response.status_code == 200
    context = fake_service.received[0]["context"]
    assert len(context.messages) == 40
    assert context.messages[-1].text == "m59"


@pytest.mark.asyncio
async def test_chat_requires_message(authorized_client: AsyncClient, fake_service: FakeChatService):
    response = await authorized_client.post(f"{AI_API}/chat", json={"message": "  "})

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid request body"}
    assert fake_service.received == []


@pytest.mark.asyncio
async def test_chat_service_failure(authorized_client: AsyncClient, fake_service: FakeChatService):
    fake_service.fail = True

    response = await authorized_client.post(f"{AI_API}/chat", json={"message": "Hallo"})

    assert response.status_code == 500
    assert response.json() == {"message": "Error processing your request"}


@pytest.mark.asyncio
async def test_chat_authorization(
    client: AsyncClient, no_company_client: AsyncClient, fake_service: FakeChatService
):
    anonymous = await client.post(f"{AI_API}/chat", json={"message": "Hallo"})
    without_company = await no_company_client.post(f"{AI_API}/chat", json={"message": "Hallo"})

    assert anonymous.status_code == 401
    assert without_company.status_code == 400
    assert without_company.json() == {"message": "User or company not found"}


@pytest.mark.asyncio
async def test_chat_without_api_key(authorized_client: AsyncClient, monkeypatch):
    from bizdesk.core.config import settings

    monkeypatch.setattr(settings, "GEMINI_API_KEY", None)

    response = await authorized_client.post(f"{AI_API}/chat", json={"message": "Hallo"})

    assert response.status_code == 500
    assert response.json() == {"message": "AI service is not configured"}


# =============================================================================
# 3. /ai/function
# =============================================================================
@pytest.mark.asyncio
async def test_function_call_is_simulated(authorized_client: AsyncClient, fake_service: FakeChatService):
    fake_service.text = "Ik maak de klant aan."
    fake_service.calls = [FunctionCall(name="create_customer", args={"companyName": "Bakkerij Jansen"})]

    response = await authorized_client.post(f"{AI_API}/function", json={"prompt": "Maak klant Bakkerij Jansen"})

    assert response.status_code == 200
    data = response.json()
    assert data["content"] == "Ik maak de klant aan."
    assert data["functionCalls"] == [
        {
            "functionName": "create_customer",
            "arguments": {"companyName": "Bakkerij Jansen"},
            "status": "simulated",
            "message": "Function create_customer would be called with the provided arguments.",
        }
    ]
    assert fake_service.received[0]["prompt"].endswith("User prompt: Maak klant Bakkerij Jansen")


@pytest.mark.asyncio
async def test_function_requires_prompt(authorized_client: AsyncClient, fake_service: FakeChatService):
    response = await authorized_client.post(f"{AI_API}/function", json={})

    assert response.status_code == 400
    assert response.json() == {"message": "Prompt is required"}


@pytest.mark.asyncio
async def test_function_without_company(no_company_client: AsyncClient, fake_service: FakeChatService):
    response = await no_company_client.post(f"{AI_API}/function", json={"prompt": "x"})

    assert response.status_code == 400
    assert response.json() == {"message": "User company not found"}


@pytest.mark.asyncio
async def test_function_service_failure(authorized_client: AsyncClient, fake_service: FakeChatService):
    fake_service.fail = True

    response = await authorized_client.post(f"{AI_API}/function", json={"prompt": "Maak een offerte"})

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to process request"}
