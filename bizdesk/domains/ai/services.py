# bizdesk/domains/ai/services.py

"""
Google Generative AI(Gemini) 대화 래퍼입니다.

서비스 객체는 대화 상태를 보관하지 않습니다. 대화 이력은 불변 값인 ChatContext로
호출마다 전달되고, 응답과 함께 새 ChatContext가 반환됩니다.
따라서 하나의 서비스 인스턴스를 여러 요청/사용자가 동시에 공유해도 대화가 섞이지 않습니다.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Dict, List, Literal, Optional, Tuple

import google.generativeai as genai
from fastapi import HTTPException, status

from bizdesk.core.config import settings

logger = logging.getLogger(__name__)

Role = Literal["user", "model"]


class AIServiceError(Exception):
    """AI 서비스 호출 실패."""


# =============================================================================
# 대화 컨텍스트 값 객체
# =============================================================================
@dataclass(frozen=True)
class ChatMessage:
    role: Role
    text: str


@dataclass(frozen=True)
class ChatContext:
    messages: Tuple[ChatMessage, ...] = ()

    def append(self, *messages: ChatMessage) -> "ChatContext":
        return ChatContext(self.messages + tuple(messages))

    def last(self, count: int) -> "ChatContext":
        """가장 최근 count개의 메시지만 남긴 컨텍스트를 반환합니다."""
        if count <= 0:
            return ChatContext()
        return ChatContext(self.messages[-count:])

    def to_contents(self) -> List[Dict[str, Any]]:
        return [{"role": message.role, "parts": [message.text]} for message in self.messages]


@dataclass(frozen=True)
class FunctionCall:
    name: str
    args: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class FunctionCallResult:
    text: str
    function_calls: List[FunctionCall]


@dataclass(frozen=True)
class ChatReply:
    text: str
    function_calls: List[FunctionCall]
    context: ChatContext


# =============================================================================
# 응답 파싱
# =============================================================================
def _to_plain(value: Any) -> Any:
    """proto MapComposite / RepeatedComposite 값을 JSON 직렬화 가능한 dict/list로 변환합니다."""
    if isinstance(value, Mapping):
        return {key: _to_plain(item) for key, item in value.items()}
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return [_to_plain(item) for item in value]
    return value


def parse_response(response: Any) -> Tuple[str, List[FunctionCall]]:
    """
    generate_content 응답에서 텍스트와 함수 호출을 분리합니다.
    response.text 는 함수 호출만 있는 응답에서 예외를 던지므로 parts를 직접 순회합니다.
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return "", []

    texts: List[str] = []
    calls: List[FunctionCall] = []
    for part in candidates[0].content.parts:
        function_call = getattr(part, "function_call", None)
        if function_call is not None and getattr(function_call, "name", ""):
            calls.append(FunctionCall(name=function_call.name, args=_to_plain(function_call.args or {})))
            continue
        text = getattr(part, "text", "")
        if text:
            texts.append(text)
    return "".join(texts), calls


def _tools(functions: Optional[List[Dict[str, Any]]]) -> Optional[List[Dict[str, Any]]]:
    if not functions:
        return None
    return [{"function_declarations": functions}]


# =============================================================================
# 서비스
# =============================================================================
class GeminiChatService:
    def __init__(
        self,
        api_key: str,
        model_name: str = "gemini-2.0-flash",
        generation_config: Optional[Dict[str, Any]] = None,
    ):
        genai.configure(api_key=api_key)
        self.model_name = model_name
        self.generation_config = generation_config or {"temperature": 0.7, "top_p": 0.95, "top_k": 64}

    def _model(self, system_instruction: Optional[str] = None) -> "genai.GenerativeModel":
        return genai.GenerativeModel(
            self.model_name,
            system_instruction=system_instruction,
            generation_config=self.generation_config,
        )

    async def send_message(
        self,
        message: str,
        context: ChatContext = ChatContext(),
        *,
        system_instruction: Optional[str] = None,
        functions: Optional[List[Dict[str, Any]]] = None,
    ) -> ChatReply:
        """
        대화 컨텍스트에 이어 메시지를 보내고, 응답과 갱신된 컨텍스트를 반환합니다.
        전달받은 context 는 변경되지 않습니다.
        """
        contents = context.to_contents() + [{"role": "user", "parts": [message]}]
        try:
            response = await self._model(system_instruction).generate_content_async(
                contents, tools=_tools(functions)
            )
            text, calls = parse_response(response)
        except Exception as e:
            logger.exception("Error communicating with Gemini API")
            raise AIServiceError("Failed to communicate with AI service") from e

        model_turn = text or "; ".join(f"[function call: {call.name}]" for call in calls)
        new_context = context.append(ChatMessage("user", message), ChatMessage("model", model_turn))
        return ChatReply(text=text, function_calls=calls, context=new_context)

    async def call_function(self, prompt: str, functions: List[Dict[str, Any]]) -> FunctionCallResult:
        """
        대화 이력 없이 단일 프롬프트로 function calling을 실행합니다.
        """
        try:
            response = await self._model().generate_content_async(
                [{"role": "user", "parts": [prompt]}], tools=_tools(functions)
            )
            text, calls = parse_response(response)
        except Exception as e:
            logger.exception("Error with Gemini function calling")
            raise AIServiceError("Failed to execute function call with AI service") from e
        return FunctionCallResult(text=text, function_calls=calls)


@lru_cache
def _build_service(api_key: str, model_name: str) -> GeminiChatService:
    return GeminiChatService(
        api_key=api_key,
        model_name=model_name,
        generation_config={
            "temperature": settings.GEMINI_TEMPERATURE,
            "top_p": settings.GEMINI_TOP_P,
            "top_k": settings.GEMINI_TOP_K,
        },
    )


def get_ai_service() -> GeminiChatService:
    """
    FastAPI 의존성: 설정된 API 키로 공유 서비스 인스턴스를 반환합니다.
    """
    if settings.GEMINI_API_KEY is None:
        logger.error("GEMINI_API_KEY is not configured")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="AI service is not configured")
    return _build_service(settings.GEMINI_API_KEY.get_secret_value(), settings.GEMINI_MODEL)
