# bizdesk/domains/ai/routers.py

"""
AI 어시스턴트(/ai) 엔드포인트.

- POST /ai/chat     : 대화형 어시스턴트. history 를 받아 갱신된 history 를 반환합니다.
- POST /ai/function : 단일 프롬프트 function calling (실행은 시뮬레이션).
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel.ext.asyncio.session import AsyncSession

from bizdesk.core import dependencies as deps
from bizdesk.domains.corp import crud as corp_crud
from bizdesk.domains.usr import models as usr_models
from . import functions, schemas
from .services import AIServiceError, ChatContext, ChatMessage, GeminiChatService, get_ai_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["AI Assistant (AI 어시스턴트)"])

MAX_HISTORY_MESSAGES = 40


def _company_user(missing_message: str):
    """
    회사가 있는 사용자만 통과시키는 의존성을 만듭니다. 회사가 없으면 403 대신 400으로 응답합니다.
    """
    async def dependency(auth: deps.Authorization = Depends(deps.resolve_authorization)) -> usr_models.User:
        if auth.status == deps.AuthStatus.UNAUTHENTICATED:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Unauthorized",
                headers={"WWW-Authenticate": "Bearer"},
            )
        if auth.status != deps.AuthStatus.AUTHENTICATED:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=missing_message)
        return auth.user
    return dependency


@router.post("/chat", response_model=schemas.ChatResponse, response_model_exclude_none=True, summary="AI 어시스턴트 대화")
async def chat(
    request: schemas.ChatRequest,
    session: AsyncSession = Depends(deps.get_db_session),
    current_user: usr_models.User = Depends(_company_user("User or company not found")),
    service: GeminiChatService = Depends(get_ai_service),
):
    if request.message is None or not request.message.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid request body")

    company = await corp_crud.company.get_for_user(session, user=current_user)
    if company is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User or company not found")

    context = ChatContext(
        tuple(ChatMessage(message.role, message.text) for message in request.history)
    ).last(MAX_HISTORY_MESSAGES)
    instruction = functions.chat_system_instruction(company.name, current_user.name or "User", current_user.email)

    try:
        reply = await service.send_message(
            request.message, context, system_instruction=instruction, functions=functions.CHAT_FUNCTIONS
        )
    except AIServiceError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error processing your request"
        ) from None

    history = [schemas.ChatMessageSchema(role=m.role, text=m.text) for m in reply.context.messages]
    if reply.function_calls:
        call = reply.function_calls[0]
        return schemas.ChatResponse(
            content=functions.confirmation_message(call.name, call.args),
            function_call=schemas.FunctionCallSchema(name=call.name, args=call.args),
            history=history,
        )
    return schemas.ChatResponse(content=reply.text or functions.FALLBACK_REPLY, history=history)


@router.post("/function", response_model=schemas.FunctionResponse, summary="AI function calling")
async def call_function(
    request: schemas.FunctionRequest,
    current_user: usr_models.User = Depends(_company_user("User company not found")),
    service: GeminiChatService = Depends(get_ai_service),
):
    if request.prompt is None or not request.prompt.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Prompt is required")

    try:
        result = await service.call_function(
            f"{functions.ACTION_CONTEXT}\n\nUser prompt: {request.prompt}", functions.ACTION_FUNCTIONS
        )
    except AIServiceError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to process request"
        ) from None

    return schemas.FunctionResponse(
        content=result.text,
        function_calls=[
            schemas.SimulatedFunctionCall(
                function_name=call.name,
                arguments=call.args,
                message=f"Function {call.name} would be called with the provided arguments.",
            )
            for call in result.function_calls
        ],
    )
