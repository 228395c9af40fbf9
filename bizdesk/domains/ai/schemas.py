# bizdesk/domains/ai/schemas.py

from typing import Any, Dict, List, Literal, Optional
from pydantic import Field

from bizdesk.domains.shared.schemas import CamelModel


class ChatMessageSchema(CamelModel):
    role: Literal["user", "model"]
    text: str


class ChatRequest(CamelModel):
    message: Optional[str] = None
    history: List[ChatMessageSchema] = Field(default_factory=list)


class FunctionCallSchema(CamelModel):
    name: str
    args: Dict[str, Any] = Field(default_factory=dict)


class ChatResponse(CamelModel):
    content: str
    function_call: Optional[FunctionCallSchema] = None
    history: List[ChatMessageSchema] = Field(default_factory=list)


class FunctionRequest(CamelModel):
    prompt: Optional[str] = None


class SimulatedFunctionCall(CamelModel):
    function_name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)
    status: str = "simulated"
    message: str


class FunctionResponse(CamelModel):
    content: str
    function_calls: List[SimulatedFunctionCall] = Field(default_factory=list)
