# bizdesk/domains/tmpl/schemas.py

from typing import Optional
from datetime import datetime
from pydantic import Field

from bizdesk.domains.doc.models import DocumentType
from bizdesk.domains.shared.schemas import CamelModel


class TemplateCreate(CamelModel):
    # 필수 필드는 라우터에서 검사하여 항목별 메시지로 응답합니다.
    name: Optional[str] = Field(None, max_length=255)
    type: Optional[DocumentType] = None
    language_code: Optional[str] = Field(None, max_length=10)
    content: Optional[str] = None
    is_default: bool = False


class TemplateUpdate(CamelModel):
    """부분 수정용 스키마입니다. 전달된 필드만 변경됩니다."""
    name: Optional[str] = Field(None, max_length=255)
    type: Optional[DocumentType] = None
    language_code: Optional[str] = Field(None, max_length=10)
    content: Optional[str] = None
    is_default: Optional[bool] = None


class TemplateDuplicate(CamelModel):
    name: Optional[str] = Field(None, max_length=255)


class TemplateRead(CamelModel):
    id: int
    company_id: int
    name: str
    type: DocumentType
    language_code: str
    content: str
    is_default: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TemplateActionResponse(CamelModel):
    message: str
    template: TemplateRead
