# bizdesk/domains/tmpl/models.py

from typing import Optional
from datetime import datetime, UTC
from sqlmodel import Field, SQLModel, Column, Index
from sqlalchemy import text
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP, Text

from bizdesk.domains.doc.models import DocumentType


class TemplateBase(SQLModel):
    name: str = Field(max_length=255, description="템플릿 이름")
    type: DocumentType = Field(description="대상 문서 유형 (OFFER/INVOICE)")
    language_code: str = Field(max_length=10, description="언어 코드 (예: en, nl)")
    content: str = Field(sa_type=Text, description="템플릿 본문")
    is_default: bool = Field(default=False, description="(회사, 유형, 언어) 조합의 기본 템플릿 여부")


class Template(TemplateBase, table=True):
    """
    templates 테이블 모델입니다.
    is_default = true 인 행은 (company_id, type, language_code) 조합마다 최대 하나만 존재할 수 있습니다.
    """
    __tablename__ = "templates"
    __table_args__ = (
        Index(
            "uq_templates_default_per_language",
            "company_id", "type", "language_code",
            unique=True,
            postgresql_where=text("is_default"),
            sqlite_where=text("is_default = 1"),
        ),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    company_id: int = Field(foreign_key="companies.id", index=True, description="소유 회사 ID")

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
    )
