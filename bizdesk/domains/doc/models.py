# bizdesk/domains/doc/models.py

"""
'doc' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

import enum
from typing import Optional
from datetime import date, datetime, UTC
from decimal import Decimal
from sqlmodel import Field, Relationship, SQLModel, Column
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP, Text


class DocumentType(str, enum.Enum):
    OFFER = "OFFER"
    INVOICE = "INVOICE"


class DocumentStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    SENT = "SENT"
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"
    EXPIRED = "EXPIRED"
    PAID = "PAID"
    PARTIALLY_PAID = "PARTIALLY_PAID"
    OVERDUE = "OVERDUE"
    VOIDED = "VOIDED"


# =============================================================================
# 1. customers 테이블 모델
# =============================================================================
class CustomerBase(SQLModel):
    company_name: str = Field(max_length=255, description="고객사 이름")
    contact_person: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    phone_number: Optional[str] = Field(default=None, max_length=50)
    billing_address: Optional[str] = Field(default=None, sa_type=Text)
    shipping_address: Optional[str] = Field(default=None, sa_type=Text)
    vat_id: Optional[str] = Field(default=None, max_length=50)
    preferred_language: str = Field(default="en", max_length=10)
    notes: Optional[str] = Field(default=None, sa_type=Text)


class Customer(CustomerBase, table=True):
    __tablename__ = "customers"

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


# =============================================================================
# 2. documents 테이블 모델 (견적서/청구서)
# =============================================================================
class DocumentBase(SQLModel):
    document_number: str = Field(max_length=50, index=True, description="문서 번호")
    type: DocumentType = Field(description="문서 유형 (OFFER/INVOICE)")
    status: DocumentStatus = Field(default=DocumentStatus.DRAFT, description="문서 상태")
    language_code: str = Field(default="en", max_length=10)
    issue_date: date = Field(default_factory=date.today, description="발행일")
    due_date: Optional[date] = Field(default=None, description="지급 기한 (청구서)")
    valid_until: Optional[date] = Field(default=None, description="유효 기한 (견적서)")
    total_amount: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    total_tax: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    total_discount: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    payment_terms: Optional[str] = Field(default=None, sa_type=Text)
    notes: Optional[str] = Field(default=None, sa_type=Text)


class Document(DocumentBase, table=True):
    """
    documents 테이블 모델입니다. 문서는 정확히 하나의 회사와 하나의 고객에 속합니다.
    """
    __tablename__ = "documents"

    id: Optional[int] = Field(default=None, primary_key=True)
    company_id: int = Field(foreign_key="companies.id", index=True, description="소유 회사 ID")
    customer_id: int = Field(foreign_key="customers.id", index=True, description="고객 ID")
    template_id: Optional[int] = Field(default=None, foreign_key="templates.id", index=True, description="사용 템플릿 ID")

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
    )

    customer: Optional[Customer] = Relationship()
