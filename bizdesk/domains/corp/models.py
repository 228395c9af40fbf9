# bizdesk/domains/corp/models.py

from typing import Optional
from datetime import datetime, UTC
from sqlmodel import Field, SQLModel, Column, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP, Text


# =============================================================================
# 1. companies 테이블 모델
# =============================================================================
class CompanyBase(SQLModel):
    name: str = Field(index=True, max_length=255, description="회사명")
    address_line1: Optional[str] = Field(default=None, max_length=255, description="주소 1")
    address_line2: Optional[str] = Field(default=None, max_length=255, description="주소 2")
    city: Optional[str] = Field(default=None, max_length=100, description="도시")
    postal_code: Optional[str] = Field(default=None, max_length=20, description="우편번호")
    country: Optional[str] = Field(default=None, max_length=100, description="국가")
    vat_id: Optional[str] = Field(default=None, max_length=50, description="부가세(VAT) 번호")
    phone_number: Optional[str] = Field(default=None, max_length=50, description="대표 전화")
    email: Optional[str] = Field(default=None, max_length=255, description="대표 이메일")
    website: Optional[str] = Field(default=None, max_length=255, description="웹사이트")
    bank_account_name: Optional[str] = Field(default=None, max_length=255, description="예금주")
    bank_account_number: Optional[str] = Field(default=None, max_length=50, description="계좌번호 (IBAN)")
    bank_account_bic: Optional[str] = Field(default=None, max_length=20, description="BIC/SWIFT")
    logo_url: Optional[str] = Field(default=None, max_length=1024, description="로고 이미지 URL")


class Company(CompanyBase, table=True):
    """
    companies 테이블 모델입니다. 문서와 템플릿은 모두 company_id로 이 테이블을 참조합니다.
    """
    __tablename__ = "companies"

    id: Optional[int] = Field(default=None, primary_key=True, description="회사 고유 ID")

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
        description="레코드 마지막 업데이트 일시"
    )


# =============================================================================
# 2. company_translations 테이블 모델
# =============================================================================
class CompanyTranslationBase(SQLModel):
    language_code: str = Field(max_length=10, description="언어 코드 (예: en, nl)")
    address_line1: Optional[str] = Field(default=None, max_length=255)
    address_line2: Optional[str] = Field(default=None, max_length=255)
    payment_terms_text: Optional[str] = Field(default=None, sa_type=Text, description="결제 조건 문구")
    invoice_footer_text: Optional[str] = Field(default=None, sa_type=Text, description="청구서 하단 문구")
    offer_footer_text: Optional[str] = Field(default=None, sa_type=Text, description="견적서 하단 문구")


class CompanyTranslation(CompanyTranslationBase, table=True):
    """
    회사 정보의 언어별 번역입니다. (company_id, language_code) 조합은 유일합니다.
    """
    __tablename__ = "company_translations"
    __table_args__ = (
        UniqueConstraint("company_id", "language_code", name="uq_company_translation_language"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    company_id: int = Field(foreign_key="companies.id", index=True, description="회사 ID")

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
    )
