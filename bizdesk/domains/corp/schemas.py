# bizdesk/domains/corp/schemas.py

from typing import Optional
from datetime import datetime
from pydantic import Field, field_validator

from bizdesk.domains.shared.schemas import CamelModel
from bizdesk.utils.validators import is_valid_email


# =============================================================================
# 1. 회사 (Company) 스키마
# =============================================================================
class CompanyFields(CamelModel):
    """
    회사 프로필의 선택 속성들입니다. 빈 문자열은 None으로 취급합니다.
    """
    address_line1: Optional[str] = Field(None, max_length=255)
    address_line2: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=100)
    postal_code: Optional[str] = Field(None, max_length=20)
    country: Optional[str] = Field(None, max_length=100)
    vat_id: Optional[str] = Field(None, max_length=50)
    phone_number: Optional[str] = Field(None, max_length=50)
    email: Optional[str] = Field(None, max_length=255)
    website: Optional[str] = Field(None, max_length=255)
    bank_account_name: Optional[str] = Field(None, max_length=255)
    bank_account_number: Optional[str] = Field(None, max_length=50)
    bank_account_bic: Optional[str] = Field(None, max_length=20, alias="bankAccountBIC")
    logo_url: Optional[str] = Field(None, max_length=1024)

    @field_validator("email", mode="before")
    @classmethod
    def _check_email(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        if not is_valid_email(value):
            raise ValueError("Invalid email address")
        return value


class CompanyUpsert(CompanyFields):
    # name 필수 여부는 라우터에서 검사하여 "Company name is required" 메시지로 응답합니다.
    name: Optional[str] = Field(None, max_length=255)


class CompanyRead(CompanyFields):
    id: int
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# =============================================================================
# 2. 회사 번역 (CompanyTranslation) 스키마
# =============================================================================
class CompanyTranslationUpsert(CamelModel):
    language_code: Optional[str] = Field(None, max_length=10)
    address_line1: Optional[str] = Field(None, max_length=255)
    address_line2: Optional[str] = Field(None, max_length=255)
    payment_terms_text: Optional[str] = None
    invoice_footer_text: Optional[str] = None
    offer_footer_text: Optional[str] = None


class CompanyTranslationRead(CamelModel):
    id: int
    company_id: int
    language_code: str
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    payment_terms_text: Optional[str] = None
    invoice_footer_text: Optional[str] = None
    offer_footer_text: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
