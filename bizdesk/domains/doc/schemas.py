# bizdesk/domains/doc/schemas.py

"""
'doc' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import List, Optional
from datetime import date, datetime
from decimal import Decimal
from pydantic import computed_field

from bizdesk.domains.shared.schemas import CamelModel
from bizdesk.utils.status import get_available_status_transitions
from .models import DocumentStatus, DocumentType


class CustomerRead(CamelModel):
    id: int
    company_name: str
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    billing_address: Optional[str] = None
    shipping_address: Optional[str] = None
    vat_id: Optional[str] = None
    preferred_language: str
    notes: Optional[str] = None


class DocumentRead(CamelModel):
    id: int
    document_number: str
    type: DocumentType
    status: DocumentStatus
    language_code: str
    issue_date: date
    due_date: Optional[date] = None
    valid_until: Optional[date] = None
    total_amount: Decimal
    total_tax: Decimal
    total_discount: Decimal
    payment_terms: Optional[str] = None
    notes: Optional[str] = None
    company_id: int
    customer_id: int
    template_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DocumentReadWithCustomer(DocumentRead):
    customer: CustomerRead

    @computed_field(alias="availableTransitions")
    @property
    def available_transitions(self) -> List[DocumentStatus]:
        return get_available_status_transitions(self.type, self.status)


class InvoiceActionResponse(CamelModel):
    message: str
    invoice: DocumentReadWithCustomer
