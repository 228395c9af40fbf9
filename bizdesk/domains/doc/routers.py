# bizdesk/domains/doc/routers.py

"""
청구서(/invoices) 엔드포인트.

- GET  /invoices                                  : 회사 청구서 목록 (status 필터)
- GET  /invoices/{invoice_id}                     : 청구서 상세 (고객 + 안내용 다음 상태 목록)
- POST /invoices/{invoice_id}/mark-as-partially-paid : 부분 지급 처리
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from bizdesk.core import dependencies as deps
from . import crud, models, schemas

router = APIRouter(
    tags=["Invoices (청구서 관리)"],
    responses={404: {"description": "Not found"}},
)


def _parse_statuses(raw: Optional[str]) -> List[models.DocumentStatus]:
    if not raw:
        return []
    try:
        return [models.DocumentStatus(part.strip().upper()) for part in raw.split(",") if part.strip()]
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid status filter") from None


@router.get("", response_model=List[schemas.DocumentReadWithCustomer], summary="청구서 목록 조회")
async def list_invoices(
    status_filter: Optional[str] = Query(None, alias="status", description="쉼표로 구분한 상태 목록 (예: SENT,OVERDUE)"),
    session: AsyncSession = Depends(deps.get_db_session),
    scope: deps.CompanyScope = Depends(deps.require_company),
):
    statuses = _parse_statuses(status_filter)
    return await crud.document.get_invoices(session, company_id=scope.company_id, statuses=statuses)


@router.get("/{invoice_id}", response_model=schemas.DocumentReadWithCustomer, summary="청구서 상세 조회")
async def get_invoice(
    invoice_id: int,
    session: AsyncSession = Depends(deps.get_db_session),
    scope: deps.CompanyScope = Depends(deps.require_company),
):
    invoice = await crud.document.get_invoice(session, id=invoice_id, company_id=scope.company_id)
    if invoice is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invoice not found")
    return invoice


@router.post(
    "/{invoice_id}/mark-as-partially-paid",
    response_model=schemas.InvoiceActionResponse,
    summary="청구서 부분 지급 처리",
)
async def mark_invoice_as_partially_paid(
    invoice_id: int,
    session: AsyncSession = Depends(deps.get_db_session),
    scope: deps.CompanyScope = Depends(deps.require_company),
):
    """
    청구서 상태를 PARTIALLY_PAID로 변경합니다.
    - 404: 청구서가 없거나 다른 회사 소유이거나 견적서인 경우
    - 400: 이미 지급 완료(PAID)된 경우

    PAID 외의 상태(DRAFT, VOIDED 포함)는 모두 허용합니다.
    조회 응답의 availableTransitions 는 화면 표시용이며 이 엔드포인트를 제한하지 않습니다.
    """
    invoice = await crud.document.get_invoice(session, id=invoice_id, company_id=scope.company_id)
    if invoice is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invoice not found")

    updated = await crud.document.mark_as_partially_paid(session, db_obj=invoice, company_id=scope.company_id)
    return schemas.InvoiceActionResponse(
        message="Invoice marked as partially paid successfully",
        invoice=schemas.DocumentReadWithCustomer.model_validate(updated),
    )
