# bizdesk/domains/doc/crud.py

import logging
from typing import List, Optional, Sequence

from fastapi import HTTPException, status
from sqlalchemy import update
from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from bizdesk.core.crud_base import CRUDBase
from . import models

logger = logging.getLogger(__name__)


class CRUDDocument(CRUDBase[models.Document, models.DocumentBase, models.DocumentBase]):
    async def get_invoice(
        self, db: AsyncSession, *, id: int, company_id: int, refresh: bool = False
    ) -> Optional[models.Document]:
        """
        회사 소유 청구서를 고객 정보와 함께 조회합니다.
        존재하지 않음 / 다른 회사 소유 / 견적서(OFFER)인 경우 모두 None을 반환합니다.
        """
        statement = (
            select(self.model)
            .where(
                self.model.id == id,
                self.model.company_id == company_id,
                self.model.type == models.DocumentType.INVOICE,
            )
            .options(selectinload(self.model.customer))
        )
        if refresh:
            statement = statement.execution_options(populate_existing=True)
        result = await db.execute(statement)
        return result.scalars().first()

    async def get_invoices(
        self,
        db: AsyncSession,
        *,
        company_id: int,
        statuses: Optional[Sequence[models.DocumentStatus]] = None,
    ) -> List[models.Document]:
        statement = (
            select(self.model)
            .where(
                self.model.company_id == company_id,
                self.model.type == models.DocumentType.INVOICE,
            )
            .options(selectinload(self.model.customer))
            .order_by(self.model.issue_date.desc(), self.model.id.desc())
        )
        if statuses:
            statement = statement.where(self.model.status.in_(list(statuses)))
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def mark_as_partially_paid(
        self, db: AsyncSession, *, db_obj: models.Document, company_id: int
    ) -> models.Document:
        """
        청구서를 부분 지급(PARTIALLY_PAID) 상태로 변경합니다.
        이미 지급 완료(PAID)인 경우 400을 발생시키며 상태는 변경되지 않습니다.
        조건부 UPDATE(status != PAID)로 실행되므로 동시에 PAID로 바뀐 청구서를 덮어쓰지 않습니다.
        """
        if db_obj.status == models.DocumentStatus.PAID:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invoice is already marked as paid")

        statement = (
            update(self.model)
            .where(
                self.model.id == db_obj.id,
                self.model.company_id == company_id,
                self.model.status != models.DocumentStatus.PAID,
            )
            .values(status=models.DocumentStatus.PARTIALLY_PAID)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(statement)
        if result.rowcount == 0:
            await db.rollback()
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invoice is already marked as paid")
        await db.commit()

        logger.info("Invoice %s marked as partially paid", db_obj.id)
        return await self.get_invoice(db, id=db_obj.id, company_id=company_id, refresh=True)


class CRUDCustomer(CRUDBase[models.Customer, models.CustomerBase, models.CustomerBase]):
    pass


document = CRUDDocument(models.Document)
customer = CRUDCustomer(models.Customer)
