# bizdesk/domains/corp/crud.py

import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from bizdesk.core.crud_base import CRUDBase
from bizdesk.domains.usr import models as usr_models
from . import models, schemas

logger = logging.getLogger(__name__)


class CRUDCompany(CRUDBase[models.Company, schemas.CompanyUpsert, schemas.CompanyUpsert]):
    async def get_for_user(self, db: AsyncSession, *, user: usr_models.User) -> Optional[models.Company]:
        """
        사용자가 소속된 회사를 조회합니다.
        """
        if user.company_id is None:
            return None
        return await self.get(db, user.company_id)

    async def create_for_user(
        self, db: AsyncSession, *, user: usr_models.User, data: Dict[str, Any]
    ) -> models.Company:
        """
        회사를 생성하고 사용자에게 연결합니다. 두 변경은 하나의 트랜잭션으로 커밋됩니다.
        """
        company = self.model(**data)
        db.add(company)
        await db.flush()

        user.company_id = company.id
        db.add(user)
        await db.commit()
        await db.refresh(company)
        await db.refresh(user)
        return company


class CRUDCompanyTranslation(
    CRUDBase[models.CompanyTranslation, schemas.CompanyTranslationUpsert, schemas.CompanyTranslationUpsert]
):
    async def get_multi_for_company(self, db: AsyncSession, *, company_id: int) -> List[models.CompanyTranslation]:
        statement = (
            select(self.model)
            .where(self.model.company_id == company_id)
            .order_by(self.model.language_code)
        )
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def get_by_language(
        self, db: AsyncSession, *, company_id: int, language_code: str
    ) -> Optional[models.CompanyTranslation]:
        statement = select(self.model).where(
            self.model.company_id == company_id,
            self.model.language_code == language_code,
        )
        result = await db.execute(statement)
        return result.scalars().first()

    async def upsert(
        self, db: AsyncSession, *, company_id: int, obj_in: schemas.CompanyTranslationUpsert
    ) -> Tuple[models.CompanyTranslation, bool]:
        """
        (company_id, language_code) 기준으로 번역을 생성하거나 갱신합니다.
        반환값의 두 번째 요소는 새로 생성되었는지 여부입니다.
        """
        data = obj_in.model_dump(exclude_unset=True, exclude={"language_code"})
        language_code = obj_in.language_code

        existing = await self.get_by_language(db, company_id=company_id, language_code=language_code)
        if existing is not None:
            return await self.update(db, db_obj=existing, obj_in=data), False

        try:
            created = await self.create(db, obj_in=data, company_id=company_id, language_code=language_code)
            return created, True
        except IntegrityError:
            # 동시에 같은 언어 번역이 생성된 경우: 생성된 행을 갱신합니다.
            await db.rollback()
            logger.info("Translation %s for company %s created concurrently, updating instead", language_code, company_id)
            existing = await self.get_by_language(db, company_id=company_id, language_code=language_code)
            if existing is None:
                raise
            return await self.update(db, db_obj=existing, obj_in=data), False


company = CRUDCompany(models.Company)
company_translation = CRUDCompanyTranslation(models.CompanyTranslation)
