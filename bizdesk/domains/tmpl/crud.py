# bizdesk/domains/tmpl/crud.py

"""
'tmpl' 도메인의 CRUD 작업을 담당하는 모듈입니다.

기본 템플릿(is_default)을 바꾸는 모든 작업(생성, 수정, 삭제, 기본 지정)은
다음 순서를 하나의 트랜잭션 안에서 수행합니다.

1. 같은 (회사, 유형, 언어) 파티션의 행을 SELECT ... FOR UPDATE 로 잠급니다.
2. 파티션의 기존 기본 템플릿을 해제합니다.
3. 대상 템플릿을 기본으로 지정합니다.
4. 한 번만 커밋합니다.

동시에 빈 파티션에 삽입하는 경우처럼 잠글 행이 없을 때는 부분 유니크 인덱스가
충돌을 막으며, IntegrityError 발생 시 롤백 후 정해진 횟수만큼 재시도합니다.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, TypeVar

from fastapi import HTTPException, status
from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from bizdesk.core.crud_base import CRUDBase
from bizdesk.domains.doc import models as doc_models
from . import models, schemas

logger = logging.getLogger(__name__)

MAX_DEFAULT_SWAP_ATTEMPTS = 3

SORTABLE_FIELDS = {
    "name": models.Template.name,
    "type": models.Template.type,
    "languageCode": models.Template.language_code,
    "createdAt": models.Template.created_at,
    "updatedAt": models.Template.updated_at,
}

T = TypeVar("T")


class TemplateInUseError(Exception):
    """문서가 참조 중인 템플릿을 삭제하려 할 때 발생합니다."""

    def __init__(self, documents_count: int):
        super().__init__(f"Template is used by {documents_count} document(s)")
        self.documents_count = documents_count


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found")


class CRUDTemplate(CRUDBase[models.Template, schemas.TemplateCreate, schemas.TemplateUpdate]):

    # -------------------------------------------------------------------------
    # 조회
    # -------------------------------------------------------------------------
    async def get_multi_filtered(
        self,
        db: AsyncSession,
        *,
        company_id: int,
        type: Optional[doc_models.DocumentType] = None,
        language_code: Optional[str] = None,
        search: Optional[str] = None,
        sort_by: str = "name",
        sort_direction: str = "asc",
    ) -> List[models.Template]:
        """
        회사 템플릿 목록을 유형/언어/이름 검색(대소문자 무시)으로 필터링하고 정렬합니다.
        """
        query = select(self.model).where(self.model.company_id == company_id)
        if type is not None:
            query = query.where(self.model.type == type)
        if language_code:
            query = query.where(self.model.language_code == language_code)
        if search:
            query = query.where(func.lower(self.model.name).contains(search.lower(), autoescape=True))

        column = SORTABLE_FIELDS.get(sort_by, self.model.name)
        query = query.order_by(column.desc() if sort_direction == "desc" else column.asc(), self.model.id)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def count_documents(self, db: AsyncSession, *, template_id: int) -> int:
        statement = (
            select(func.count())
            .select_from(doc_models.Document)
            .where(doc_models.Document.template_id == template_id)
        )
        result = await db.execute(statement)
        return result.scalar_one()

    # -------------------------------------------------------------------------
    # 파티션 잠금 / 기본 템플릿 해제
    # -------------------------------------------------------------------------
    def _partition(self, company_id: int, type: doc_models.DocumentType, language_code: str) -> Tuple[Any, ...]:
        return (
            self.model.company_id == company_id,
            self.model.type == type,
            self.model.language_code == language_code,
        )

    async def _lock_partition(
        self, db: AsyncSession, *, company_id: int, type: doc_models.DocumentType, language_code: str
    ) -> List[models.Template]:
        statement = (
            select(self.model)
            .where(*self._partition(company_id, type, language_code))
            .order_by(self.model.id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def _clear_defaults(
        self,
        db: AsyncSession,
        *,
        company_id: int,
        type: doc_models.DocumentType,
        language_code: str,
        exclude_id: Optional[int] = None,
    ) -> None:
        statement = (
            update(self.model)
            .where(*self._partition(company_id, type, language_code), self.model.is_default.is_(True))
            .values(is_default=False)
            .execution_options(synchronize_session="fetch")
        )
        if exclude_id is not None:
            statement = statement.where(self.model.id != exclude_id)
        await db.execute(statement)

    async def _mark_default(self, db: AsyncSession, *, template_id: int) -> None:
        statement = (
            update(self.model)
            .where(self.model.id == template_id)
            .values(is_default=True)
            .execution_options(synchronize_session="fetch")
        )
        await db.execute(statement)

    async def _in_transaction(self, db: AsyncSession, work: Callable[[], Awaitable[T]]) -> T:
        """
        work 를 실행하고 한 번 커밋합니다. 기본 템플릿 유니크 인덱스 충돌 시 롤백 후 재시도합니다.
        work 는 재시도 시 필요한 객체를 다시 조회해야 합니다.
        """
        for attempt in range(1, MAX_DEFAULT_SWAP_ATTEMPTS + 1):
            try:
                result = await work()
                await db.commit()
                return result
            except IntegrityError:
                await db.rollback()
                if attempt == MAX_DEFAULT_SWAP_ATTEMPTS:
                    raise
                logger.warning("Default template conflict, retrying (attempt %s/%s)", attempt, MAX_DEFAULT_SWAP_ATTEMPTS)
        raise RuntimeError("unreachable")

    # -------------------------------------------------------------------------
    # 변경 작업
    # -------------------------------------------------------------------------
    async def create_for_company(
        self, db: AsyncSession, *, company_id: int, obj_in: schemas.TemplateCreate
    ) -> models.Template:
        """
        템플릿을 생성합니다. 파티션의 첫 템플릿이면 자동으로 기본 템플릿이 되고,
        is_default=True 로 요청하면 기존 기본 템플릿을 해제합니다.
        """
        data = obj_in.model_dump(exclude={"is_default"})

        async def work() -> models.Template:
            existing = await self._lock_partition(
                db, company_id=company_id, type=obj_in.type, language_code=obj_in.language_code
            )
            if obj_in.is_default and existing:
                await self._clear_defaults(
                    db, company_id=company_id, type=obj_in.type, language_code=obj_in.language_code
                )
            template = self.model(**data, company_id=company_id, is_default=obj_in.is_default or not existing)
            db.add(template)
            return template

        template = await self._in_transaction(db, work)
        await db.refresh(template)
        return template

    async def update_for_company(
        self, db: AsyncSession, *, company_id: int, template_id: int, update_data: Dict[str, Any]
    ) -> models.Template:
        """
        템플릿을 부분 수정합니다. 수정 결과 기본 템플릿이 되는 경우
        (기본 지정 또는 기본 템플릿의 유형/언어 변경) 대상 파티션의 다른 기본 템플릿을 해제합니다.
        """
        async def work() -> models.Template:
            target = await self.get_owned(db, id=template_id, company_id=company_id)
            if target is None:
                raise _not_found()

            new_type = update_data.get("type", target.type)
            new_language = update_data.get("language_code", target.language_code)
            becomes_default = update_data.get("is_default", target.is_default)
            if becomes_default:
                await self._lock_partition(db, company_id=company_id, type=new_type, language_code=new_language)
                await self._clear_defaults(
                    db, company_id=company_id, type=new_type, language_code=new_language, exclude_id=target.id
                )

            for key, value in update_data.items():
                setattr(target, key, value)
            db.add(target)
            return target

        template = await self._in_transaction(db, work)
        await db.refresh(template)
        return template

    async def set_default(
        self, db: AsyncSession, *, company_id: int, template_id: int
    ) -> Tuple[models.Template, bool]:
        """
        템플릿을 파티션의 기본 템플릿으로 지정합니다.
        이미 기본 템플릿이면 아무것도 쓰지 않고 (template, False)를 반환합니다.
        """
        async def work() -> Tuple[models.Template, bool]:
            target = await self.get_owned(db, id=template_id, company_id=company_id)
            if target is None:
                raise _not_found()

            await self._lock_partition(
                db, company_id=company_id, type=target.type, language_code=target.language_code
            )
            if target.is_default:
                return target, False

            await self._clear_defaults(
                db, company_id=company_id, type=target.type, language_code=target.language_code,
                exclude_id=target.id,
            )
            await self._mark_default(db, template_id=target.id)
            return target, True

        template, changed = await self._in_transaction(db, work)
        await db.refresh(template)
        if changed:
            logger.info("Template %s is now the default for company %s", template.id, company_id)
        return template, changed

    async def duplicate(
        self, db: AsyncSession, *, db_obj: models.Template, name: Optional[str] = None
    ) -> models.Template:
        """
        템플릿을 복제합니다. 복제본은 항상 기본 템플릿이 아닙니다.
        """
        data = {
            "name": name or f"{db_obj.name} (Copy)",
            "type": db_obj.type,
            "language_code": db_obj.language_code,
            "content": db_obj.content,
            "is_default": False,
            "company_id": db_obj.company_id,
        }
        return await self.create(db, obj_in=data)

    async def remove_for_company(
        self, db: AsyncSession, *, company_id: int, template_id: int
    ) -> models.Template:
        """
        템플릿을 삭제합니다. 문서가 참조 중이면 TemplateInUseError를 발생시킵니다.
        삭제한 템플릿이 기본이었다면 파티션에서 가장 먼저 만들어진 템플릿을 기본으로 승격합니다.
        """
        async def work() -> models.Template:
            target = await self.get_owned(db, id=template_id, company_id=company_id)
            if target is None:
                raise _not_found()

            documents_count = await self.count_documents(db, template_id=target.id)
            if documents_count > 0:
                raise TemplateInUseError(documents_count)

            was_default = target.is_default
            partition = dict(company_id=company_id, type=target.type, language_code=target.language_code)
            if was_default:
                await self._lock_partition(db, **partition)

            await db.delete(target)
            await db.flush()

            if was_default:
                remaining = await self._lock_partition(db, **partition)
                if remaining:
                    await self._mark_default(db, template_id=remaining[0].id)
            return target

        return await self._in_transaction(db, work)


template = CRUDTemplate(models.Template)
