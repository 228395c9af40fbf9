# bizdesk/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.

회사(Company)에 소속된 레코드는 get_owned / get_multi_owned 로 조회합니다.
존재하지 않는 레코드와 다른 회사 소유 레코드는 구분하지 않고 모두 None을 반환하므로,
호출자는 두 경우를 동일하게 404로 처리하게 됩니다.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 단일 레코드를 조회합니다.
        """
        return await db.get(self.model, id)

    async def get_by_attribute(
        self, db: AsyncSession, *, attribute: str, value: Any
    ) -> Optional[ModelType]:
        statement = select(self.model).where(getattr(self.model, attribute) == value)
        response = await db.execute(statement)
        return response.scalars().first()

    async def get_owned(
        self, db: AsyncSession, *, id: Any, company_id: int
    ) -> Optional[ModelType]:
        """
        회사 소유 레코드를 조회합니다. 없거나 다른 회사 소유이면 None을 반환합니다.
        """
        statement = select(self.model).where(
            self.model.id == id,
            self.model.company_id == company_id,
        )
        response = await db.execute(statement)
        return response.scalars().first()

    async def get_multi_owned(
        self, db: AsyncSession, *, company_id: int, skip: int = 0, limit: int = 100, **kwargs: Any
    ) -> List[ModelType]:
        """
        회사 소유 레코드 목록을 조회합니다. 필터링을 위한 키워드 인자를 지원합니다.
        """
        query = select(self.model).where(self.model.company_id == company_id)
        for field, value in kwargs.items():
            if hasattr(self.model, field):
                query = query.where(getattr(self.model, field) == value)
        query = query.order_by(self.model.id).offset(skip).limit(limit)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def create(
        self, db: AsyncSession, *, obj_in: Union[CreateSchemaType, Dict[str, Any]], **extra: Any
    ) -> ModelType:
        """
        새로운 레코드를 생성합니다. extra 로 소유 회사 ID 등 서버측 값을 덧붙일 수 있습니다.
        """
        data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        db_obj = self.model(**{**data, **extra})
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]],
    ) -> ModelType:
        """
        Pydantic 모델 또는 dict를 사용하여 기존 레코드를 업데이트합니다.
        """
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)

        for key, value in update_data.items():
            if hasattr(db_obj, key):
                setattr(db_obj, key, value)

        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def delete(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        """
        레코드를 삭제합니다.
        """
        await db.delete(db_obj)
        await db.commit()
        return db_obj
