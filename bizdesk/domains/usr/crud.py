# bizdesk/domains/usr/crud.py

"""
'usr' 도메인의 CRUD 작업을 담당하는 모듈입니다.
"""

from typing import Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import HTTPException, status

from bizdesk.core.crud_base import CRUDBase
from bizdesk.core.security import get_password_hash, verify_password
from . import models as usr_models
from . import schemas as usr_schemas


class CRUDUser(CRUDBase[usr_models.User, usr_schemas.UserCreate, usr_schemas.UserProfileUpdate]):
    def __init__(self):
        super().__init__(model=usr_models.User)

    async def get_by_email(self, db: AsyncSession, *, email: str) -> Optional[usr_models.User]:
        return await self.get_by_attribute(db, attribute="email", value=email)

    async def create(self, db: AsyncSession, *, obj_in: usr_schemas.UserCreate) -> usr_models.User:
        """
        비밀번호를 해싱하여 새 사용자를 생성합니다. 이메일 중복 시 400을 발생시킵니다.
        """
        if await self.get_by_email(db, email=obj_in.email):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")

        user_data = obj_in.model_dump(exclude={"password"})
        user_data["password_hash"] = get_password_hash(obj_in.password)
        return await super().create(db, obj_in=user_data)

    async def authenticate(self, db: AsyncSession, *, email: str, password: str) -> Optional[usr_models.User]:
        user = await self.get_by_email(db, email=email)
        if not user or not verify_password(password, user.password_hash):
            return None
        return user

    async def update_profile(
        self, db: AsyncSession, *, db_obj: usr_models.User, obj_in: usr_schemas.UserProfileUpdate
    ) -> usr_models.User:
        """
        프로필 이름과 이미지를 갱신합니다. 요청에 image 키가 없으면 기존 이미지를 유지합니다.
        """
        return await self.update(db, db_obj=db_obj, obj_in=obj_in.model_dump(include={"name", "image"}, exclude_unset=True))

    async def link_company(self, db: AsyncSession, *, db_obj: usr_models.User, company_id: int) -> usr_models.User:
        return await self.update(db, db_obj=db_obj, obj_in={"company_id": company_id})


user = CRUDUser()
