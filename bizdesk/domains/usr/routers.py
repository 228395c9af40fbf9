# bizdesk/domains/usr/routers.py

"""
'usr' 도메인의 API 엔드포인트를 정의하는 모듈입니다.

- POST /auth/token      : 이메일/비밀번호로 Access Token 발급
- GET  /settings/user   : 현재 사용자 프로필 조회
- PATCH /settings/user  : 현재 사용자 프로필(이름, 이미지) 수정
"""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel.ext.asyncio.session import AsyncSession

from bizdesk.core import dependencies as deps
from bizdesk.core.config import settings
from bizdesk.core.security import create_access_token
from . import crud as usr_crud
from . import models as usr_models
from . import schemas as usr_schemas

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["User Management (사용자 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. 인증 (Authentication) 엔드포인트
# =============================================================================
@router.post("/auth/token", response_model=usr_schemas.Token, summary="Access Token 획득")
async def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: AsyncSession = Depends(deps.get_db_session),
):
    user = await usr_crud.user.authenticate(db, email=form_data.username, password=form_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(data={"sub": user.email}, expires_delta=access_token_expires)
    return {"access_token": access_token, "token_type": "bearer"}


# =============================================================================
# 2. 사용자 프로필 (/settings/user) 엔드포인트
# =============================================================================
@router.get("/settings/user", response_model=usr_schemas.UserProfileRead, summary="사용자 프로필 조회")
async def read_user_profile(current_user: usr_models.User = Depends(deps.get_current_user)):
    """
    세션 사용자의 프로필을 조회합니다. 사용자 식별은 세션 토큰으로만 이루어집니다.
    """
    return current_user


@router.patch("/settings/user", response_model=usr_schemas.UserProfileRead, summary="사용자 프로필 수정")
async def update_user_profile(
    profile_in: usr_schemas.UserProfileUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
    current_user: usr_models.User = Depends(deps.get_current_user),
):
    """
    사용자 이름과 이미지를 수정합니다. 이름이 비어 있으면 아무것도 변경하지 않고 400을 반환합니다.
    """
    if profile_in.name is None or not profile_in.name.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Name is required")

    updated = await usr_crud.user.update_profile(
        db, db_obj=current_user, obj_in=profile_in
    )
    logger.info("User %s updated their profile", updated.id)
    return updated
