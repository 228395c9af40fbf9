# bizdesk/domains/corp/routers.py

"""
회사 프로필(/settings/company) 및 회사 번역(/settings/company/translations) 엔드포인트.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from bizdesk.core import dependencies as deps
from bizdesk.domains.usr import models as usr_models
from . import schemas, crud

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Company Settings (회사 정보 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. 회사 프로필
# =============================================================================
@router.get("/company", response_model=schemas.CompanyRead, summary="회사 프로필 조회")
async def get_company_profile(
    session: AsyncSession = Depends(deps.get_db_session),
    current_user: usr_models.User = Depends(deps.get_current_user),
):
    """
    현재 사용자의 회사 프로필을 조회합니다. 아직 생성하지 않았다면 404를 반환합니다.
    """
    company = await crud.company.get_for_user(session, user=current_user)
    if company is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Company profile not found")
    return company


@router.post(
    "/company",
    response_model=schemas.CompanyRead,
    status_code=status.HTTP_201_CREATED,
    summary="회사 프로필 생성 또는 수정",
)
async def create_or_update_company_profile(
    company_in: schemas.CompanyUpsert,
    response: Response,
    session: AsyncSession = Depends(deps.get_db_session),
    current_user: usr_models.User = Depends(deps.get_current_user),
):
    """
    회사 프로필이 있으면 수정(200), 없으면 생성하여 사용자에게 연결합니다(201).
    """
    if company_in.name is None or not company_in.name.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Company name is required")

    data = company_in.model_dump(exclude_unset=True)
    company = await crud.company.get_for_user(session, user=current_user)
    if company is not None:
        response.status_code = status.HTTP_200_OK
        return await crud.company.update(session, db_obj=company, obj_in=data)

    company = await crud.company.create_for_user(session, user=current_user, data=data)
    logger.info("Company %s created for user %s", company.id, current_user.id)
    return company


# =============================================================================
# 2. 회사 번역
# =============================================================================
@router.get(
    "/company/translations",
    response_model=List[schemas.CompanyTranslationRead],
    summary="회사 번역 목록 조회",
)
async def list_company_translations(
    session: AsyncSession = Depends(deps.get_db_session),
    scope: deps.CompanyScope = Depends(deps.require_company),
):
    return await crud.company_translation.get_multi_for_company(session, company_id=scope.company_id)


@router.post(
    "/company/translations",
    response_model=schemas.CompanyTranslationRead,
    status_code=status.HTTP_201_CREATED,
    summary="회사 번역 생성 또는 수정",
)
async def upsert_company_translation(
    translation_in: schemas.CompanyTranslationUpsert,
    response: Response,
    session: AsyncSession = Depends(deps.get_db_session),
    scope: deps.CompanyScope = Depends(deps.require_company),
):
    """
    언어 코드 기준으로 번역을 생성(201)하거나 갱신(200)합니다.
    """
    if translation_in.language_code is None or not translation_in.language_code.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Language code is required")

    translation, created = await crud.company_translation.upsert(
        session, company_id=scope.company_id, obj_in=translation_in
    )
    if not created:
        response.status_code = status.HTTP_200_OK
    return translation
