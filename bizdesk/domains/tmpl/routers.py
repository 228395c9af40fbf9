# bizdesk/domains/tmpl/routers.py

"""
문서 템플릿(/templates) 엔드포인트.
"""

from typing import List, Literal, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse
from sqlmodel.ext.asyncio.session import AsyncSession

from bizdesk.core import dependencies as deps
from bizdesk.domains.doc.models import DocumentType
from bizdesk.domains.shared.schemas import MessageResponse
from . import crud, schemas

router = APIRouter(
    tags=["Templates (문서 템플릿 관리)"],
    responses={404: {"description": "Not found"}},
)

# 필수 필드와 누락 시 메시지
REQUIRED_FIELDS = (
    ("name", "Template name is required"),
    ("type", "Template type is required"),
    ("language_code", "Language is required"),
    ("content", "Template content is required"),
)


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


# =============================================================================
# 1. 목록 / 생성
# =============================================================================
@router.get("", response_model=List[schemas.TemplateRead], summary="템플릿 목록 조회")
async def list_templates(
    type: Optional[DocumentType] = Query(None),
    language_code: Optional[str] = Query(None, alias="languageCode"),
    search: Optional[str] = Query(None, description="이름 검색 (대소문자 무시)"),
    sort_by: Literal["name", "type", "languageCode", "createdAt", "updatedAt"] = Query("name", alias="sortBy"),
    sort_direction: Literal["asc", "desc"] = Query("asc", alias="sortDirection"),
    session: AsyncSession = Depends(deps.get_db_session),
    scope: deps.CompanyScope = Depends(deps.require_company),
):
    return await crud.template.get_multi_filtered(
        session,
        company_id=scope.company_id,
        type=type,
        language_code=language_code,
        search=search,
        sort_by=sort_by,
        sort_direction=sort_direction,
    )


@router.post(
    "",
    response_model=schemas.TemplateRead,
    status_code=status.HTTP_201_CREATED,
    summary="템플릿 생성",
)
async def create_template(
    template_in: schemas.TemplateCreate,
    session: AsyncSession = Depends(deps.get_db_session),
    scope: deps.CompanyScope = Depends(deps.require_company),
):
    for field, message in REQUIRED_FIELDS:
        if _blank(getattr(template_in, field)):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)

    return await crud.template.create_for_company(session, company_id=scope.company_id, obj_in=template_in)


# =============================================================================
# 2. 단건 조회 / 수정 / 삭제
# =============================================================================
@router.get("/{template_id}", response_model=schemas.TemplateRead, summary="템플릿 조회")
async def get_template(
    template_id: int,
    session: AsyncSession = Depends(deps.get_db_session),
    scope: deps.CompanyScope = Depends(deps.require_company),
):
    template = await crud.template.get_owned(session, id=template_id, company_id=scope.company_id)
    if template is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found")
    return template


@router.put("/{template_id}", response_model=schemas.TemplateRead, summary="템플릿 수정")
async def update_template(
    template_id: int,
    template_in: schemas.TemplateUpdate,
    session: AsyncSession = Depends(deps.get_db_session),
    scope: deps.CompanyScope = Depends(deps.require_company),
):
    """
    전달된 필드만 수정합니다. 필수 필드를 빈 값으로 바꾸는 요청은 400을 반환합니다.
    """
    update_data = template_in.model_dump(exclude_unset=True)
    for field, message in REQUIRED_FIELDS:
        if field in update_data and _blank(update_data[field]):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
    if update_data.get("is_default") is None:
        update_data.pop("is_default", None)

    return await crud.template.update_for_company(
        session, company_id=scope.company_id, template_id=template_id, update_data=update_data
    )


@router.delete("/{template_id}", response_model=MessageResponse, summary="템플릿 삭제")
async def delete_template(
    template_id: int,
    session: AsyncSession = Depends(deps.get_db_session),
    scope: deps.CompanyScope = Depends(deps.require_company),
):
    try:
        await crud.template.remove_for_company(session, company_id=scope.company_id, template_id=template_id)
    except crud.TemplateInUseError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "message": "Cannot delete template that is being used by documents",
                "documentsCount": e.documents_count,
            },
        )
    return MessageResponse(message="Template deleted successfully")


# =============================================================================
# 3. 복제 / 기본 템플릿 지정
# =============================================================================
@router.post(
    "/{template_id}/duplicate",
    response_model=schemas.TemplateActionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="템플릿 복제",
)
async def duplicate_template(
    template_id: int,
    duplicate_in: Optional[schemas.TemplateDuplicate] = Body(None),
    session: AsyncSession = Depends(deps.get_db_session),
    scope: deps.CompanyScope = Depends(deps.require_company),
):
    """
    템플릿을 복제합니다. 이름을 지정하지 않으면 "<원본 이름> (Copy)"가 사용되며,
    복제본은 항상 기본 템플릿이 아닙니다.
    """
    original = await crud.template.get_owned(session, id=template_id, company_id=scope.company_id)
    if original is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found")

    name = duplicate_in.name if duplicate_in is not None else None
    duplicated = await crud.template.duplicate(session, db_obj=original, name=name)
    return schemas.TemplateActionResponse(
        message="Template duplicated successfully",
        template=schemas.TemplateRead.model_validate(duplicated),
    )


@router.post(
    "/{template_id}/set-default",
    response_model=schemas.TemplateActionResponse,
    summary="기본 템플릿 지정",
)
async def set_default_template(
    template_id: int,
    session: AsyncSession = Depends(deps.get_db_session),
    scope: deps.CompanyScope = Depends(deps.require_company),
):
    template, changed = await crud.template.set_default(
        session, company_id=scope.company_id, template_id=template_id
    )
    message = "Template set as default successfully" if changed else "Template is already the default"
    return schemas.TemplateActionResponse(
        message=message,
        template=schemas.TemplateRead.model_validate(template),
    )
