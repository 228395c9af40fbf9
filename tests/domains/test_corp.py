# tests/domains/test_corp.py

"""
'corp' 도메인 (회사 프로필 / 회사 번역) API 통합 테스트 모듈입니다.
"""

import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from bizdesk.domains.corp import models as corp_models
from bizdesk.domains.usr import models as usr_models

COMPANY_API = "/api/v1/settings/company"
TRANSLATIONS_API = f"{COMPANY_API}/translations"


# =============================================================================
# 1. 회사 프로필
# =============================================================================
@pytest.mark.asyncio
async def test_get_company_profile(authorized_client: AsyncClient, test_company: corp_models.Company):
    response = await authorized_client.get(COMPANY_API)

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == test_company.id
    assert data["name"] == "Acme B.V."
    assert data["city"] == "Amsterdam"
    assert "bankAccountBIC" in data


@pytest.mark.asyncio
async def test_get_company_profile_not_created_yet(no_company_client: AsyncClient):
    response = await no_company_client.get(COMPANY_API)

    assert response.status_code == 404
    assert response.json() == {"message": "Company profile not found"}


@pytest.mark.asyncio
async def test_get_company_profile_unauthenticated(client: AsyncClient):
    response = await client.get(COMPANY_API)

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_create_company_profile_links_user(
    no_company_client: AsyncClient,
    db_session: AsyncSession,
    test_user_without_company: usr_models.User,
):
    """
    회사 프로필이 없는 사용자가 POST 하면 회사가 생성되고 사용자에게 연결됩니다.
    """
    payload = {
        "name": "Nieuw Bedrijf",
        "addressLine1": "Damrak 1",
        "city": "Amsterdam",
        "vatId": "NL123456789B01",
        "bankAccountBIC": "INGBNL2A",
        "email": "info@nieuw.nl",
    }
    response = await no_company_client.post(COMPANY_API, json=payload)

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Nieuw Bedrijf"
    assert data["addressLine1"] == "Damrak 1"
    assert data["bankAccountBIC"] == "INGBNL2A"

    await db_session.refresh(test_user_without_company)
    assert test_user_without_company.company_id == data["id"]

    # 회사가 생긴 뒤에는 회사 범위 엔드포인트에 접근할 수 있습니다.
    translations = await no_company_client.get(TRANSLATIONS_API)
    assert translations.status_code == 200


@pytest.mark.asyncio
async def test_update_company_profile(
    authorized_client: AsyncClient, db_session: AsyncSession, test_company: corp_models.Company
):
    response = await authorized_client.post(COMPANY_API, json={"name": "Acme Holding B.V.", "website": "https://acme.nl"})

    assert response.status_code == 200
    assert response.json()["name"] == "Acme Holding B.V."

    result = await db_session.execute(select(corp_models.Company))
    companies = result.scalars().all()
    assert len(companies) == 1
    await db_session.refresh(test_company)
    assert test_company.website == "https://acme.nl"
    # 보내지 않은 필드는 유지됩니다.
    assert test_company.city == "Amsterdam"


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{}, {"name": ""}, {"name": "  ", "city": "Utrecht"}])
async def test_company_profile_requires_name(authorized_client: AsyncClient, payload):
    response = await authorized_client.post(COMPANY_API, json=payload)

    assert response.status_code == 400
    assert response.json() == {"message": "Company name is required"}


@pytest.mark.asyncio
async def test_company_profile_rejects_invalid_email(authorized_client: AsyncClient):
    response = await authorized_client.post(COMPANY_API, json={"name": "Acme", "email": "not-an-email"})

    assert response.status_code == 400
    assert response.json()["message"].startswith("Invalid request")


# =============================================================================
# 2. 회사 번역
# =============================================================================
@pytest.mark.asyncio
async def test_translations_require_company(no_company_client: AsyncClient):
    response = await no_company_client.get(TRANSLATIONS_API)

    assert response.status_code == 403
    assert response.json() == {"message": "Company profile required"}

    response = await no_company_client.post(TRANSLATIONS_API, json={"languageCode": "nl"})
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_translations_unauthenticated(client: AsyncClient):
    response = await client.get(TRANSLATIONS_API)

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_upsert_company_translation(authorized_client: AsyncClient, test_company: corp_models.Company):
    """
    같은 언어 코드로 다시 보내면 새로 만들지 않고 갱신합니다. (201 -> 200)
    """
    created = await authorized_client.post(
        TRANSLATIONS_API,
        json={"languageCode": "nl", "paymentTermsText": "Betaling binnen 14 dagen"},
    )
    assert created.status_code == 201
    assert created.json()["companyId"] == test_company.id

    updated = await authorized_client.post(
        TRANSLATIONS_API,
        json={"languageCode": "nl", "invoiceFooterText": "Bedankt voor uw opdracht"},
    )
    assert updated.status_code == 200
    assert updated.json()["id"] == created.json()["id"]
    assert updated.json()["paymentTermsText"] == "Betaling binnen 14 dagen"
    assert updated.json()["invoiceFooterText"] == "Bedankt voor uw opdracht"

    await authorized_client.post(TRANSLATIONS_API, json={"languageCode": "en"})

    listed = await authorized_client.get(TRANSLATIONS_API)
    assert listed.status_code == 200
    assert [t["languageCode"] for t in listed.json()] == ["en", "nl"]


@pytest.mark.asyncio
async def test_upsert_company_translation_requires_language(authorized_client: AsyncClient):
    response = await authorized_client.post(TRANSLATIONS_API, json={"paymentTermsText": "30 days"})

    assert response.status_code == 400
    assert response.json() == {"message": "Language code is required"}


@pytest.mark.asyncio
async def test_translations_are_scoped_to_company(
    authorized_client: AsyncClient,
    db_session: AsyncSession,
    other_company: corp_models.Company,
):
    db_session.add(corp_models.CompanyTranslation(company_id=other_company.id, language_code="de"))
    await db_session.commit()

    response = await authorized_client.get(TRANSLATIONS_API)

    assert response.status_code == 200
    assert response.json() == []
