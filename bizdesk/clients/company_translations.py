# bizdesk/clients/company_translations.py

"""회사 번역 API 클라이언트."""

from typing import Any, Dict, List

import httpx

from .base import api_path, raise_with_reason, raise_with_server_message

TRANSLATIONS_PATH = api_path("/settings/company/translations")


async def fetch_company_translations(client: httpx.AsyncClient) -> List[Dict[str, Any]]:
    response = await client.get(TRANSLATIONS_PATH)
    raise_with_reason(response, "Error fetching company translations")
    return response.json()


async def create_or_update_company_translation(
    client: httpx.AsyncClient, data: Dict[str, Any]
) -> Dict[str, Any]:
    """languageCode 기준으로 번역을 생성하거나 갱신합니다."""
    response = await client.post(TRANSLATIONS_PATH, json=data)
    raise_with_server_message(response, "Error updating company translation")
    return response.json()
