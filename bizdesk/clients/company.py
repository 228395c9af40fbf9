# bizdesk/clients/company.py

"""회사 프로필 API 클라이언트."""

from typing import Any, Dict, Optional

import httpx

from .base import api_path, raise_with_reason, raise_with_server_message

COMPANY_PATH = api_path("/settings/company")


async def fetch_company_profile(client: httpx.AsyncClient) -> Optional[Dict[str, Any]]:
    """
    회사 프로필을 조회합니다. 아직 프로필이 없으면(404) None을 반환합니다.
    """
    response = await client.get(COMPANY_PATH)
    if response.status_code == httpx.codes.NOT_FOUND:
        return None
    raise_with_reason(response, "Error fetching company profile")
    return response.json()


async def create_or_update_company_profile(
    client: httpx.AsyncClient, data: Dict[str, Any]
) -> Dict[str, Any]:
    response = await client.post(COMPANY_PATH, json=data)
    raise_with_server_message(response, "Error updating company profile")
    return response.json()
