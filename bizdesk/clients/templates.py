# bizdesk/clients/templates.py

"""문서 템플릿 API 클라이언트."""

from typing import Any, Dict, List, Optional

import httpx

from .base import api_path, raise_with_reason, raise_with_server_message

TEMPLATES_PATH = api_path("/templates")


def _template_path(template_id: int, action: str = "") -> str:
    return f"{TEMPLATES_PATH}/{template_id}{action}"


async def fetch_templates(
    client: httpx.AsyncClient,
    *,
    search: Optional[str] = None,
    type: Optional[str] = None,
    language_code: Optional[str] = None,
    sort_by: Optional[str] = None,
    sort_direction: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """필터가 지정된 항목만 쿼리 문자열에 포함합니다."""
    params = {
        "search": search,
        "type": type,
        "languageCode": language_code,
        "sortBy": sort_by,
        "sortDirection": sort_direction,
    }
    response = await client.get(TEMPLATES_PATH, params={k: v for k, v in params.items() if v})
    raise_with_reason(response, "Error fetching templates")
    return response.json()


async def fetch_template(client: httpx.AsyncClient, template_id: int) -> Dict[str, Any]:
    response = await client.get(_template_path(template_id))
    raise_with_reason(response, "Error fetching template")
    return response.json()


async def create_template(client: httpx.AsyncClient, data: Dict[str, Any]) -> Dict[str, Any]:
    response = await client.post(TEMPLATES_PATH, json=data)
    raise_with_server_message(response, "Error creating template")
    return response.json()


async def update_template(client: httpx.AsyncClient, template_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    response = await client.put(_template_path(template_id), json=data)
    raise_with_server_message(response, "Error updating template")
    return response.json()


async def delete_template(client: httpx.AsyncClient, template_id: int) -> Dict[str, Any]:
    response = await client.delete(_template_path(template_id))
    raise_with_server_message(response, "Error deleting template")
    return response.json()


async def duplicate_template(
    client: httpx.AsyncClient, template_id: int, name: Optional[str] = None
) -> Dict[str, Any]:
    body = {"name": name} if name else {}
    response = await client.post(_template_path(template_id, "/duplicate"), json=body)
    raise_with_server_message(response, "Error duplicating template")
    return response.json()


async def set_default_template(client: httpx.AsyncClient, template_id: int) -> Dict[str, Any]:
    response = await client.post(_template_path(template_id, "/set-default"))
    raise_with_server_message(response, "Error setting template as default")
    return response.json()
