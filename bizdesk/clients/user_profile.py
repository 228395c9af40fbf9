# bizdesk/clients/user_profile.py

"""사용자 프로필 API 클라이언트."""

from typing import Any, Dict

import httpx

from .base import api_path, raise_with_reason, raise_with_server_message

USER_PROFILE_PATH = api_path("/settings/user")


async def fetch_user_profile(client: httpx.AsyncClient) -> Dict[str, Any]:
    response = await client.get(USER_PROFILE_PATH)
    raise_with_reason(response, "Error fetching user profile")
    return response.json()


async def update_user_profile(client: httpx.AsyncClient, data: Dict[str, Any]) -> Dict[str, Any]:
    response = await client.patch(USER_PROFILE_PATH, json=data)
    raise_with_server_message(response, "Error updating user profile")
    return response.json()
