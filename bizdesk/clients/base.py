# bizdesk/clients/base.py

import logging
from typing import Any, Optional

import httpx

from bizdesk import API_PREFIX

logger = logging.getLogger(__name__)


class ApiClientError(Exception):
    """API 호출 실패. 서버가 보낸 message 가 있으면 그 내용을 담습니다."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def api_path(path: str) -> str:
    return f"{API_PREFIX}{path}"


def server_message(response: httpx.Response) -> Optional[str]:
    """응답 본문의 {"message": ...} 값을 꺼냅니다. JSON이 아니거나 없으면 None."""
    try:
        body: Any = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str) and body["message"]:
        return body["message"]
    return None


def raise_with_server_message(response: httpx.Response, default_message: str) -> None:
    """
    실패 응답이면 서버 메시지(없으면 default_message)로 ApiClientError를 발생시킵니다.
    """
    if response.is_success:
        return
    message = server_message(response) or default_message
    logger.error("%s %s failed with %s: %s", response.request.method, response.request.url, response.status_code, message)
    raise ApiClientError(message, status_code=response.status_code)


def raise_with_reason(response: httpx.Response, prefix: str) -> None:
    """
    실패 응답이면 "<prefix>: <reason phrase>" 메시지로 ApiClientError를 발생시킵니다.
    """
    if response.is_success:
        return
    message = f"{prefix}: {response.reason_phrase}"
    logger.error("%s %s failed with %s", response.request.method, response.request.url, response.status_code)
    raise ApiClientError(message, status_code=response.status_code)
