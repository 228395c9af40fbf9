# bizdesk/clients/__init__.py

"""
bizdesk API를 호출하는 httpx 비동기 클라이언트 래퍼입니다.

각 함수는 base_url 과 인증 헤더가 설정된 httpx.AsyncClient 를 인자로 받습니다.

    async with httpx.AsyncClient(base_url="https://bizdesk.example.com",
                                 headers={"Authorization": f"Bearer {token}"}) as client:
        profile = await company.fetch_company_profile(client)
"""

from .base import ApiClientError

__all__ = ["ApiClientError"]
