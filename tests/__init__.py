# tests/__init__.py

"""
bizdesk API 테스트 스위트 패키지입니다.

- `domains/`: 도메인별(usr, corp, doc, tmpl, ai) 엔드포인트 통합 테스트.
- `utils/`: 포맷터, 검증기, 상태 헬퍼 단위 테스트.
- `clients/`: httpx 클라이언트 래퍼 테스트.
- `conftest.py`: 인메모리 SQLite 세션, 데이터 팩토리, 인증 클라이언트 픽스처.
"""

__title__ = "bizdesk API Tests"
__all__ = []
