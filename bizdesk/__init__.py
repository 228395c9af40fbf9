# bizdesk/__init__.py

"""
bizdesk FastAPI 애플리케이션의 메인 패키지입니다.

소규모 사업자를 위한 관리 백엔드로, 회사 프로필, 사용자 프로필,
견적서/청구서(Document) 상태 관리, 문서 템플릿, AI 어시스턴트 기능을 제공합니다.

- core: 설정, 데이터베이스 연결, 보안, 인가(authorization) 의존성, 오류 응답 처리
- domains: 각 비즈니스 도메인(usr, corp, doc, tmpl, ai)
- clients: 외부에서 API를 호출하기 위한 httpx 기반 클라이언트 래퍼
- utils: 포맷팅/검증/문서 상태 헬퍼
"""

APP_NAME = "bizdesk API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/v1"  # API 라우트의 공통 접두사 (main.py 및 clients에서 사용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Business administration API backend (company, documents, templates)."
__all__ = ["APP_NAME", "APP_VERSION", "API_PREFIX"]
