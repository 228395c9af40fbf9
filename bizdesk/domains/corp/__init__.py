# bizdesk/domains/corp/__init__.py

"""
FastAPI 애플리케이션의 'corp' 도메인 패키지입니다.

'corp' 도메인은 사용자가 운영하는 회사의 프로필(회사명, 주소, 세금번호,
은행 계좌, 로고 등)과 언어별 번역(주소, 결제 조건, 문서 하단 문구)을 관리합니다.
회사는 문서(Document)와 템플릿(Template)의 소유 주체입니다.

주요 서브모듈:
- `models.py`: companies, company_translations 테이블 SQLModel 정의.
- `schemas.py`: 회사/번역 DTO.
- `crud.py`: 회사 생성/갱신 및 번역 upsert 로직.
- `routers.py`: /settings/company, /settings/company/translations 엔드포인트.
"""

__title__ = "bizdesk Company Domain"
__description__ = "Manages the company profile and its per-language translations."
__version__ = "0.1.0"
__all__ = ["models", "schemas", "routers", "crud"]
