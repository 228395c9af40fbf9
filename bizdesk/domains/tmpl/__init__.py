# bizdesk/domains/tmpl/__init__.py

"""
FastAPI 애플리케이션의 'tmpl' 도메인 패키지입니다.

'tmpl' 도메인은 견적서/청구서 문서를 렌더링할 때 사용하는 템플릿을 관리합니다.
템플릿은 (회사, 문서 유형, 언어 코드) 조합마다 최대 하나의 기본(default) 템플릿을 가지며,
이 규칙은 부분 유니크 인덱스와 단일 트랜잭션 교체 로직으로 보장됩니다.

주요 서브모듈:
- `models.py`: templates 테이블 SQLModel 정의.
- `schemas.py`: 템플릿 DTO.
- `crud.py`: 목록 필터링, 생성/수정/삭제, 복제, 기본 템플릿 지정 로직.
- `routers.py`: /templates 엔드포인트.
"""

__title__ = "bizdesk Template Domain"
__description__ = "Manages document templates and the per-language default template."
__version__ = "0.1.0"
__all__ = []
