# bizdesk/domains/doc/__init__.py

"""
FastAPI 애플리케이션의 'doc' 도메인 패키지입니다.

'doc' 도메인은 회사의 고객(Customer)과 견적서(OFFER)/청구서(INVOICE) 문서를 관리합니다.
모든 조회와 변경은 인증된 사용자의 회사 ID 범위 안에서만 이루어집니다.

주요 서브모듈:
- `models.py`: customers, documents 테이블 및 문서 유형/상태 Enum.
- `schemas.py`: 문서/고객 DTO.
- `crud.py`: 회사 범위 문서 조회 및 상태 변경 로직.
- `routers.py`: /invoices 엔드포인트.
"""

__title__ = "bizdesk Document Domain"
__description__ = "Manages customers, offers and invoices."
__version__ = "0.1.0"
__all__ = []
