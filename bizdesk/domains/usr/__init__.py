# bizdesk/domains/usr/__init__.py

"""
FastAPI 애플리케이션의 'usr' 도메인 패키지입니다.

'usr' 도메인은 시스템 사용자와 인증(로그인 토큰 발급),
그리고 현재 사용자의 프로필 설정(/settings/user)을 관리합니다.

주요 서브모듈:
- `models.py`: users 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 토큰 및 사용자 프로필 DTO.
- `crud.py`: 사용자 조회/생성/인증 및 프로필 갱신 로직.
- `routers.py`: 로그인 및 사용자 프로필 API 엔드포인트.
"""

__title__ = "bizdesk User Domain"
__description__ = "Manages users, authentication and the user profile."
__version__ = "0.1.0"
__all__ = []
