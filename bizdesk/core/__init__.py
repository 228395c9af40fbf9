# bizdesk/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

- `config.py`: 애플리케이션의 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 데이터베이스 연결, 세션 관리 (SQLModel 및 AsyncSQLAlchemy).
- `security.py`: 비밀번호 해싱, JWT 생성/검증.
- `dependencies.py`: 세션 및 인가(authorization) 의존성 함수들.
- `crud_base.py`: 공통 CRUD 기본 클래스.
- `exceptions.py`: {"message": ...} 오류 응답 핸들러.
"""

__all__ = []
