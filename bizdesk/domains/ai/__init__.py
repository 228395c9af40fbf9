# bizdesk/domains/ai/__init__.py

"""
FastAPI 애플리케이션의 'ai' 도메인 패키지입니다.

Google Gemini 기반 어시스턴트 엔드포인트(/ai/chat, /ai/function)를 제공합니다.
대화 이력은 서버에 저장하지 않고 요청/응답의 history 로 주고받습니다.

주요 서브모듈:
- `services.py`: Gemini 래퍼, 대화 컨텍스트 값 객체.
- `functions.py`: 함수 선언 및 프롬프트.
- `schemas.py`: 요청/응답 DTO.
- `routers.py`: API 엔드포인트.
"""

__title__ = "bizdesk AI Assistant Domain"
__version__ = "0.1.0"
__all__ = []
