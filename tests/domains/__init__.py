# tests/domains/__init__.py

"""
도메인별 엔드포인트 테스트 패키지입니다.

- `test_usr.py`: 로그인, 사용자 프로필.
- `test_corp.py`: 회사 프로필과 번역.
- `test_doc.py`: 청구서 조회와 부분 결제 처리.
- `test_tmpl.py`: 문서 템플릿과 기본 템플릿 지정.
- `test_ai.py`: AI 대화와 함수 호출.
"""

__all__ = []
