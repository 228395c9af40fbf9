# bizdesk/utils/__init__.py

"""
도메인에 독립적인 순수 함수 유틸리티 패키지입니다.

- formatters: 날짜/통화/숫자/파일 크기 포맷팅
- validators: 이메일, URL, 전화번호, VAT 번호 등 입력값 검증
- status: 문서 상태 표시(배지) 및 상태 전이 헬퍼
"""
