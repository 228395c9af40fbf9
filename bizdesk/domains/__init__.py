# bizdesk/domains/__init__.py

"""
비즈니스 도메인 패키지 모음입니다.

- usr: 사용자, 로그인 토큰, 사용자 프로필 설정
- corp: 회사 프로필 및 언어별 번역
- doc: 고객 및 견적서/청구서 문서
- tmpl: 문서 템플릿
- ai: 생성형 AI 어시스턴트
"""
