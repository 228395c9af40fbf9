# bizdesk/domains/shared/__init__.py

"""
여러 도메인이 공통으로 사용하는 스키마(DTO 기본 클래스, 메시지 응답)를 담는 패키지입니다.
"""
