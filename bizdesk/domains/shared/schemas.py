# bizdesk/domains/shared/schemas.py

"""
API 데이터 전송 객체(DTO)의 공통 기본 클래스를 정의하는 모듈입니다.

API의 JSON 필드명은 camelCase(예: isDefault, languageCode, createdAt)를 사용하고,
파이썬 코드에서는 snake_case 속성명을 그대로 사용합니다.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,  # snake_case 입력도 허용
        from_attributes=True,   # ORM 객체로부터 생성
    )


class MessageResponse(CamelModel):
    message: str
