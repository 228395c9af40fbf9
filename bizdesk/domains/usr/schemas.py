# bizdesk/domains/usr/schemas.py

"""
'usr' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field

from bizdesk.domains.shared.schemas import CamelModel


# =============================================================================
# 1. 인증 (Authentication) 스키마
# =============================================================================
class Token(BaseModel):
    access_token: str
    token_type: str


# =============================================================================
# 2. 사용자 (User) 스키마
# =============================================================================
class UserCreate(BaseModel):
    """CLI 등 내부에서 사용자를 생성할 때 사용하는 스키마입니다."""
    email: EmailStr
    password: str = Field(..., min_length=8)
    name: Optional[str] = None
    image: Optional[str] = None
    company_id: Optional[int] = None


class UserProfileRead(CamelModel):
    """/settings/user 응답 projection (비밀번호/회사 정보는 노출하지 않습니다)."""
    id: int
    name: Optional[str] = None
    email: str
    image: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserProfileUpdate(CamelModel):
    # name 필수 여부는 라우터에서 검사하여 "Name is required" 메시지로 응답합니다.
    name: Optional[str] = None
    image: Optional[str] = None
