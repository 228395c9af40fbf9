# bizdesk/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 관리 (get_db_session).
- 요청의 인가(authorization) 상태를 한 번에 판정하는 resolve_authorization.
  결과는 AuthStatus 값을 가진 Authorization 객체이며, 각 엔드포인트는
  get_current_user / require_company 를 통해 동일한 방식으로 소비합니다.
"""

import enum
import logging
from dataclasses import dataclass
from typing import AsyncGenerator, Optional

from fastapi import Depends, HTTPException, status
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from bizdesk.core.database import get_session as get_main_app_session
from bizdesk.core.security import decode_access_token, oauth2_scheme
from bizdesk.domains.usr import models as usr_models

logger = logging.getLogger(__name__)


# --- 데이터베이스 세션 의존성 주입 ---
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    bizdesk.core.database.get_session 을 래핑한 요청 단위 세션입니다.
    """
    async for session in get_main_app_session():
        yield session


# =============================================================================
# 인가(Authorization) 결과 타입
# =============================================================================
class AuthStatus(str, enum.Enum):
    AUTHENTICATED = "authenticated"      # 사용자 + 회사 모두 확인됨
    UNAUTHENTICATED = "unauthenticated"  # 토큰 없음 / 유효하지 않음
    UNKNOWN_USER = "unknown_user"        # 토큰은 유효하나 사용자가 없음
    NO_COMPANY = "no_company"            # 사용자는 있으나 회사 프로필이 없음


@dataclass(frozen=True)
class Authorization:
    """요청 하나에 대한 인가 판정 결과."""
    status: AuthStatus
    user: Optional[usr_models.User] = None

    @property
    def company_id(self) -> Optional[int]:
        return self.user.company_id if self.user is not None else None


@dataclass(frozen=True)
class CompanyScope:
    """회사 범위가 확정된 요청 컨텍스트. 모든 소유권 검사는 company_id 기준입니다."""
    user: usr_models.User
    company_id: int


async def resolve_authorization(
    token: Optional[str] = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db_session),
) -> Authorization:
    """
    Bearer 토큰을 해석하여 요청의 인가 상태를 판정합니다. 예외를 던지지 않습니다.
    """
    if not token:
        return Authorization(AuthStatus.UNAUTHENTICATED)

    email = decode_access_token(token)
    if email is None:
        return Authorization(AuthStatus.UNAUTHENTICATED)

    result = await db.execute(select(usr_models.User).where(usr_models.User.email == email))
    user = result.scalars().one_or_none()
    if user is None:
        logger.info("Token subject %s does not match any user", email)
        return Authorization(AuthStatus.UNKNOWN_USER)
    if user.company_id is None:
        return Authorization(AuthStatus.NO_COMPANY, user=user)
    return Authorization(AuthStatus.AUTHENTICATED, user=user)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    auth: Authorization = Depends(resolve_authorization),
) -> usr_models.User:
    """
    세션 사용자를 반환합니다. 회사 프로필이 없어도 됩니다.
    - 401: 인증 정보 없음
    - 404: 토큰의 사용자가 존재하지 않음
    """
    if auth.status == AuthStatus.UNAUTHENTICATED:
        raise _unauthorized()
    if auth.status == AuthStatus.UNKNOWN_USER:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return auth.user


async def require_company(
    auth: Authorization = Depends(resolve_authorization),
) -> CompanyScope:
    """
    회사 프로필이 있는 사용자만 통과시킵니다.
    - 401: 인증 정보 없음
    - 403: 사용자 또는 회사 프로필 없음
    """
    if auth.status == AuthStatus.UNAUTHENTICATED:
        raise _unauthorized()
    if auth.status != AuthStatus.AUTHENTICATED:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Company profile required")
    return CompanyScope(user=auth.user, company_id=auth.company_id)
