# tests/conftest.py

import os
from typing import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from decimal import Decimal

# 설정 객체가 만들어지기 전에 테스트용 환경 변수를 지정해야 합니다.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-bizdesk")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("APP_ENV", "testing")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# bizdesk.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from bizdesk.main import app as main_app
from bizdesk.core import dependencies as deps
from bizdesk.core.database import get_session
from bizdesk.core.security import get_password_hash

# --- 모든 모델 임포트 ---
#  SQLModel.metadata.create_all()이 모든 테이블을 인식하려면 모든 모델 클래스가 임포트되어야 합니다.
from bizdesk.domains.models import *    # noqa: F401, F403
from bizdesk.domains.usr import models as usr_models
from bizdesk.domains.corp import models as corp_models
from bizdesk.domains.doc import models as doc_models
from bizdesk.domains.tmpl import models as tmpl_models


# --- 테스트용 데이터베이스 설정 ---
# 테스트마다 새로운 인메모리 SQLite DB를 사용합니다. (StaticPool: 하나의 연결을 공유)
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")

API_PREFIX = "/api/v1"
DEFAULT_PASSWORD = "testpass123"


# --- 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    각 테스트 함수마다 테이블을 새로 만들고, 테스트 완료 후 삭제하여
    테스트 간의 격리를 보장하는 비동기 데이터베이스 세션을 제공합니다.
    애플리케이션 코드가 직접 commit/rollback 하므로 외부 트랜잭션으로 감싸지 않습니다.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)

    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with TestingSessionLocal() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


# --- 데이터 팩토리 픽스처 ---
@pytest_asyncio.fixture(scope="function")
def company_factory(db_session: AsyncSession) -> Callable[..., Awaitable[corp_models.Company]]:
    """이름과 속성을 지정하여 테스트 회사를 생성하는 팩토리 함수를 반환합니다."""
    async def _create_company(name: str = "Acme B.V.", **kwargs) -> corp_models.Company:
        company = corp_models.Company(name=name, **kwargs)
        db_session.add(company)
        await db_session.commit()
        await db_session.refresh(company)
        return company
    return _create_company


@pytest_asyncio.fixture(scope="function")
def user_factory(db_session: AsyncSession) -> Callable[..., Awaitable[usr_models.User]]:
    """
    이메일과 소속 회사를 지정하여 테스트 사용자를 생성하는 팩토리 함수를 반환합니다.
    **kwargs는 User 모델 생성자에 전달됩니다.
    """
    async def _create_user(
        email: str,
        password: str = DEFAULT_PASSWORD,
        company_id: int = None,
        **kwargs,
    ) -> usr_models.User:
        user = usr_models.User(
            email=email,
            password_hash=get_password_hash(password),
            company_id=company_id,
            **kwargs,
        )
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user
    return _create_user


@pytest_asyncio.fixture(scope="function")
def customer_factory(db_session: AsyncSession) -> Callable[..., Awaitable[doc_models.Customer]]:
    async def _create_customer(company_id: int, company_name: str = "Klant B.V.", **kwargs) -> doc_models.Customer:
        customer = doc_models.Customer(company_id=company_id, company_name=company_name, **kwargs)
        db_session.add(customer)
        await db_session.commit()
        await db_session.refresh(customer)
        return customer
    return _create_customer


@pytest_asyncio.fixture(scope="function")
def document_factory(db_session: AsyncSession) -> Callable[..., Awaitable[doc_models.Document]]:
    """견적서/청구서 문서를 생성합니다. 기본값은 SENT 상태의 청구서입니다."""
    counter = {"value": 0}

    async def _create_document(
        company_id: int,
        customer_id: int,
        type: doc_models.DocumentType = doc_models.DocumentType.INVOICE,
        status: doc_models.DocumentStatus = doc_models.DocumentStatus.SENT,
        **kwargs,
    ) -> doc_models.Document:
        counter["value"] += 1
        prefix = "INV" if type == doc_models.DocumentType.INVOICE else "OFFER"
        kwargs.setdefault("document_number", f"{prefix}-2025-{counter['value']:04d}")
        kwargs.setdefault("total_amount", Decimal("121.00"))
        document = doc_models.Document(
            company_id=company_id, customer_id=customer_id, type=type, status=status, **kwargs
        )
        db_session.add(document)
        await db_session.commit()
        await db_session.refresh(document)
        return document
    return _create_document


@pytest_asyncio.fixture(scope="function")
def template_factory(db_session: AsyncSession) -> Callable[..., Awaitable[tmpl_models.Template]]:
    """템플릿 행을 직접 생성합니다. 기본 템플릿 규칙은 적용되지 않습니다."""
    async def _create_template(
        company_id: int,
        name: str = "Standard",
        type: doc_models.DocumentType = doc_models.DocumentType.INVOICE,
        language_code: str = "en",
        content: str = "<p>{{documentNumber}}</p>",
        is_default: bool = False,
    ) -> tmpl_models.Template:
        template = tmpl_models.Template(
            company_id=company_id,
            name=name,
            type=type,
            language_code=language_code,
            content=content,
            is_default=is_default,
        )
        db_session.add(template)
        await db_session.commit()
        await db_session.refresh(template)
        return template
    return _create_template


# --- 공통 엔티티 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_company(company_factory: Callable) -> corp_models.Company:
    """테스트용 회사를 생성합니다."""
    return await company_factory("Acme B.V.", city="Amsterdam", country="Netherlands")


@pytest_asyncio.fixture(scope="function")
async def other_company(company_factory: Callable) -> corp_models.Company:
    """다른 회사 소유 데이터 접근을 검증하기 위한 두 번째 회사입니다."""
    return await company_factory("Other Company")


@pytest_asyncio.fixture(scope="function")
async def test_user(user_factory: Callable, test_company: corp_models.Company) -> usr_models.User:
    """회사 프로필이 있는 사용자를 생성합니다."""
    return await user_factory("owner@example.com", company_id=test_company.id, name="Owner")


@pytest_asyncio.fixture(scope="function")
async def test_user_without_company(user_factory: Callable) -> usr_models.User:
    """아직 회사 프로필을 만들지 않은 사용자를 생성합니다."""
    return await user_factory("newbie@example.com", name="Newbie")


# --- 인증 클라이언트 픽스처 ---
# 역할: 사용자를 이용해 /api/v1/auth/token 로그인을 실제로 호출하고,
#   받은 access_token을 Authorization 헤더에 포함시킨 AsyncClient를 반환합니다.
@pytest_asyncio.fixture(scope="function")
def authorized_client_factory(
    db_session: AsyncSession,
) -> Callable[[usr_models.User, str], AsyncGenerator[AsyncClient, None]]:
    """
    특정 사용자로 로그인된 AsyncClient를 생성하는 팩토리 함수를 반환합니다.
    인가 로직은 실제 토큰 해석 경로를 그대로 사용합니다.
    """
    @asynccontextmanager
    async def _create_client_context(
        user: usr_models.User, password: str = DEFAULT_PASSWORD
    ) -> AsyncGenerator[AsyncClient, None]:
        def override_get_session():
            yield db_session

        original_overrides = main_app.dependency_overrides.copy()
        try:
            main_app.dependency_overrides.update({
                get_session: override_get_session,
                deps.get_db_session: override_get_session,
            })

            transport = ASGITransport(app=main_app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                login_data = {"username": user.email, "password": password}
                res = await client.post(f"{API_PREFIX}/auth/token", data=login_data)

                if res.status_code != 200:
                    pytest.fail(f"Login failed for {user.email}: {res.text}")

                token = res.json()["access_token"]
                client.headers["Authorization"] = f"Bearer {token}"
                yield client
        finally:
            main_app.dependency_overrides.clear()
            main_app.dependency_overrides.update(original_overrides)

    return _create_client_context


@pytest_asyncio.fixture(scope="function")
async def authorized_client(
    authorized_client_factory: Callable[..., AsyncGenerator[AsyncClient, None]],
    test_user: usr_models.User,
) -> AsyncGenerator[AsyncClient, None]:
    """회사 프로필이 있는 사용자로 인증된 클라이언트를 반환합니다."""
    async with authorized_client_factory(test_user) as client:
        yield client


@pytest_asyncio.fixture(scope="function")
async def no_company_client(
    authorized_client_factory: Callable[..., AsyncGenerator[AsyncClient, None]],
    test_user_without_company: usr_models.User,
) -> AsyncGenerator[AsyncClient, None]:
    """회사 프로필이 없는 사용자로 인증된 클라이언트를 반환합니다."""
    async with authorized_client_factory(test_user_without_company) as client:
        yield client


# --- 비동기 테스트 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    인증되지 않은 AsyncClient 인스턴스를 생성하고, 테스트용 비동기 DB 세션을 주입합니다.
    """
    def override_get_session():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()
    try:
        main_app.dependency_overrides[get_session] = override_get_session
        main_app.dependency_overrides[deps.get_db_session] = override_get_session

        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            yield async_client
    finally:
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)
