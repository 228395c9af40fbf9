# bizdesk/main.py

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel.ext.asyncio.session import AsyncSession

from bizdesk import API_PREFIX
from bizdesk.core.config import settings
from bizdesk.core.database import engine
from bizdesk.core.dependencies import get_db_session
from bizdesk.core.exceptions import register_exception_handlers

# 모든 모델을 metadata 및 매퍼에 등록합니다.
import bizdesk.domains.models  # noqa: F401

from bizdesk.domains.usr.routers import router as usr_router
from bizdesk.domains.corp.routers import router as corp_router
from bizdesk.domains.doc.routers import router as doc_router
from bizdesk.domains.tmpl.routers import router as tmpl_router
from bizdesk.domains.ai.routers import router as ai_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 시작/종료 시 로그를 남기고, 종료 시 데이터베이스 연결 풀을 정리합니다.
    스키마 생성/변경은 Alembic 또는 scripts/manage.py init-db 를 사용합니다.
    """
    logger.info("Starting %s (%s)", settings.APP_NAME, settings.APP_ENV)
    yield
    await engine.dispose()
    logger.info("Database connection pool disposed.")


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

register_exception_handlers(app)

# -- CORS 미들웨어 설정 --
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -- 도메인 라우터 포함 --
app.include_router(usr_router, prefix=API_PREFIX)
app.include_router(corp_router, prefix=f"{API_PREFIX}/settings")
app.include_router(doc_router, prefix=f"{API_PREFIX}/invoices")
app.include_router(tmpl_router, prefix=f"{API_PREFIX}/templates")
app.include_router(ai_router, prefix=f"{API_PREFIX}/ai")


# -- 루트 엔드포인트 --
@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    return {"message": f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(get_db_session)):
    """
    데이터베이스 연결을 테스트하여 서비스의 정상 작동 여부를 확인합니다.
    """
    try:
        result = await session.execute(text("SELECT 1"))
        if result.scalar() == 1:
            return {"status": "ok", "database_connection": "successful"}
    except SQLAlchemyError:
        logger.exception("Database health check failed")
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Database health check failed",
    )
