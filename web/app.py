"""
FastAPI 애플리케이션

라우터 등록, 예외 처리기, 앱 설정.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from core.config.loader import get_settings
from core.errors import FinanceError, ValidationError
from core.logging import setup_logging
from core.storage.seed import seed_default_categories, seed_sample_data
from web.middleware import RequestLogMiddleware
from web.models.responses import ErrorResponse
from web.routes import categories, goals, health, transactions

# 로깅 설정 (콘솔 + 파일)
setup_logging("web")

logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 생명주기 관리

    시작 시 스키마 초기화 후 설정에 따라 기본 카테고리/샘플 데이터 생성.
    """
    settings = get_settings()

    async with SQLiteAdapter(settings.db_path) as db:
        await init_schema(db)

        if settings.seed_default_categories:
            await seed_default_categories(db)
        if settings.seed_sample_data:
            await seed_sample_data(db)

    logger.info(
        "Web 시작",
        extra={"environment": settings.environment, "db_path": str(settings.db_path)},
    )

    yield

    logger.info("Web 종료")


app = FastAPI(
    title="Personal Finance API",
    description="개인 가계부 API (거래, 카테고리, 저축 목표)",
    version=APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    responses={
        400: {"model": ErrorResponse, "description": "검증 실패 / 참조 충돌"},
        404: {"model": ErrorResponse, "description": "엔티티 없음"},
        500: {"model": ErrorResponse, "description": "내부 오류"},
    },
)

# CORS 설정 (개발용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLogMiddleware)


# =========================================================================
# 예외 처리기 (응답 봉투로 변환)
# =========================================================================

def _envelope(status_code: int, error: str, **extra: Any) -> JSONResponse:
    body: dict[str, Any] = {"success": False, "error": error}
    body.update({k: v for k, v in extra.items() if v is not None})
    return JSONResponse(status_code=status_code, content=body)


@app.exception_handler(FinanceError)
async def finance_error_handler(request: Request, exc: FinanceError) -> JSONResponse:
    """도메인 에러 → 봉투

    InternalError(500)는 처리되지 않은 예외와 같은 형태로 응답한다.
    """
    if exc.status_code >= 500:
        logger.error(f"내부 오류: {exc.message}", extra={"path": request.url.path})
        message = None if get_settings().is_production else exc.message
        return _envelope(exc.status_code, "Internal server error", message=message)

    details = None
    if isinstance(exc, ValidationError):
        logger.info(
            f"검증 실패: {request.method} {request.url.path}",
            extra={"fields": exc.fields()},
        )
        details = exc.details()
    return _envelope(exc.status_code, exc.message, details=details)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """라우팅/HTTP 오류 → 봉투 (없는 경로는 404)"""
    if exc.status_code == 404:
        return _envelope(404, "Not found", path=request.url.path)
    return _envelope(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """요청 형식 오류 (잘못된 JSON, 쿼리 타입) → 400"""
    details = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        details.append({
            "field_path": ".".join(loc) or "body",
            "message": error.get("msg", "Invalid value"),
        })
    return _envelope(400, "Invalid request", details=details)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """예상하지 못한 오류 → 500 (development 환경에서만 메시지 노출)"""
    logger.exception(f"처리되지 않은 오류: {request.method} {request.url.path}")
    message = None if get_settings().is_production else str(exc)
    return _envelope(500, "Internal server error", message=message)


# =========================================================================
# API 라우터 등록
# =========================================================================

app.include_router(health.router)
app.include_router(categories.router)
app.include_router(transactions.router)
app.include_router(goals.router)


@app.get("/", include_in_schema=False)
async def root() -> dict[str, str]:
    """서비스 배너"""
    return {
        "message": "Personal Finance API",
        "version": APP_VERSION,
        "status": "running",
    }
