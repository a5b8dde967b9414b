"""
FastAPI 애플리케이션

라우터 등록 및 앱 설정.
"""

import logging
import sqlite3
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates

from core.config.loader import get_settings
from core.constants import Defaults
from core.logging import setup_logging
from core.types import ClientListSource
from core.utils.numbers import format_number

# 로깅 설정 (콘솔 + 파일)
setup_logging("web")

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from web.dependencies import get_indicator_service
from web.routes import balances, clients, export, financial_data, health, worksheet
from web.services.indicator_service import IndicatorService

logger = logging.getLogger(__name__)

# 경로 설정
WEB_DIR = Path(__file__).parent
TEMPLATES_DIR = WEB_DIR / "templates"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 생명주기 관리"""
    settings = get_settings()

    # 시작 시 - DB 스키마 자동 초기화
    async with SQLiteAdapter(settings.db_path) as db:
        await init_schema(db)

    # 등록은 clientes, 목록은 clients 테이블 (설정으로 변경 가능)
    if settings.client_list_source == ClientListSource.CLIENTS:
        logger.warning(
            "Client list reads table 'clients' while registration writes 'clientes'. "
            "Set clients.list_source: clientes to list registered clients."
        )

    logger.info(
        "Web 시작",
        extra={
            "db_path": str(settings.db_path),
            "indicator_strategy": settings.indicator_strategy.value,
        },
    )

    yield

    logger.info("Web 종료")


app = FastAPI(
    title="ContaDash API",
    description="Balance General 작성 및 경제 지표 대시보드 API",
    version=Defaults.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS 설정 (개발용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["clp"] = format_number


@app.exception_handler(sqlite3.Error)
async def sqlite_error_handler(request: Request, exc: sqlite3.Error) -> JSONResponse:
    """저장소 오류 → 500"""
    logger.error(f"Store failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal storage error"})


# =========================================================================
# API 라우터 등록
# =========================================================================

app.include_router(health.router)
app.include_router(balances.router)
app.include_router(export.router)
app.include_router(clients.router)
app.include_router(financial_data.router)
app.include_router(worksheet.router)


# =========================================================================
# 페이지 라우트 (HTML)
# =========================================================================

@app.get("/", include_in_schema=False)
async def dashboard_page(
    request: Request,
    service: IndicatorService = Depends(get_indicator_service),
):
    """대시보드 페이지 (경제 지표 + 서비스 링크)"""
    indicators = await service.get_snapshot()
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {"active_page": "dashboard", "indicators": indicators},
    )


@app.get("/accounting", include_in_schema=False)
async def accounting_page(request: Request):
    """Balance General 편집 페이지"""
    return templates.TemplateResponse(
        request,
        "accounting.html",
        {"active_page": "accounting"},
    )


@app.get("/clients", include_in_schema=False)
async def clients_page(request: Request):
    """고객 등록 페이지"""
    return templates.TemplateResponse(
        request,
        "clients.html",
        {"active_page": "clients"},
    )
