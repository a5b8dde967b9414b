"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
"""

from typing import AsyncGenerator

from fastapi import Depends

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import Settings, get_settings
from core.types import ClientListSource
from web.services.export_service import ExportService
from web.services.indicator_service import IndicatorService


def get_app_settings() -> Settings:
    """애플리케이션 설정 반환"""
    return get_settings()


async def get_db() -> AsyncGenerator[SQLiteAdapter, None]:
    """DB 세션 반환 (읽기 전용)

    목록/조회 API에서 사용.
    """
    settings = get_settings()
    async with SQLiteAdapter(settings.db_path, readonly=True) as db:
        yield db


async def get_db_write() -> AsyncGenerator[SQLiteAdapter, None]:
    """DB 세션 반환 (쓰기 가능)

    고객 등록, Balance 저장 시 사용.
    """
    settings = get_settings()
    async with SQLiteAdapter(settings.db_path, readonly=False) as db:
        yield db


def get_client_list_source(
    settings: Settings = Depends(get_app_settings),
) -> ClientListSource:
    """고객 목록 조회 테이블"""
    return settings.client_list_source


def get_indicator_service(
    settings: Settings = Depends(get_app_settings),
) -> IndicatorService:
    """경제 지표 서비스 (설정 기반)"""
    return IndicatorService(
        strategy=settings.indicator_strategy,
        base_url=settings.indicator_base_url,
        timeout=settings.indicator_timeout_sec,
    )


# 템플릿 로딩 비용 때문에 프로세스당 1개
_export_service: ExportService | None = None


def get_export_service() -> ExportService:
    """HTML 내보내기 서비스"""
    global _export_service
    if _export_service is None:
        _export_service = ExportService()
    return _export_service
