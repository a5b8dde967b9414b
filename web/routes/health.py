"""
헬스 체크 엔드포인트

GET /health - 서버 상태 확인 (DB + financial-data API)
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from core.config.loader import Settings
from core.constants import Defaults
from web.dependencies import get_app_settings
from web.models.responses import HealthResponse
from web.services.health_service import HealthService

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    """서버 상태 확인

    Returns:
        모든 항목 정상: 200 (status=ok)
        하나라도 실패: 503 (status=degraded)
    """
    service = HealthService(
        db_path=settings.db_path,
        app=request.app,
        financial_data_url=settings.financial_data_url,
        timeout=Defaults.HEALTH_PROBE_TIMEOUT_SEC,
    )

    result = HealthResponse(**await service.check(Defaults.APP_VERSION))

    return JSONResponse(
        status_code=200 if result.status == "ok" else 503,
        content=result.model_dump(),
    )
