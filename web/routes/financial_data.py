"""
경제 지표 라우트

GET /api/financial-data - UF / UTM / Dólar 스냅샷
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from web.dependencies import get_indicator_service
from web.models.responses import FinancialDataResponse
from web.services.indicator_service import IndicatorService

router = APIRouter(prefix="/api", tags=["Indicators"])


@router.get("/financial-data", response_model=FinancialDataResponse)
async def get_financial_data(
    service: IndicatorService = Depends(get_indicator_service),
) -> FinancialDataResponse:
    """경제 지표 조회

    외부 API 실패 시에도 fallback 값으로 200 응답.
    """
    snapshot = await service.get_snapshot()
    return FinancialDataResponse(**snapshot)


@router.post("/financial-data", include_in_schema=False)
async def financial_data_method_not_allowed() -> JSONResponse:
    """조회 전용 엔드포인트"""
    return JSONResponse(status_code=405, content={"error": "Method not allowed"})
