"""
Balance 라우트

Balance General 저장 및 조회 API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from adapters.db.sqlite_adapter import SQLiteAdapter
from web.dependencies import get_db, get_db_write
from web.models.requests import BalanceCreateRequest
from web.models.responses import BalanceRecordResponse
from web.services.balance_service import (
    BalanceService,
    BalanceValidationError,
    ClientNotFoundError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Balances"])


@router.get("/balances", response_model=list[BalanceRecordResponse])
async def list_balances(
    rut: str | None = Query(default=None, description="소유자 RUT 필터"),
    db: SQLiteAdapter = Depends(get_db),
) -> list[BalanceRecordResponse]:
    """Balance 목록 조회 (최신순)"""
    service = BalanceService(db)

    records = await service.list_balances(rut)

    return [BalanceRecordResponse(**r) for r in records]


@router.get("/balances/latest", response_model=BalanceRecordResponse)
async def get_latest_balance(
    rut: str = Query(..., description="소유자 RUT"),
    db: SQLiteAdapter = Depends(get_db),
) -> BalanceRecordResponse:
    """고객의 가장 최근 Balance 조회"""
    service = BalanceService(db)

    record = await service.get_latest(rut)

    if not record:
        raise HTTPException(
            status_code=404,
            detail=f"No balance found for client: {rut}",
        )

    return BalanceRecordResponse(**record)


@router.post("/balances", response_model=BalanceRecordResponse, status_code=201)
async def create_balance(
    request: BalanceCreateRequest,
    db: SQLiteAdapter = Depends(get_db_write),
) -> BalanceRecordResponse:
    """Balance 저장

    합계는 계정 행으로 서버에서 다시 계산한다.
    """
    service = BalanceService(db)

    try:
        record = await service.save_balance(
            client_rut=request.client_rut,
            client_name=request.client_name,
            accounts=[a.to_input() for a in request.accounts],
        )
    except BalanceValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ClientNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return BalanceRecordResponse(**record)
