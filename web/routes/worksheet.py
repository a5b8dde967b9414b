"""
Worksheet 라우트

Balance General 편집 화면용 재계산 API
"""

from fastapi import APIRouter, HTTPException

from core.ledger.worksheet import AccountRowNotFoundError
from web.models.requests import WorksheetRequest
from web.models.responses import WorksheetResponse
from web.services.worksheet_service import (
    WorksheetActionError,
    apply_action,
    build_worksheet,
    worksheet_to_dict,
)

router = APIRouter(prefix="/api", tags=["Worksheet"])


@router.get("/worksheet/defaults", response_model=WorksheetResponse)
async def get_default_worksheet() -> WorksheetResponse:
    """기본 계정과목 워크시트 (금액 0)"""
    worksheet = build_worksheet(None)
    return WorksheetResponse(**worksheet_to_dict(worksheet))


@router.post("/worksheet", response_model=WorksheetResponse)
async def recalculate_worksheet(request: WorksheetRequest) -> WorksheetResponse:
    """워크시트 재계산

    동작(add/delete/rename/set)이 있으면 1개 적용 후 재계산.
    """
    accounts = (
        [a.to_input() for a in request.accounts]
        if request.accounts is not None
        else None
    )
    worksheet = build_worksheet(accounts, request.next_id)

    if request.action:
        action = request.action
        try:
            apply_action(
                worksheet,
                action.type,
                row_id=action.id,
                field=action.field,
                value=action.value,
                name=action.name,
            )
        except AccountRowNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except WorksheetActionError as e:
            raise HTTPException(status_code=400, detail=str(e))

    return WorksheetResponse(**worksheet_to_dict(worksheet))
