"""
Worksheet 서비스

Balance General 편집 화면의 요청 단위 상태 처리.
요청마다 AccountRowStore를 새로 만들고 동작 1개 적용 후 재계산.
"""

import logging
from typing import Any, Iterable, Mapping

from core.constants import Defaults
from core.ledger.worksheet import AccountRowStore
from core.types import AmountField, WorksheetAction

logger = logging.getLogger(__name__)


class WorksheetActionError(ValueError):
    """동작 파라미터 오류 (id/field 누락 등)"""

    pass


def build_worksheet(
    accounts: Iterable[Mapping[str, Any]] | None,
    next_id: int | None = None,
) -> AccountRowStore:
    """입력 행으로 워크시트 생성

    accounts가 None이거나 비어 있으면 기본 계정과목 사용.
    next_id는 입력 행의 최대 ID 이후로 보정된다.
    """
    worksheet = AccountRowStore(next_id=next_id or Defaults.FIRST_NEW_ACCOUNT_ID)
    if accounts is not None:
        worksheet.load_snapshot(accounts)
    return worksheet


def apply_action(
    worksheet: AccountRowStore,
    action_type: WorksheetAction | str,
    row_id: int | None = None,
    field: AmountField | str | None = None,
    value: Any = None,
    name: str | None = None,
) -> None:
    """워크시트에 동작 1개 적용

    Raises:
        WorksheetActionError: 필요한 파라미터가 없는 경우
        AccountRowNotFoundError: 존재하지 않는 행 ID
    """
    action = WorksheetAction(action_type)

    if action == WorksheetAction.ADD:
        worksheet.add_row(name)
        return

    if row_id is None:
        raise WorksheetActionError(f"'{action.value}' requires an account id")

    if action == WorksheetAction.DELETE:
        worksheet.delete_row(row_id)
    elif action == WorksheetAction.RENAME:
        worksheet.rename(row_id, name or "")
    elif action == WorksheetAction.SET:
        if field is None:
            raise WorksheetActionError("'set' requires a field")
        worksheet.set_amount(row_id, field, value)


def worksheet_to_dict(worksheet: AccountRowStore) -> dict[str, Any]:
    """워크시트 → 응답용 dict (계산 결과 포함)"""
    balance = worksheet.calculate()
    return {
        "accounts": [row.to_dict() for row in balance.rows],
        "totals": balance.totals.to_dict(),
        "utility": balance.utility,
        "next_id": worksheet.next_id,
    }
