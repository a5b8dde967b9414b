"""
Balance General 워크시트 (계정 행 저장소)

요청/세션 단위 상태 컨테이너.
계정 행 추가/삭제/수정 후 calculate()로 시산표 계산.

불변 조건: 행은 최소 1개 유지 (마지막 행 삭제는 무시)
"""

import logging
from typing import Any, Iterable, Mapping

from core.constants import DEFAULT_ACCOUNT_NAMES, Defaults
from core.ledger.calculator import calculate_trial_balance
from core.ledger.types import AccountRow, TrialBalance
from core.types import AmountField
from core.utils.numbers import parse_or_zero

logger = logging.getLogger(__name__)


class AccountRowNotFoundError(Exception):
    """존재하지 않는 계정 행 ID"""

    def __init__(self, row_id: int):
        super().__init__(f"Account row not found: {row_id}")
        self.row_id = row_id


def default_rows() -> list[AccountRow]:
    """기본 계정과목 14개 (ID 1~14, 금액 0)"""
    return [
        AccountRow(id=index, name=name)
        for index, name in enumerate(DEFAULT_ACCOUNT_NAMES, start=1)
    ]


def row_from_mapping(data: Mapping[str, Any]) -> AccountRow:
    """dict(JSON)에서 AccountRow 생성

    저장된 스냅샷의 계산 필드(debtor 등)는 무시하고 입력 필드만 사용.
    """
    return AccountRow(
        id=int(parse_or_zero(data.get("id"))),
        name=str(data.get("name") or ""),
        debit=parse_or_zero(data.get("debit")),
        credit=parse_or_zero(data.get("credit")),
        profit=parse_or_zero(data.get("profit")),
        loss=parse_or_zero(data.get("loss")),
    )


class AccountRowStore:
    """계정 행 저장소

    Args:
        rows: 초기 행 (None이면 기본 계정과목)
        next_id: 다음 신규 행 ID (기본 1000)

    사용 예시:
    ```python
    store = AccountRowStore()
    row = store.add_row()
    store.set_amount(row.id, AmountField.DEBIT, "1500")
    balance = store.calculate()
    ```
    """

    def __init__(
        self,
        rows: Iterable[AccountRow] | None = None,
        next_id: int = Defaults.FIRST_NEW_ACCOUNT_ID,
    ):
        self._rows: list[AccountRow] = list(rows) if rows is not None else default_rows()
        if not self._rows:
            self._rows = default_rows()
        self.next_id = next_id
        self._skip_used_ids()

    @property
    def rows(self) -> list[AccountRow]:
        """현재 행 목록 (복사본)"""
        return list(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def get_row(self, row_id: int) -> AccountRow:
        """ID로 행 조회

        Raises:
            AccountRowNotFoundError: 해당 ID가 없는 경우
        """
        for row in self._rows:
            if row.id == row_id:
                return row
        raise AccountRowNotFoundError(row_id)

    def add_row(self, name: str | None = None) -> AccountRow:
        """신규 행 추가 (금액 0)

        Args:
            name: 계정명 (None이면 "Nueva Cuenta <id>")

        Returns:
            추가된 행
        """
        row_id = self.next_id
        row = AccountRow(id=row_id, name=name or f"Nueva Cuenta {row_id}")
        self._rows.append(row)
        self.next_id += 1
        return row

    def delete_row(self, row_id: int) -> bool:
        """행 삭제

        행이 1개만 남은 경우 아무것도 하지 않는다.

        Returns:
            삭제 여부
        """
        if len(self._rows) <= 1:
            logger.debug(f"Skip deleting last account row: {row_id}")
            return False

        row = self.get_row(row_id)
        self._rows.remove(row)
        return True

    def rename(self, row_id: int, name: str) -> AccountRow:
        """계정명 변경"""
        row = self.get_row(row_id)
        row.name = name
        return row

    def set_amount(
        self,
        row_id: int,
        field: AmountField | str,
        value: Any,
    ) -> AccountRow:
        """금액 필드 변경

        값은 parse_or_zero로 변환 (변환 불가 시 0).

        Raises:
            AccountRowNotFoundError: 해당 ID가 없는 경우
            ValueError: 금액 필드가 아닌 경우
        """
        amount_field = AmountField(field)
        row = self.get_row(row_id)
        setattr(row, amount_field.value, parse_or_zero(value))
        return row

    def load_snapshot(self, rows: Iterable[Mapping[str, Any]]) -> None:
        """저장된 Balance 스냅샷으로 행 교체

        빈 스냅샷이면 기존 행을 유지한다.
        next_id는 스냅샷의 최대 ID 이후로 이동한다.
        """
        loaded = [row_from_mapping(data) for data in rows]
        if not loaded:
            return
        self._rows = loaded
        self._skip_used_ids()

    def _skip_used_ids(self) -> None:
        """next_id를 현재 행 ID 이후로 이동 (신규 행 ID 중복 방지)"""
        max_id = max(row.id for row in self._rows)
        self.next_id = max(self.next_id, max_id + 1)

    def calculate(self) -> TrialBalance:
        """시산표 계산"""
        return calculate_trial_balance(self._rows)
