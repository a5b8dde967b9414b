"""
시산표 계산기

계정 행 목록에서 deudor/acreedor/activo/pasivo 및 합계를 계산.
순수 함수이며 부수 효과가 없다. 화면 갱신마다 다시 계산한다.
"""

from typing import Any, Iterable, Mapping

from core.ledger.types import AccountRow, CalculatedRow, TrialBalance, TrialBalanceTotals
from core.utils.numbers import parse_or_zero


def calculate_row(row: AccountRow | Mapping[str, Any]) -> CalculatedRow:
    """계정 행 하나를 계산

    - debtor = max(0, debit - credit)
    - creditor = max(0, credit - debit)
    - asset = debtor, liability = creditor
    - debit, credit가 모두 0보다 크면 profit/loss는 0으로 강제

    Args:
        row: AccountRow 또는 같은 키를 가진 dict

    Returns:
        CalculatedRow
    """
    if isinstance(row, AccountRow):
        data = row.to_dict()
    else:
        data = dict(row)

    debit = parse_or_zero(data.get("debit"))
    credit = parse_or_zero(data.get("credit"))
    profit = parse_or_zero(data.get("profit"))
    loss = parse_or_zero(data.get("loss"))

    debtor = max(0.0, debit - credit)
    creditor = max(0.0, credit - debit)

    # 차변/대변이 동시에 있으면 손익 없음
    if debit > 0 and credit > 0:
        profit = 0.0
        loss = 0.0

    return CalculatedRow(
        id=int(parse_or_zero(data.get("id"))),
        name=str(data.get("name") or ""),
        debit=debit,
        credit=credit,
        debtor=debtor,
        creditor=creditor,
        asset=debtor,
        liability=creditor,
        profit=profit,
        loss=loss,
    )


def sum_totals(rows: Iterable[CalculatedRow]) -> TrialBalanceTotals:
    """계산된 행의 필드별 합계"""
    totals = {
        "debit": 0.0,
        "credit": 0.0,
        "debtor": 0.0,
        "creditor": 0.0,
        "asset": 0.0,
        "liability": 0.0,
        "profit": 0.0,
        "loss": 0.0,
    }

    for row in rows:
        for key in totals:
            totals[key] += getattr(row, key)

    return TrialBalanceTotals(**totals)


def calculate_trial_balance(
    rows: Iterable[AccountRow | Mapping[str, Any]],
) -> TrialBalance:
    """시산표 계산

    Args:
        rows: 계정 행 목록 (순서 유지)

    Returns:
        TrialBalance (계산된 행 + 합계)

    사용 예시:
    ```python
    balance = calculate_trial_balance([
        AccountRow(id=1, name="CAJA", debit=100),
        AccountRow(id=2, name="CAPITAL", credit=60),
    ])
    balance.totals.debtor   # 100.0
    balance.totals.creditor # 60.0
    balance.utility         # 0.0
    ```
    """
    calculated = [calculate_row(row) for row in rows]
    return TrialBalance(rows=calculated, totals=sum_totals(calculated))
