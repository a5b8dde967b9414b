"""
Balance General (시산표) 계산 모듈

계정 행 입력 → deudor/acreedor/activo/pasivo 계산 → 합계

사용 예시:
```python
from core.ledger import AccountRowStore

store = AccountRowStore()
store.set_amount(1, "debit", 100)
balance = store.calculate()
balance.totals.debtor  # 100.0
balance.utility        # 이익 - 손실
```
"""

from core.ledger.calculator import calculate_row, calculate_trial_balance, sum_totals
from core.ledger.types import AccountRow, CalculatedRow, TrialBalance, TrialBalanceTotals
from core.ledger.worksheet import (
    AccountRowNotFoundError,
    AccountRowStore,
    default_rows,
    row_from_mapping,
)

__all__ = [
    "AccountRow",
    "CalculatedRow",
    "TrialBalance",
    "TrialBalanceTotals",
    "calculate_row",
    "calculate_trial_balance",
    "sum_totals",
    "AccountRowNotFoundError",
    "AccountRowStore",
    "default_rows",
    "row_from_mapping",
]
