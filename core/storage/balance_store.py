"""
BalanceStore - Balance General 저장소

balances 테이블에 시산표 스냅샷을 append-only로 저장/조회.
저장된 레코드는 수정/삭제하지 않는다.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.types import CalculatedRow, TrialBalanceTotals
from core.utils.timezone import now_utc

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BalanceRecord:
    """저장된 Balance General

    Attributes:
        id: 레코드 ID
        client_rut: 소유자 RUT
        client_name: 고객명 (선택)
        accounts: 저장 시점의 계정 행 스냅샷
        totals: 저장 시점의 합계
        created_at: 생성 시각 (UTC ISO 8601)
    """

    id: int
    client_rut: str
    client_name: str | None
    accounts: list[dict[str, Any]] = field(default_factory=list)
    totals: dict[str, Any] = field(default_factory=dict)
    created_at: str = ""

    @classmethod
    def from_row(cls, row: tuple[Any, ...]) -> "BalanceRecord":
        """DB 행에서 생성

        컬럼 순서: id, client_rut, client_name, accounts_json, totals_json, created_at
        """
        return cls(
            id=row[0],
            client_rut=row[1],
            client_name=row[2],
            accounts=json.loads(row[3]) if row[3] else [],
            totals=json.loads(row[4]) if row[4] else {},
            created_at=row[5],
        )


def _serialize_accounts(
    accounts: Iterable[CalculatedRow | Mapping[str, Any]],
) -> list[dict[str, Any]]:
    return [
        account.to_dict() if isinstance(account, CalculatedRow) else dict(account)
        for account in accounts
    ]


def _serialize_totals(totals: TrialBalanceTotals | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(totals, TrialBalanceTotals):
        return totals.to_dict()
    return dict(totals)


_SELECT_COLUMNS = "id, client_rut, client_name, accounts_json, totals_json, created_at"


class BalanceStore:
    """Balance General 저장소

    Args:
        db: SQLiteAdapter 인스턴스

    사용 예시:
    ```python
    async with SQLiteAdapter(db_path) as db:
        store = BalanceStore(db)
        balance = AccountRowStore().calculate()
        record = await store.save("12.345.678-9", "Cliente", balance.rows, balance.totals)
        latest = await store.latest("12.345.678-9")
    ```
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    async def save(
        self,
        client_rut: str,
        client_name: str | None,
        accounts: Iterable[CalculatedRow | Mapping[str, Any]],
        totals: TrialBalanceTotals | Mapping[str, Any],
    ) -> BalanceRecord:
        """Balance 스냅샷 저장 (append)

        DB 오류는 그대로 전파한다 (재시도 없음).

        Returns:
            저장된 BalanceRecord
        """
        created_at = now_utc().isoformat()
        accounts_json = json.dumps(_serialize_accounts(accounts), ensure_ascii=False)
        totals_json = json.dumps(_serialize_totals(totals), ensure_ascii=False)

        async with self.db.transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO balances (
                    client_rut, client_name, accounts_json, totals_json, created_at
                ) VALUES (?, ?, ?, ?, ?)
                """,
                (client_rut, client_name, accounts_json, totals_json, created_at),
            )
            balance_id = cursor.lastrowid

        logger.info(
            f"Balance saved: {client_rut}",
            extra={"balance_id": balance_id},
        )

        record = await self.get(balance_id)
        assert record is not None
        return record

    async def get(self, balance_id: int) -> BalanceRecord | None:
        """ID로 조회"""
        row = await self.db.fetchone(
            f"SELECT {_SELECT_COLUMNS} FROM balances WHERE id = ?",
            (balance_id,),
        )
        return BalanceRecord.from_row(row) if row else None

    async def list_records(self, client_rut: str | None = None) -> list[BalanceRecord]:
        """Balance 목록 조회 (최신순)

        Args:
            client_rut: 소유자 RUT (None이면 전체)
        """
        if client_rut:
            rows = await self.db.fetchall(
                f"""
                SELECT {_SELECT_COLUMNS}
                FROM balances
                WHERE client_rut = ?
                ORDER BY created_at DESC, id DESC
                """,
                (client_rut,),
            )
        else:
            rows = await self.db.fetchall(
                f"""
                SELECT {_SELECT_COLUMNS}
                FROM balances
                ORDER BY created_at DESC, id DESC
                """
            )

        return [BalanceRecord.from_row(row) for row in rows]

    async def latest(self, client_rut: str) -> BalanceRecord | None:
        """가장 최근 Balance 조회 (불러오기용)"""
        row = await self.db.fetchone(
            f"""
            SELECT {_SELECT_COLUMNS}
            FROM balances
            WHERE client_rut = ?
            ORDER BY created_at DESC, id DESC
            LIMIT 1
            """,
            (client_rut,),
        )
        return BalanceRecord.from_row(row) if row else None

    async def count(self) -> int:
        """전체 Balance 수"""
        return await self.db.count_rows("balances")
