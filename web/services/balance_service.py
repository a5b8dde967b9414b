"""
Balance 서비스

Balance General 저장/조회.
저장 전 RUT 검증 및 고객 등록 여부 확인, 시산표 서버 재계산.
"""

import logging
from typing import Any, Iterable, Mapping

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.calculator import calculate_trial_balance
from core.storage.balance_store import BalanceRecord, BalanceStore
from core.storage.client_store import ClientStore

logger = logging.getLogger(__name__)


class BalanceValidationError(ValueError):
    """Balance 저장 요청 검증 실패"""

    pass


class ClientNotFoundError(LookupError):
    """등록되지 않은 RUT"""

    def __init__(self, rut: str):
        super().__init__(f"Client not found: {rut}")
        self.rut = rut


def record_to_dict(record: BalanceRecord) -> dict[str, Any]:
    """BalanceRecord → 응답용 dict"""
    return {
        "id": record.id,
        "client_rut": record.client_rut,
        "client_name": record.client_name,
        "accounts": record.accounts,
        "totals": record.totals,
        "created_at": record.created_at,
    }


class BalanceService:
    """Balance 서비스

    Args:
        db: SQLite 어댑터
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db
        self.store = BalanceStore(db)

    async def save_balance(
        self,
        client_rut: str | None,
        client_name: str | None,
        accounts: Iterable[Mapping[str, Any]],
    ) -> dict[str, Any]:
        """Balance 저장

        계정 행은 서버에서 다시 계산하여 계산 필드와 합계를 함께 저장.

        Raises:
            BalanceValidationError: RUT가 비어 있는 경우 (DB 접근 전)
            ClientNotFoundError: 등록되지 않은 RUT인 경우
        """
        rut = (client_rut or "").strip()
        if not rut:
            raise BalanceValidationError("clientRut is required")

        if not await ClientStore(self.db).exists(rut):
            raise ClientNotFoundError(rut)

        balance = calculate_trial_balance(accounts)
        name = (client_name or "").strip() or f"Cliente {rut}"

        record = await self.store.save(rut, name, balance.rows, balance.totals)
        return record_to_dict(record)

    async def list_balances(self, client_rut: str | None = None) -> list[dict[str, Any]]:
        """Balance 목록 (최신순)"""
        rut = (client_rut or "").strip() or None
        records = await self.store.list_records(rut)
        return [record_to_dict(record) for record in records]

    async def get_latest(self, client_rut: str) -> dict[str, Any] | None:
        """가장 최근 Balance 조회"""
        record = await self.store.latest(client_rut.strip())
        return record_to_dict(record) if record else None
