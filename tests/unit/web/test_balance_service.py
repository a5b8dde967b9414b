"""
Balance / Client 서비스 테스트
"""

from unittest.mock import MagicMock

import pytest

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.types import ClientListSource
from web.services.balance_service import (
    BalanceService,
    BalanceValidationError,
    ClientNotFoundError,
)
from web.services.client_service import ClientService, ClientValidationError
from web.services.worksheet_service import build_worksheet

RUT = "12.345.678-9"


class TestBalanceService:
    """BalanceService 테스트"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rut", [None, "", "   "])
    async def test_blank_rut_rejected_before_store(self, rut) -> None:
        """RUT가 비어 있으면 DB 접근 없이 거부"""
        db = MagicMock(spec=SQLiteAdapter)
        service = BalanceService(db)

        with pytest.raises(BalanceValidationError):
            await service.save_balance(rut, "X", [])

        assert db.mock_calls == []

    @pytest.mark.asyncio
    async def test_unregistered_client(self, db: SQLiteAdapter) -> None:
        with pytest.raises(ClientNotFoundError) as exc_info:
            await BalanceService(db).save_balance(RUT, "X", [])

        assert exc_info.value.rut == RUT

    @pytest.mark.asyncio
    async def test_save_and_restore_latest(self, db: SQLiteAdapter) -> None:
        await ClientService(db).register_client(RUT, "Juan")
        service = BalanceService(db)

        saved = await service.save_balance(
            f" {RUT} ",
            "",
            [
                {"id": 1, "name": "CAJA", "debit": "100"},
                {"id": 1000, "name": "Nueva Cuenta 1000", "credit": 40},
            ],
        )
        latest = await service.get_latest(RUT)
        worksheet = build_worksheet(latest["accounts"])

        assert saved["client_rut"] == RUT
        assert saved["client_name"] == f"Cliente {RUT}"
        assert saved["totals"]["debtor"] == 100
        assert [row.id for row in worksheet.rows] == [1, 1000]
        assert worksheet.calculate().totals.creditor == 40

    @pytest.mark.asyncio
    async def test_restored_worksheet_adds_unique_id(self, db: SQLiteAdapter) -> None:
        """복원 후 추가한 행은 저장된 ID와 겹치지 않음"""
        await ClientService(db).register_client(RUT, "Juan")
        service = BalanceService(db)
        await service.save_balance(
            RUT,
            "Juan",
            [{"id": 1, "name": "CAJA"}, {"id": 1000, "name": "OTRA"}],
        )

        worksheet = build_worksheet((await service.get_latest(RUT))["accounts"])
        worksheet.add_row()

        assert [row.id for row in worksheet.rows] == [1, 1000, 1001]

    @pytest.mark.asyncio
    async def test_get_latest_none(self, db: SQLiteAdapter) -> None:
        assert await BalanceService(db).get_latest(RUT) is None


class TestClientService:
    """ClientService 테스트"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rut,name", [("", "Juan"), (RUT, None), ("  ", "  ")])
    async def test_required_fields(self, db: SQLiteAdapter, rut, name) -> None:
        with pytest.raises(ClientValidationError):
            await ClientService(db).register_client(rut, name)

    @pytest.mark.asyncio
    async def test_list_clients(self, db: SQLiteAdapter) -> None:
        service = ClientService(db, ClientListSource.CLIENTES)
        await service.register_client(RUT, "Juan", phone="+56 9 1234 5678")

        clients = await service.list_clients()

        assert len(clients) == 1
        assert clients[0]["rut"] == RUT
        assert clients[0]["phone"] == "+56 9 1234 5678"
        assert clients[0]["balances"] == []
