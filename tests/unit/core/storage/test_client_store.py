"""
ClientStore 테스트

clientes 등록, 중복 RUT, 목록 조회 테이블 테스트
"""

import pytest

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.storage.balance_store import BalanceStore
from core.storage.client_store import ClientStore, DuplicateClientError
from core.types import ClientListSource

RUT = "12.345.678-9"


@pytest.fixture
def store(db: SQLiteAdapter) -> ClientStore:
    """clientes 기준 ClientStore"""
    return ClientStore(db, ClientListSource.CLIENTES)


class TestClientStoreRegister:
    """register() 테스트"""

    @pytest.mark.asyncio
    async def test_register(self, store: ClientStore) -> None:
        client = await store.register(
            f"  {RUT} ", " Juan Pérez ", "Av. Providencia 1234", "+56 9 1234 5678"
        )

        assert client.id > 0
        assert client.rut == RUT
        assert client.name == "Juan Pérez"
        assert client.address == "Av. Providencia 1234"
        assert client.phone == "+56 9 1234 5678"
        assert client.created_at

    @pytest.mark.asyncio
    async def test_blank_optional_fields_are_null(self, store: ClientStore) -> None:
        client = await store.register(RUT, "Juan", "  ", None)

        assert client.address is None
        assert client.phone is None

    @pytest.mark.asyncio
    async def test_duplicate_rut(self, store: ClientStore) -> None:
        """중복 RUT는 DuplicateClientError, 기존 레코드 유지"""
        original = await store.register(RUT, "Original", "Dirección 1")

        with pytest.raises(DuplicateClientError) as exc_info:
            await store.register(RUT, "Otro Nombre", "Dirección 2")

        assert exc_info.value.rut == RUT
        assert await store.get(RUT) == original
        assert await store.count() == 1

    @pytest.mark.asyncio
    async def test_exists(self, store: ClientStore) -> None:
        assert await store.exists(RUT) is False

        await store.register(RUT, "Juan")

        assert await store.exists(RUT) is True
        assert await store.exists(f" {RUT} ") is True


class TestClientStoreList:
    """목록 조회 테스트"""

    @pytest.mark.asyncio
    async def test_list_from_clientes(self, store: ClientStore) -> None:
        await store.register("1-9", "Primero")
        await store.register("2-7", "Segundo")

        clients = await store.list_clients()

        assert [c.rut for c in clients] == ["2-7", "1-9"]

    @pytest.mark.asyncio
    async def test_default_source_reads_clients_table(self, db: SQLiteAdapter) -> None:
        """기본 목록 테이블은 clients (등록 테이블과 다름)"""
        store = ClientStore(db)
        await store.register(RUT, "Registrado")

        assert store.list_source == ClientListSource.CLIENTS
        assert await store.list_clients() == []

        await db.execute(
            "INSERT INTO clients (rut, name, created_at) VALUES (?, ?, ?)",
            ("9-9", "Legacy", "2026-01-01T00:00:00+00:00"),
        )
        await db.commit()

        clients = await store.list_clients()
        assert [c.name for c in clients] == ["Legacy"]

    @pytest.mark.asyncio
    async def test_list_with_latest_balance(self, store: ClientStore, db: SQLiteAdapter) -> None:
        await store.register(RUT, "Con Balance")
        await store.register("1-9", "Sin Balance")
        balances = BalanceStore(db)
        await balances.save(RUT, "Con Balance", [], {"debit": 1})
        newest = await balances.save(RUT, "Con Balance", [], {"debit": 2})

        summaries = {s.client.rut: s for s in await store.list_with_latest_balance()}

        assert summaries[RUT].latest_balance.id == newest.id
        assert summaries["1-9"].latest_balance is None
