"""
ClientStore - 고객 등록 저장소

고객 등록은 clientes 테이블에 기록.
목록 조회는 기존 동작대로 clients 테이블을 읽는다 (설정으로 변경 가능).

주의: 두 테이블은 서로 다른 엔티티이므로 기본 설정에서는
등록한 고객이 목록에 나타나지 않는다.
"""

import logging
import sqlite3
from dataclasses import dataclass
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.storage.balance_store import BalanceRecord, BalanceStore
from core.types import ClientListSource
from core.utils.timezone import now_utc

logger = logging.getLogger(__name__)


class DuplicateClientError(Exception):
    """이미 등록된 RUT"""

    def __init__(self, rut: str):
        super().__init__(f"Client already registered: {rut}")
        self.rut = rut


@dataclass(frozen=True)
class ClientRecord:
    """고객 레코드"""

    id: int
    rut: str
    name: str
    address: str | None
    phone: str | None
    created_at: str

    @classmethod
    def from_row(cls, row: tuple[Any, ...]) -> "ClientRecord":
        """DB 행에서 생성

        컬럼 순서: id, rut, name, address, phone, created_at
        """
        return cls(
            id=row[0],
            rut=row[1],
            name=row[2],
            address=row[3],
            phone=row[4],
            created_at=row[5],
        )


@dataclass(frozen=True)
class ClientSummary:
    """고객 + 최근 Balance (최대 1건)"""

    client: ClientRecord
    latest_balance: BalanceRecord | None = None


# 테이블별 컬럼 매핑 (id, rut, name, address, phone, created_at 순서)
_SELECT_BY_SOURCE: dict[ClientListSource, str] = {
    ClientListSource.CLIENTES: (
        "SELECT id, rut, nombre, direccion, telefono, created_at FROM clientes"
    ),
    ClientListSource.CLIENTS: (
        "SELECT id, rut, name, address, phone, created_at FROM clients"
    ),
}


def _clean_optional(value: str | None) -> str | None:
    """앞뒤 공백 제거 (빈 문자열은 None)"""
    if value is None:
        return None
    value = value.strip()
    return value or None


class ClientStore:
    """고객 저장소

    Args:
        db: SQLiteAdapter 인스턴스
        list_source: 목록 조회 테이블 (기본: clients)

    사용 예시:
    ```python
    async with SQLiteAdapter(db_path) as db:
        store = ClientStore(db)
        client = await store.register("12.345.678-9", "Comercial Sur")
        summaries = await store.list_with_latest_balance()
    ```
    """

    def __init__(
        self,
        db: SQLiteAdapter,
        list_source: ClientListSource = ClientListSource.CLIENTS,
    ):
        self.db = db
        self.list_source = ClientListSource(list_source)

    async def register(
        self,
        rut: str,
        name: str,
        address: str | None = None,
        phone: str | None = None,
    ) -> ClientRecord:
        """고객 등록

        Raises:
            DuplicateClientError: RUT가 이미 등록된 경우
            sqlite3.Error: 그 외 DB 오류 (그대로 전파)
        """
        rut = rut.strip()
        name = name.strip()
        created_at = now_utc().isoformat()

        try:
            async with self.db.transaction() as conn:
                cursor = await conn.execute(
                    """
                    INSERT INTO clientes (rut, nombre, direccion, telefono, created_at)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (rut, name, _clean_optional(address), _clean_optional(phone), created_at),
                )
                client_id = cursor.lastrowid
        except sqlite3.IntegrityError as e:
            if "UNIQUE" in str(e).upper():
                logger.info(f"Duplicate client rut: {rut}")
                raise DuplicateClientError(rut) from e
            raise

        logger.info(f"Client registered: {rut}", extra={"client_id": client_id})

        client = await self.get(rut)
        assert client is not None
        return client

    async def get(self, rut: str) -> ClientRecord | None:
        """등록된 고객 조회 (clientes)"""
        row = await self.db.fetchone(
            f"{_SELECT_BY_SOURCE[ClientListSource.CLIENTES]} WHERE rut = ?",
            (rut.strip(),),
        )
        return ClientRecord.from_row(row) if row else None

    async def exists(self, rut: str) -> bool:
        """등록 여부 확인 (clientes)"""
        return await self.get(rut) is not None

    async def list_clients(self) -> list[ClientRecord]:
        """고객 목록 (최근 등록순, list_source 테이블 기준)"""
        rows = await self.db.fetchall(
            f"{_SELECT_BY_SOURCE[self.list_source]} ORDER BY created_at DESC, id DESC"
        )
        return [ClientRecord.from_row(row) for row in rows]

    async def list_with_latest_balance(self) -> list[ClientSummary]:
        """고객 목록 + 고객별 최근 Balance 1건"""
        balance_store = BalanceStore(self.db)

        summaries = []
        for client in await self.list_clients():
            latest = await balance_store.latest(client.rut)
            summaries.append(ClientSummary(client=client, latest_balance=latest))

        return summaries

    async def count(self) -> int:
        """등록된 고객 수 (clientes)"""
        return await self.db.count_rows("clientes")
