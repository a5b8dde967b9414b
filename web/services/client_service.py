"""
Client 서비스

고객 등록 및 목록 조회
"""

import logging
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.storage.client_store import ClientRecord, ClientStore
from core.types import ClientListSource
from web.services.balance_service import record_to_dict

logger = logging.getLogger(__name__)


class ClientValidationError(ValueError):
    """고객 등록 요청 검증 실패"""

    pass


def client_to_dict(client: ClientRecord) -> dict[str, Any]:
    """ClientRecord → 응답용 dict"""
    return {
        "id": client.id,
        "rut": client.rut,
        "name": client.name,
        "address": client.address,
        "phone": client.phone,
        "created_at": client.created_at,
    }


class ClientService:
    """Client 서비스

    Args:
        db: SQLite 어댑터
        list_source: 목록 조회 테이블
    """

    def __init__(
        self,
        db: SQLiteAdapter,
        list_source: ClientListSource = ClientListSource.CLIENTS,
    ):
        self.db = db
        self.store = ClientStore(db, list_source)

    async def register_client(
        self,
        rut: str | None,
        name: str | None,
        address: str | None = None,
        phone: str | None = None,
    ) -> dict[str, Any]:
        """고객 등록

        Raises:
            ClientValidationError: RUT 또는 이름이 비어 있는 경우
            DuplicateClientError: 이미 등록된 RUT
        """
        if not (rut or "").strip() or not (name or "").strip():
            raise ClientValidationError("RUT y nombre son obligatorios")

        client = await self.store.register(rut, name, address, phone)
        return client_to_dict(client)

    async def list_clients(self) -> list[dict[str, Any]]:
        """고객 목록 + 최근 Balance (최대 1건)"""
        summaries = await self.store.list_with_latest_balance()

        return [
            {
                **client_to_dict(summary.client),
                "balances": (
                    [record_to_dict(summary.latest_balance)]
                    if summary.latest_balance
                    else []
                ),
            }
            for summary in summaries
        ]
