"""
스토리지 모듈

Balance Store, Client Store 등 데이터 저장소 인터페이스 제공
"""

from core.storage.balance_store import BalanceRecord, BalanceStore
from core.storage.client_store import (
    ClientRecord,
    ClientStore,
    ClientSummary,
    DuplicateClientError,
)

__all__ = [
    "BalanceRecord",
    "BalanceStore",
    "ClientRecord",
    "ClientStore",
    "ClientSummary",
    "DuplicateClientError",
]
