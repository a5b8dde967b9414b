"""
어댑터 레이어

외부 서비스(DB, 경제 지표 API)와의 연동을 담당.
"""

from adapters.db import SQLiteAdapter, init_schema
from adapters.mindicador import MindicadorApiError, MindicadorClient

__all__ = [
    # DB
    "SQLiteAdapter",
    "init_schema",
    # Indicators
    "MindicadorApiError",
    "MindicadorClient",
]
