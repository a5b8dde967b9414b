"""
Health 서비스

- DB: 연결(SELECT 1) + 테이블별 조회 가능 여부
- API: /api/financial-data 응답 여부

모든 항목이 정상이면 ok, 하나라도 실패하면 degraded.
"""

import logging
from pathlib import Path
from typing import Any

import httpx

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.constants import Defaults
from core.storage.balance_store import BalanceStore
from core.storage.client_store import ClientStore
from core.utils.timezone import now_utc

logger = logging.getLogger(__name__)

FINANCIAL_DATA_PATH = "/api/financial-data"


class HealthService:
    """Health 서비스

    Args:
        db_path: DB 파일 경로
        app: 내부 호출용 ASGI 앱 (financial_data_url이 없을 때 사용)
        financial_data_url: 외부에서 확인할 financial-data URL
        timeout: API 확인 타임아웃 (초)
    """

    def __init__(
        self,
        db_path: Path | str,
        app: Any = None,
        financial_data_url: str | None = None,
        timeout: float = Defaults.HEALTH_PROBE_TIMEOUT_SEC,
    ):
        self.db_path = db_path
        self.app = app
        self.financial_data_url = financial_data_url
        self.timeout = timeout

    async def check_database(self) -> tuple[bool, str]:
        """DB 연결 및 테이블 확인

        Returns:
            (정상 여부, 상태 문자열) 예: "connected (clientes: ok) (balances: ok)"
        """
        try:
            async with SQLiteAdapter(self.db_path) as db:
                await db.ping()
                status = "connected"
                healthy = True

                counters = {
                    "clientes": ClientStore(db).count,
                    "balances": BalanceStore(db).count,
                }
                for table, count in counters.items():
                    try:
                        await count()
                        status += f" ({table}: ok)"
                    except Exception as e:
                        logger.error(f"Health check failed for table {table}: {e}")
                        status += f" ({table}: error)"
                        healthy = False

                return healthy, status
        except Exception as e:
            logger.error(f"Health check database error: {e}")
            return False, f"error: {e}"

    async def check_financial_data(self) -> tuple[bool, str]:
        """financial-data 엔드포인트 확인"""
        try:
            if self.financial_data_url:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(self.financial_data_url)
            elif self.app is not None:
                transport = httpx.ASGITransport(app=self.app)
                async with httpx.AsyncClient(
                    transport=transport,
                    base_url="http://health.local",
                    timeout=self.timeout,
                ) as client:
                    response = await client.get(FINANCIAL_DATA_PATH)
            else:
                return False, "financial-data: not configured"
        except httpx.HTTPError as e:
            logger.error(f"Health check financial-data error: {e}")
            return False, f"error: {e}"

        if response.status_code == 200:
            return True, "financial-data: ok"

        logger.error(f"Health check financial-data status: {response.status_code}")
        return False, "financial-data: error"

    async def check(self, version: str = Defaults.APP_VERSION) -> dict[str, Any]:
        """전체 헬스 체크"""
        db_ok, db_status = await self.check_database()
        api_ok, api_status = await self.check_financial_data()

        return {
            "status": "ok" if db_ok and api_ok else "degraded",
            "timestamp": now_utc().isoformat(),
            "version": version,
            "services": {
                "database": db_status,
                "apis": api_status,
            },
        }
