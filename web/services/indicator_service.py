"""
경제 지표 서비스

UF / UTM / Dólar 스냅샷 제공.

전략:
- static: 고정 상수와 비교 시점(전일, 전월)으로 변동률 계산
- remote: mindicador.cl 조회, 실패/타임아웃 시 static 값으로 fallback

어떤 경우에도 예외를 호출자에게 전달하지 않으며 응답 형태는 동일하다.
"""

import asyncio
import logging
from datetime import datetime
from typing import Any, Callable

from adapters.mindicador.models import IndicatorSeries
from adapters.mindicador.rest_client import MindicadorClient
from core.constants import Defaults, FallbackIndicators, IndicatorEndpoints
from core.types import IndicatorStrategy
from core.utils.numbers import percent_change
from core.utils.timezone import format_accounting_date, format_clock, now_utc

logger = logging.getLogger(__name__)

# 약 1개월 전 비교 기준 (일)
MONTHLY_LOOKBACK_DAYS = 30


def _indicator(
    value: float,
    variation: float | None = None,
    monthly_variation: float | None = None,
) -> dict[str, Any]:
    return {
        "value": value,
        "variation": variation,
        "monthly_variation": monthly_variation,
    }


def build_static_snapshot(
    now: datetime | None = None,
    source: str = IndicatorStrategy.STATIC.value,
) -> dict[str, Any]:
    """고정 상수 기반 스냅샷

    Args:
        now: 기준 시각 (None이면 현재 UTC)
        source: 응답의 source 표시 (static 또는 fallback)
    """
    now = now or now_utc()

    return {
        "uf": _indicator(
            FallbackIndicators.UF_CURRENT,
            percent_change(FallbackIndicators.UF_CURRENT, FallbackIndicators.UF_YESTERDAY),
            percent_change(FallbackIndicators.UF_CURRENT, FallbackIndicators.UF_LAST_MONTH),
        ),
        "utm": _indicator(FallbackIndicators.UTM_CURRENT),
        "dollar": _indicator(
            FallbackIndicators.DOLLAR_CURRENT,
            percent_change(FallbackIndicators.DOLLAR_CURRENT, FallbackIndicators.DOLLAR_YESTERDAY),
        ),
        "accounting_date": format_accounting_date(now),
        "current_time": format_clock(now),
        "source": source,
    }


class IndicatorService:
    """경제 지표 서비스

    Args:
        strategy: 조회 전략 (static/remote)
        base_url: mindicador.cl API URL
        timeout: 전체 조회 타임아웃 (초)
        client_factory: MindicadorClient 생성 함수 (테스트용)

    사용 예시:
    ```python
    service = IndicatorService(IndicatorStrategy.REMOTE)
    snapshot = await service.get_snapshot()
    snapshot["uf"]["value"]
    ```
    """

    def __init__(
        self,
        strategy: IndicatorStrategy = IndicatorStrategy.STATIC,
        base_url: str = IndicatorEndpoints.MINDICADOR_URL,
        timeout: float = Defaults.INDICATOR_TIMEOUT_SEC,
        client_factory: Callable[[], MindicadorClient] | None = None,
    ):
        self.strategy = IndicatorStrategy(strategy)
        self.base_url = base_url
        self.timeout = timeout
        self._client_factory = client_factory or (
            lambda: MindicadorClient(base_url=self.base_url, timeout=self.timeout)
        )

    async def get_snapshot(self) -> dict[str, Any]:
        """지표 스냅샷 조회

        Returns:
            uf/utm/dollar + accounting_date/current_time/source
        """
        if self.strategy == IndicatorStrategy.STATIC:
            return build_static_snapshot()

        try:
            return await asyncio.wait_for(self._fetch_remote(), timeout=self.timeout)
        except Exception as e:
            logger.warning(f"Indicator provider failed, using fallback: {e!r}")
            return build_static_snapshot(source="fallback")

    async def _fetch_remote(self) -> dict[str, Any]:
        """mindicador.cl 조회 (예외는 호출자가 처리)"""
        client = self._client_factory()
        try:
            uf, utm, dollar = await asyncio.gather(
                client.get_series("uf"),
                client.get_series("utm"),
                client.get_series("dolar"),
            )
        finally:
            await client.close()

        def _daily(series: IndicatorSeries) -> float | None:
            previous = series.previous
            if previous is None:
                return None
            return percent_change(series.current.value, previous.value)

        def _monthly(series: IndicatorSeries) -> float | None:
            month_ago = series.value_before(MONTHLY_LOOKBACK_DAYS)
            if month_ago is None:
                return None
            return percent_change(series.current.value, month_ago.value)

        # UTM은 월간 지표이므로 직전 값이 곧 전월 값
        utm_previous = utm.previous
        utm_monthly = (
            percent_change(utm.current.value, utm_previous.value)
            if utm_previous is not None
            else None
        )

        now = now_utc()
        snapshot = {
            "uf": _indicator(uf.current.value, _daily(uf), _monthly(uf)),
            "utm": _indicator(utm.current.value, None, utm_monthly),
            "dollar": _indicator(dollar.current.value, _daily(dollar), _monthly(dollar)),
            "accounting_date": format_accounting_date(now),
            "current_time": format_clock(now),
            "source": IndicatorStrategy.REMOTE.value,
        }

        logger.debug(
            "Indicators fetched",
            extra={"uf": uf.current.value, "dollar": dollar.current.value},
        )

        return snapshot
