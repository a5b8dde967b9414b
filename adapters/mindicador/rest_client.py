"""
mindicador.cl REST API 클라이언트

칠레 경제 지표(UF, UTM, Dólar) 시계열 조회.
인증 없음. 타임아웃 초과 시 MindicadorApiError 발생.
"""

import logging
from typing import Any

import httpx

from adapters.mindicador.models import IndicatorSeries
from core.constants import Defaults, IndicatorEndpoints

logger = logging.getLogger(__name__)


class MindicadorApiError(Exception):
    """mindicador.cl API 에러"""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MindicadorClient:
    """mindicador.cl REST API 클라이언트

    Args:
        base_url: API 기본 URL
        timeout: HTTP 요청 타임아웃 (초)
        transport: httpx 전송 계층 (테스트용)

    사용 예시:
    ```python
    client = MindicadorClient()
    uf = await client.get_series("uf")
    await client.close()
    ```
    """

    def __init__(
        self,
        base_url: str = IndicatorEndpoints.MINDICADOR_URL,
        timeout: float = Defaults.INDICATOR_TIMEOUT_SEC,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _ensure_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 반환 (lazy init)"""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "MindicadorClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def _request(self, endpoint: str) -> Any:
        """GET 요청 실행

        Raises:
            MindicadorApiError: HTTP 에러, 타임아웃, JSON 파싱 실패
        """
        client = await self._ensure_client()
        url = f"{self.base_url}{endpoint}"

        try:
            response = await client.get(url)
        except httpx.TimeoutException as e:
            logger.warning(f"mindicador timeout: {endpoint}")
            raise MindicadorApiError(f"Timeout: {e}") from e
        except httpx.RequestError as e:
            logger.warning(f"mindicador request error: {e}")
            raise MindicadorApiError(str(e)) from e

        if response.status_code >= 400:
            logger.error(
                f"mindicador API error: {response.status_code}",
                extra={"endpoint": endpoint},
            )
            raise MindicadorApiError(
                f"HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise MindicadorApiError(f"Invalid JSON from {endpoint}") from e

    async def get_series(self, code: str) -> IndicatorSeries:
        """지표 시계열 조회

        Args:
            code: 지표 코드 (uf, utm, dolar)

        Returns:
            IndicatorSeries (최신순)

        Raises:
            MindicadorApiError: 요청 실패 또는 응답 형식 오류
        """
        data = await self._request(f"/{code}")

        try:
            return IndicatorSeries.from_api(data)
        except (KeyError, TypeError, ValueError) as e:
            raise MindicadorApiError(f"Malformed series for {code}: {e}") from e
