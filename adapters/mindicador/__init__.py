"""
mindicador.cl 어댑터

칠레 경제 지표 REST API 클라이언트.
"""

from adapters.mindicador.models import IndicatorPoint, IndicatorSeries
from adapters.mindicador.rest_client import MindicadorApiError, MindicadorClient

__all__ = [
    "IndicatorPoint",
    "IndicatorSeries",
    "MindicadorApiError",
    "MindicadorClient",
]
