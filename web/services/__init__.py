"""
Web 서비스 패키지

비즈니스 로직 처리
"""

from web.services.balance_service import (
    BalanceService,
    BalanceValidationError,
    ClientNotFoundError,
)
from web.services.client_service import ClientService, ClientValidationError
from web.services.export_service import ExportService
from web.services.health_service import HealthService
from web.services.indicator_service import IndicatorService

__all__ = [
    "BalanceService",
    "BalanceValidationError",
    "ClientNotFoundError",
    "ClientService",
    "ClientValidationError",
    "ExportService",
    "HealthService",
    "IndicatorService",
]
