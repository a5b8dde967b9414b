"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import (
    AccountRowRequest,
    BalanceCreateRequest,
    ClientRegisterRequest,
    ExportRequest,
    WorksheetActionRequest,
    WorksheetRequest,
)
from web.models.responses import (
    BalanceRecordResponse,
    CalculatedRowResponse,
    ClientRegisterResponse,
    ClientResponse,
    ClientWithBalanceResponse,
    FinancialDataResponse,
    HealthResponse,
    HealthServicesResponse,
    IndicatorValueResponse,
    TotalsResponse,
    WorksheetResponse,
)

__all__ = [
    # Requests
    "AccountRowRequest",
    "BalanceCreateRequest",
    "ClientRegisterRequest",
    "ExportRequest",
    "WorksheetActionRequest",
    "WorksheetRequest",
    # Responses
    "BalanceRecordResponse",
    "CalculatedRowResponse",
    "ClientRegisterResponse",
    "ClientResponse",
    "ClientWithBalanceResponse",
    "FinancialDataResponse",
    "HealthResponse",
    "HealthServicesResponse",
    "IndicatorValueResponse",
    "TotalsResponse",
    "WorksheetResponse",
]
