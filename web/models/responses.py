"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화
"""

from typing import Any

from pydantic import BaseModel, Field


class CalculatedRowResponse(BaseModel):
    """계산된 계정 행"""

    id: int
    name: str
    debit: float
    credit: float
    debtor: float = Field(..., description="deudor")
    creditor: float = Field(..., description="acreedor")
    asset: float = Field(..., description="activo")
    liability: float = Field(..., description="pasivo")
    profit: float = Field(..., description="ganancias")
    loss: float = Field(..., description="pérdidas")


class TotalsResponse(BaseModel):
    """시산표 합계"""

    debit: float = 0.0
    credit: float = 0.0
    debtor: float = 0.0
    creditor: float = 0.0
    asset: float = 0.0
    liability: float = 0.0
    profit: float = 0.0
    loss: float = 0.0


class WorksheetResponse(BaseModel):
    """워크시트 재계산 응답"""

    accounts: list[CalculatedRowResponse]
    totals: TotalsResponse
    utility: float = Field(..., description="이익 합계 - 손실 합계")
    next_id: int = Field(..., alias="nextId")

    model_config = {"populate_by_name": True}


class BalanceRecordResponse(BaseModel):
    """저장된 Balance"""

    id: int
    client_rut: str = Field(..., alias="clientRut")
    client_name: str | None = Field(default=None, alias="clientName")
    accounts: list[dict[str, Any]] = Field(default_factory=list)
    totals: dict[str, Any] = Field(default_factory=dict)
    created_at: str = Field(..., alias="createdAt")

    model_config = {"populate_by_name": True}


class ClientResponse(BaseModel):
    """고객 정보"""

    id: int
    rut: str
    name: str
    address: str | None = None
    phone: str | None = None
    created_at: str = Field(..., alias="createdAt")

    model_config = {"populate_by_name": True}


class ClientWithBalanceResponse(ClientResponse):
    """고객 + 최근 Balance (최대 1건)"""

    balances: list[BalanceRecordResponse] = Field(default_factory=list)


class ClientRegisterResponse(BaseModel):
    """고객 등록 응답"""

    success: bool
    message: str
    client: ClientResponse | None = None


class IndicatorValueResponse(BaseModel):
    """경제 지표 값"""

    value: float
    variation: float | None = Field(default=None, description="전일 대비 변동률 (%)")
    monthly_variation: float | None = Field(
        default=None,
        alias="monthlyVariation",
        description="전월 대비 변동률 (%)",
    )

    model_config = {"populate_by_name": True}


class FinancialDataResponse(BaseModel):
    """경제 지표 스냅샷

    static/remote 전략과 fallback 모두 동일한 형태.
    """

    uf: IndicatorValueResponse
    utm: IndicatorValueResponse
    dollar: IndicatorValueResponse
    accounting_date: str = Field(..., alias="accountingDate")
    current_time: str = Field(..., alias="currentTime")
    source: str = Field(..., description="static | remote | fallback")

    model_config = {"populate_by_name": True}


class HealthServicesResponse(BaseModel):
    """헬스 체크 세부 항목"""

    database: str = "unknown"
    apis: str = "unknown"


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="ok | degraded")
    timestamp: str = Field(..., description="응답 시간 (UTC)")
    version: str
    services: HealthServicesResponse = Field(default_factory=HealthServicesResponse)
