"""
요청 스키마 (Pydantic)

Web API 요청 데이터 검증

금액 필드는 어떤 JSON 값이든 받아 검증 전에 parse_or_zero로 변환한다.
(잘못된 숫자 입력은 422가 아니라 0으로 처리)
"""

from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, Field

from core.types import AmountField, WorksheetAction
from core.utils.numbers import parse_or_zero

# 금액 입력 (변환 불가 값은 0)
RawAmount = Annotated[float, BeforeValidator(parse_or_zero)]


class AccountRowRequest(BaseModel):
    """계정 행 입력"""

    id: int = Field(default=0, description="계정 ID")
    name: str = Field(
        default="",
        validation_alias=AliasChoices("name", "accountName", "cuenta"),
        description="계정명",
    )
    debit: RawAmount = Field(default=0, description="차변 (débito)")
    credit: RawAmount = Field(default=0, description="대변 (crédito)")
    profit: RawAmount = Field(default=0, description="이익 (ganancias)")
    loss: RawAmount = Field(default=0, description="손실 (pérdidas)")

    def to_input(self) -> dict[str, Any]:
        """계산기 입력용 dict"""
        return {
            "id": self.id,
            "name": self.name,
            "debit": self.debit,
            "credit": self.credit,
            "profit": self.profit,
            "loss": self.loss,
        }


class BalanceCreateRequest(BaseModel):
    """Balance 저장 요청

    clientRut가 비어 있으면 400 (스토어 접근 전 거부).
    totals는 서버에서 다시 계산한다.
    """

    client_rut: str | None = Field(default=None, alias="clientRut", description="소유자 RUT")
    client_name: str | None = Field(default=None, alias="clientName", description="고객명")
    accounts: list[AccountRowRequest] = Field(default_factory=list, description="계정 행")
    totals: dict[str, Any] | None = Field(default=None, description="클라이언트 계산 합계 (참고용)")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "clientRut": "76.123.456-7",
                    "clientName": "Comercial Sur Ltda.",
                    "accounts": [
                        {"id": 1, "name": "CAJA", "debit": 1500000, "credit": 300000},
                        {"id": 9, "name": "CAPITAL", "debit": 0, "credit": 1200000},
                    ],
                }
            ]
        },
    }


class ExportRequest(BaseModel):
    """HTML 내보내기 요청 (PDF 대용)"""

    client_rut: str = Field(default="", alias="clientRut")
    client_name: str = Field(default="", alias="clientName")
    date: str = Field(default="", description="기준일 (YYYY-MM-DD)")
    accounts: list[AccountRowRequest] = Field(default_factory=list)
    total_debit: RawAmount = Field(default=0, alias="totalDebit")
    total_credit: RawAmount = Field(default=0, alias="totalCredit")
    utility: RawAmount = Field(default=0, description="당기 손익")

    model_config = {"populate_by_name": True}


class ClientRegisterRequest(BaseModel):
    """고객 등록 요청"""

    rut: str | None = Field(default=None, description="RUT (필수)")
    name: str | None = Field(default=None, description="이름/상호 (필수)")
    address: str | None = Field(default=None, description="주소")
    phone: str | None = Field(default=None, description="전화번호")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "rut": "12.345.678-9",
                    "name": "Juan Pérez",
                    "address": "Av. Providencia 1234, Santiago",
                    "phone": "+56 9 1234 5678",
                }
            ]
        }
    }


class WorksheetActionRequest(BaseModel):
    """워크시트 편집 동작

    - add: 신규 행 추가 (name 선택)
    - delete: id 행 삭제 (마지막 1행은 유지)
    - rename: id 행 이름 변경 (name)
    - set: id 행의 field 값 변경 (value)
    """

    type: WorksheetAction
    id: int | None = None
    field: AmountField | None = None
    value: Any = None
    name: str | None = None


class WorksheetRequest(BaseModel):
    """워크시트 재계산 요청

    accounts가 없으면 기본 계정과목으로 시작.
    """

    accounts: list[AccountRowRequest] | None = None
    next_id: int | None = Field(default=None, alias="nextId")
    action: WorksheetActionRequest | None = None

    model_config = {"populate_by_name": True}
