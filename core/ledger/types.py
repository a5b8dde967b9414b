"""
Balance General 타입 정의

계정 행(AccountRow)과 시산표 계산 결과 데이터 구조
"""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class AccountRow:
    """계정 행 (사용자 입력)

    워크시트 편집 중에는 같은 인스턴스를 직접 수정한다.

    Attributes:
        id: 계정 고유 ID
        name: 계정명 (예: CAJA)
        debit: 차변 합계
        credit: 대변 합계
        profit: 이익 (ganancias)
        loss: 손실 (pérdidas)
    """

    id: int
    name: str
    debit: float = 0.0
    credit: float = 0.0
    profit: float = 0.0
    loss: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용 dict 변환"""
        return asdict(self)


@dataclass(frozen=True)
class CalculatedRow:
    """계산된 계정 행

    debtor/creditor 중 최대 하나만 0보다 크다.
    asset = debtor, liability = creditor.
    """

    id: int
    name: str
    debit: float
    credit: float
    debtor: float
    creditor: float
    asset: float
    liability: float
    profit: float
    loss: float

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용 dict 변환"""
        return asdict(self)


@dataclass(frozen=True)
class TrialBalanceTotals:
    """시산표 합계 (계산 필드 포함 전체 필드 합)"""

    debit: float = 0.0
    credit: float = 0.0
    debtor: float = 0.0
    creditor: float = 0.0
    asset: float = 0.0
    liability: float = 0.0
    profit: float = 0.0
    loss: float = 0.0

    @property
    def utility(self) -> float:
        """당기 손익 (이익 합계 - 손실 합계)"""
        return self.profit - self.loss

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용 dict 변환"""
        return asdict(self)


@dataclass(frozen=True)
class TrialBalance:
    """시산표 (Balance General)

    Attributes:
        rows: 계산된 계정 행 (입력 순서 유지)
        totals: 필드별 합계
    """

    rows: list[CalculatedRow] = field(default_factory=list)
    totals: TrialBalanceTotals = field(default_factory=TrialBalanceTotals)

    @property
    def utility(self) -> float:
        """당기 손익"""
        return self.totals.utility
