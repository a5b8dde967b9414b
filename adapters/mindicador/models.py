"""
mindicador.cl API 응답 모델

/api/{indicador} 응답의 serie(최신순)를 파싱하여 데이터클래스로 변환.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class IndicatorPoint:
    """지표 시계열의 한 시점

    Attributes:
        date: 기준 시각
        value: 값 (CLP)
    """

    date: datetime
    value: float

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "IndicatorPoint":
        """API 응답에서 생성 (fecha: ISO 8601, 끝의 Z 허용)"""
        return cls(
            date=datetime.fromisoformat(str(data["fecha"]).replace("Z", "+00:00")),
            value=float(data["valor"]),
        )


@dataclass(frozen=True)
class IndicatorSeries:
    """지표 시계열

    Attributes:
        code: 지표 코드 (uf, utm, dolar)
        name: 지표명
        unit: 단위 (Pesos 등)
        points: 시계열 (최신순)
    """

    code: str
    name: str
    unit: str
    points: tuple[IndicatorPoint, ...]

    @property
    def current(self) -> IndicatorPoint:
        """최신 값"""
        return self.points[0]

    @property
    def previous(self) -> IndicatorPoint | None:
        """직전 값 (일간 지표는 전일, 월간 지표는 전월)"""
        return self.points[1] if len(self.points) > 1 else None

    def value_before(self, days: int) -> IndicatorPoint | None:
        """최신 시점 기준 N일 이전(이하)의 가장 가까운 값

        Args:
            days: 기준 일수 (예: 30 → 약 1개월 전)

        Returns:
            해당 시점 값 (시계열이 짧으면 None)
        """
        current_date = self.current.date
        for point in self.points[1:]:
            if (current_date - point.date).days >= days:
                return point
        return None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "IndicatorSeries":
        """API 응답에서 생성

        Raises:
            ValueError: serie가 비어 있는 경우
            KeyError: 필수 필드가 없는 경우
        """
        points = sorted(
            (IndicatorPoint.from_api(item) for item in data["serie"]),
            key=lambda p: p.date,
            reverse=True,
        )
        if not points:
            raise ValueError(f"Empty series: {data.get('codigo')}")

        return cls(
            code=data["codigo"],
            name=data.get("nombre", data["codigo"]),
            unit=data.get("unidad_medida", ""),
            points=tuple(points),
        )
