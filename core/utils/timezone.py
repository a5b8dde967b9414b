"""
타임존 유틸리티

내부 저장: UTC | 외부 표시: 칠레 현지 시간 (America/Santiago) 원칙 준수를 위한 헬퍼 함수
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from core.constants import Defaults

# 칠레 타임존 (서머타임 적용 지역이므로 고정 offset 대신 tz database 사용)
SANTIAGO = ZoneInfo(Defaults.TIMEZONE)


def to_santiago(dt: datetime) -> datetime:
    """UTC datetime을 칠레 현지 시간으로 변환

    Args:
        dt: datetime 객체 (UTC 권장, naive면 UTC로 간주)

    Returns:
        America/Santiago 타임존의 datetime
    """
    if dt.tzinfo is None:
        # naive datetime은 UTC로 간주
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(SANTIAGO)


def format_accounting_date(dt: datetime) -> str:
    """회계 기준일 포맷 (dd-mm-yyyy, 칠레 현지 날짜)

    Example:
        >>> format_accounting_date(datetime(2026, 3, 5, 15, 0, tzinfo=timezone.utc))
        '05-03-2026'
    """
    return to_santiago(dt).strftime("%d-%m-%Y")


def format_clock(dt: datetime) -> str:
    """현재 시각 포맷 (HH:MM:SS, 칠레 현지 시간)"""
    return to_santiago(dt).strftime("%H:%M:%S")


def format_generated_at(dt: datetime) -> str:
    """문서 생성 시각 포맷 (dd-mm-yyyy, HH:MM:SS)"""
    return f"{format_accounting_date(dt)}, {format_clock(dt)}"


def now_utc() -> datetime:
    """현재 UTC 시간 반환 (타임존 명시)

    datetime.now(timezone.utc)의 축약형.

    Returns:
        현재 UTC 시간 (tzinfo=timezone.utc)
    """
    return datetime.now(timezone.utc)
