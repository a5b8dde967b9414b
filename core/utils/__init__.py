"""
유틸리티 패키지

금액 파싱/포맷, 타임존 처리 등 공통 유틸리티
"""

from core.utils.numbers import (
    format_number,
    parse_or_zero,
    percent_change,
)
from core.utils.timezone import (
    SANTIAGO,
    to_santiago,
    format_accounting_date,
    format_clock,
    format_generated_at,
    now_utc,
)

__all__ = [
    "format_number",
    "parse_or_zero",
    "percent_change",
    "SANTIAGO",
    "to_santiago",
    "format_accounting_date",
    "format_clock",
    "format_generated_at",
    "now_utc",
]
