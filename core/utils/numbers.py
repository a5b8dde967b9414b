"""
숫자 변환/포맷 유틸리티

- parse_or_zero: 사용자 입력 금액을 float로 변환 (변환 불가 시 0)
- format_number: es-CL 형식 표시 (천 단위 '.', 소수점 ',')
- percent_change: 비교 시점 대비 변동률 (%)
"""

import math
import numbers
from decimal import Decimal
from typing import Any


# es-CL 숫자 표시 규칙 (Intl.NumberFormat 기본값과 동일)
THOUSANDS_SEPARATOR = "."
DECIMAL_SEPARATOR = ","
MAX_FRACTION_DIGITS = 3


def parse_or_zero(value: Any) -> float:
    """금액 입력값을 float로 변환

    계약:
        - 실수형 (int/float/Decimal 등): float 변환
        - str: 앞뒤 공백 제거 후 float 변환 (실패 시 0.0)
        - None, bool, 그 외 타입: 0.0
        - NaN/무한대: 0.0

    예외를 발생시키지 않는다. 잘못된 숫자 입력은 조용히 0이 된다.

    Args:
        value: 사용자 입력값

    Returns:
        변환된 float (실패 시 0.0)

    Example:
        >>> parse_or_zero("1500.5")
        1500.5
        >>> parse_or_zero("abc")
        0.0
    """
    # bool은 int의 하위 타입이므로 먼저 제외
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    elif not isinstance(value, (numbers.Real, Decimal)):
        return 0.0

    try:
        number = float(value)
    except (ValueError, OverflowError):
        return 0.0

    if math.isnan(number) or math.isinf(number):
        return 0.0

    return number


def format_number(value: Any, max_fraction_digits: int = MAX_FRACTION_DIGITS) -> str:
    """es-CL 형식으로 숫자 포맷

    표시 전용. 계산에는 사용하지 않는다.

    Args:
        value: 숫자 (변환 불가 값은 0으로 표시)
        max_fraction_digits: 최대 소수 자릿수

    Returns:
        포맷된 문자열

    Example:
        >>> format_number(1234567.5)
        '1.234.567,5'
        >>> format_number(-978.5)
        '-978,5'
    """
    number = round(parse_or_zero(value), max_fraction_digits)

    sign = "-" if number < 0 else ""
    text = f"{abs(number):.{max_fraction_digits}f}"
    integer_part, _, fraction_part = text.partition(".")
    fraction_part = fraction_part.rstrip("0")

    grouped = f"{int(integer_part):,}".replace(",", THOUSANDS_SEPARATOR)

    if fraction_part:
        return f"{sign}{grouped}{DECIMAL_SEPARATOR}{fraction_part}"
    return f"{sign}{grouped}"


def percent_change(current: float, previous: float) -> float:
    """변동률 계산

    Args:
        current: 현재 값
        previous: 비교 시점 값

    Returns:
        (current - previous) / previous * 100 (previous가 0이면 0.0)
    """
    if previous == 0:
        return 0.0
    return (current - previous) / previous * 100
