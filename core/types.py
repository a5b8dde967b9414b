"""
타입 정의 모듈

설정 및 원장 관련 Enum 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class IndicatorStrategy(str, Enum):
    """경제 지표 조회 전략"""

    STATIC = "static"  # 고정 상수 + 비교 시점 3개로 변동률 계산
    REMOTE = "remote"  # 외부 API 조회 (실패 시 static 값으로 fallback)


class ClientListSource(str, Enum):
    """고객 목록 조회 테이블

    등록은 항상 clientes 테이블에 기록되지만
    목록 조회는 기존 동작대로 clients 테이블을 읽는다.
    """

    CLIENTS = "clients"
    CLIENTES = "clientes"


class AmountField(str, Enum):
    """사용자가 입력하는 계정 금액 필드"""

    DEBIT = "debit"
    CREDIT = "credit"
    PROFIT = "profit"
    LOSS = "loss"


class WorksheetAction(str, Enum):
    """워크시트 편집 동작"""

    ADD = "add"
    DELETE = "delete"
    RENAME = "rename"
    SET = "set"
