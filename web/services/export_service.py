"""
Export 서비스

Balance General HTML 문서 생성 (PDF 대용).
계산이 끝난 값을 Jinja2 템플릿에 채워 넣기만 한다.
"""

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Mapping

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.ledger.calculator import calculate_trial_balance
from core.utils.numbers import format_number, parse_or_zero
from core.utils.timezone import format_generated_at, now_utc

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
EXPORT_TEMPLATE = "export_balance.html"

# 파일명에 사용할 수 없는 문자
_UNSAFE_FILENAME_CHARS = re.compile(r"[^0-9A-Za-z._-]+")


def build_environment(templates_dir: Path = TEMPLATES_DIR) -> Environment:
    """Jinja2 환경 생성 (es-CL 숫자 필터 등록)"""
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html"]),
    )
    env.filters["clp"] = format_number
    return env


def export_filename(client_rut: str, date: str) -> str:
    """첨부 파일명 (balance_<rut>_<date>.html)"""
    rut = _UNSAFE_FILENAME_CHARS.sub("", client_rut) or "sin-rut"
    day = _UNSAFE_FILENAME_CHARS.sub("", date) or "sin-fecha"
    return f"balance_{rut}_{day}.html"


class ExportService:
    """Export 서비스

    Args:
        env: Jinja2 환경 (None이면 기본 템플릿 디렉토리)
    """

    def __init__(self, env: Environment | None = None):
        self.env = env or build_environment()

    def render_balance(
        self,
        client_rut: str,
        client_name: str,
        date: str,
        accounts: Iterable[Mapping[str, Any]],
        total_debit: Any,
        total_credit: Any,
        utility: Any,
        generated_at: datetime | None = None,
    ) -> str:
        """Balance General HTML 렌더링

        요약 카드는 요청에 포함된 합계/손익을 그대로 사용하고
        계정 표는 행 입력값으로 다시 계산한다.
        """
        balance = calculate_trial_balance(accounts)
        utility_value = parse_or_zero(utility)

        html = self.env.get_template(EXPORT_TEMPLATE).render(
            client_rut=client_rut,
            client_name=client_name,
            date=date,
            rows=balance.rows,
            totals=balance.totals,
            total_debit=parse_or_zero(total_debit),
            total_credit=parse_or_zero(total_credit),
            utility=utility_value,
            losses=abs(utility_value) if utility_value < 0 else 0.0,
            gains=utility_value if utility_value > 0 else 0.0,
            generated_at=format_generated_at(generated_at or now_utc()),
        )

        logger.info(
            f"Balance exported: {client_rut}",
            extra={"accounts": len(balance.rows)},
        )

        return html
