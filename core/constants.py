"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → contadash/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class IndicatorEndpoints:
    """경제 지표 API 엔드포인트 (고정값)

    공식 문서: https://mindicador.cl
    """

    MINDICADOR_URL: str = "https://mindicador.cl/api"


class Defaults:
    """기본값 상수"""

    APP_VERSION: str = "1.0.0"

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000

    LOG_LEVEL: str = "INFO"

    # 칠레 현지 시간 (지표 기준일/시각 표시용)
    TIMEZONE: str = "America/Santiago"

    INDICATOR_TIMEOUT_SEC: float = 5.0
    HEALTH_PROBE_TIMEOUT_SEC: float = 5.0

    # 신규 계정 ID 시작값 (기본 계정 1~14와 겹치지 않도록)
    FIRST_NEW_ACCOUNT_ID: int = 1000


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"

    # 설정 파일
    SETTINGS_FILE: Path = CONFIG_DIR / "settings.yaml"

    # DB 파일
    DB_FILE: Path = DATA_DIR / "contadash.db"


class FallbackIndicators:
    """정적 경제 지표 값

    static 전략의 기본값이자 remote 전략 실패 시 fallback.
    """

    UF_CURRENT: float = 37850.32
    UF_YESTERDAY: float = 37820.15
    UF_LAST_MONTH: float = 37500.00

    UTM_CURRENT: float = 63234.00

    DOLLAR_CURRENT: float = 978.50
    DOLLAR_YESTERDAY: float = 975.20


# 기본 계정과목 (Balance General 시작 상태)
DEFAULT_ACCOUNT_NAMES: tuple[str, ...] = (
    "CAJA",
    "P.P.M.",
    "MATERIALES",
    "RETIROS",
    "EXCESO RETIROS",
    "INSTALACIONES",
    "PLANCHA A VAPOR",
    "MAQUINARIAS",
    "CAPITAL",
    "REV. CAPITAL PROPIO",
    "IMPTO. POR PAGAR",
    "LEYES SOCIALES",
    "UTILIDAD ACUMULADA",
    "SUELDOS",
)
