"""
설정 로더

settings.yaml 로드 및 애플리케이션 설정 생성
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from core.constants import PROJECT_ROOT, Defaults, IndicatorEndpoints, Paths
from core.types import ClientListSource, IndicatorStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 설정 (settings.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    db_path: Path = Paths.DB_FILE
    indicator_strategy: IndicatorStrategy = IndicatorStrategy.STATIC
    indicator_base_url: str = IndicatorEndpoints.MINDICADOR_URL
    indicator_timeout_sec: float = Defaults.INDICATOR_TIMEOUT_SEC
    client_list_source: ClientListSource = ClientListSource.CLIENTS
    financial_data_url: str | None = None
    web_host: str = Defaults.WEB_HOST
    web_port: int = Defaults.WEB_PORT


class ConfigLoadError(Exception):
    """설정 로드 실패 예외"""

    pass


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """하위 섹션 조회 (없으면 빈 dict)"""
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigLoadError(f"settings.yaml의 '{name}' 섹션 형식이 잘못되었습니다")
    return section


def _parse_enum(enum_cls: type, value: Any, key: str) -> Any:
    """Enum 값 검증"""
    try:
        return enum_cls(str(value).lower())
    except ValueError as e:
        valid_values = [m.value for m in enum_cls]
        raise ValueError(
            f"유효하지 않은 {key} 값입니다: '{value}'. "
            f"유효한 값: {valid_values}"
        ) from e


def load_config(path: Path | None = None) -> AppConfig:
    """settings.yaml 파일 로드

    파일이 없으면 기본값으로 동작한다.

    Args:
        path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        AppConfig 인스턴스

    Raises:
        ConfigLoadError: 파일 형식이 잘못된 경우
        ValueError: 유효하지 않은 strategy/list_source 값인 경우
    """
    if path is None:
        path = Paths.SETTINGS_FILE

    if not path.exists():
        logger.info(f"settings.yaml 없음, 기본 설정 사용: {path}")
        return AppConfig()

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"settings.yaml 파싱 실패: {e}") from e

    if data is None:
        return AppConfig()

    if not isinstance(data, dict):
        raise ConfigLoadError("settings.yaml 최상위는 mapping이어야 합니다")

    database = _section(data, "database")
    indicators = _section(data, "indicators")
    clients = _section(data, "clients")
    health = _section(data, "health")
    web = _section(data, "web")

    # DB 경로 (상대 경로는 프로젝트 루트 기준)
    db_path = Paths.DB_FILE
    if database.get("path"):
        db_path = Path(database["path"])
        if not db_path.is_absolute() and str(db_path) != ":memory:":
            db_path = PROJECT_ROOT / db_path

    try:
        timeout = float(indicators.get("timeout_sec", Defaults.INDICATOR_TIMEOUT_SEC))
        port = int(web.get("port", Defaults.WEB_PORT))
    except (TypeError, ValueError) as e:
        raise ConfigLoadError(f"settings.yaml 숫자 설정 오류: {e}") from e

    return AppConfig(
        db_path=db_path,
        indicator_strategy=_parse_enum(
            IndicatorStrategy,
            indicators.get("strategy", IndicatorStrategy.STATIC.value),
            "indicators.strategy",
        ),
        indicator_base_url=indicators.get("base_url") or IndicatorEndpoints.MINDICADOR_URL,
        indicator_timeout_sec=timeout,
        client_list_source=_parse_enum(
            ClientListSource,
            clients.get("list_source", ClientListSource.CLIENTS.value),
            "clients.list_source",
        ),
        financial_data_url=health.get("financial_data_url") or None,
        web_host=web.get("host") or Defaults.WEB_HOST,
        web_port=port,
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    settings.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _config: AppConfig | None = None

    def __new__(cls, config_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, config_path: Path | None = None) -> None:
        if self._config is None:
            self._config = load_config(config_path)

    @property
    def config(self) -> AppConfig:
        """로드된 설정 원본"""
        assert self._config is not None
        return self._config

    @property
    def db_path(self) -> Path:
        """DB 경로"""
        return self.config.db_path

    @property
    def indicator_strategy(self) -> IndicatorStrategy:
        """경제 지표 조회 전략"""
        return self.config.indicator_strategy

    @property
    def indicator_base_url(self) -> str:
        """경제 지표 API URL"""
        return self.config.indicator_base_url

    @property
    def indicator_timeout_sec(self) -> float:
        """경제 지표 API 타임아웃 (초)"""
        return self.config.indicator_timeout_sec

    @property
    def client_list_source(self) -> ClientListSource:
        """고객 목록 조회 테이블"""
        return self.config.client_list_source

    @property
    def financial_data_url(self) -> str | None:
        """헬스 체크용 financial-data URL (None이면 앱 내부 호출)"""
        return self.config.financial_data_url

    @property
    def web_host(self) -> str:
        """Web 서버 호스트"""
        return self.config.web_host

    @property
    def web_port(self) -> int:
        """Web 서버 포트"""
        return self.config.web_port

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._config = None


def get_settings(config_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        config_path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(config_path)
