"""
pytest 공통 fixture 정의
"""

import tempfile
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from core.config.loader import Settings


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_settings_file(temp_dir: Path) -> Path:
    """테스트용 settings.yaml 파일 생성"""
    settings_content = f"""# 테스트용 settings.yaml
database:
  path: {(temp_dir / "test.db").as_posix()}

indicators:
  strategy: remote
  base_url: https://indicators.example.com/api
  timeout_sec: 2.5

clients:
  list_source: clientes

health:
  financial_data_url: http://localhost:9000/api/financial-data

web:
  host: 0.0.0.0
  port: 9000
"""
    settings_path = temp_dir / "settings.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture
def temp_settings_file_invalid_strategy(temp_dir: Path) -> Path:
    """잘못된 strategy 값의 settings.yaml 파일 생성"""
    settings_content = """indicators:
  strategy: magic
"""
    settings_path = temp_dir / "settings_invalid.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture(autouse=True)
def reset_settings():
    """테스트 간 Settings 싱글톤 초기화"""
    Settings.reset()
    yield
    Settings.reset()


@pytest_asyncio.fixture
async def db(tmp_path: Path) -> SQLiteAdapter:
    """스키마가 초기화된 임시 DB"""
    adapter = SQLiteAdapter(tmp_path / "contadash_test.db")
    await adapter.connect()
    await init_schema(adapter)
    yield adapter
    await adapter.close()


# -------------------------------------------------------------------------
# mindicador.cl API 응답 샘플
# -------------------------------------------------------------------------

def _series(code: str, name: str, values: list[tuple[str, float]]) -> dict:
    return {
        "version": "1.7.0",
        "autor": "mindicador.cl",
        "codigo": code,
        "nombre": name,
        "unidad_medida": "Pesos",
        "serie": [{"fecha": fecha, "valor": valor} for fecha, valor in values],
    }


@pytest.fixture
def mindicador_payloads() -> dict[str, dict]:
    """지표별 API 응답 (serie는 API와 같이 최신순)"""
    return {
        "uf": _series(
            "uf",
            "Unidad de fomento (UF)",
            [
                ("2026-03-31T03:00:00.000Z", 39000.0),
                ("2026-03-30T03:00:00.000Z", 38961.0),
                ("2026-03-01T03:00:00.000Z", 38610.0),
                ("2026-02-20T03:00:00.000Z", 38500.0),
            ],
        ),
        "utm": _series(
            "utm",
            "Unidad Tributaria Mensual (UTM)",
            [
                ("2026-03-01T03:00:00.000Z", 68000.0),
                ("2026-02-01T03:00:00.000Z", 67320.0),
            ],
        ),
        "dolar": _series(
            "dolar",
            "Dólar observado",
            [
                ("2026-03-31T03:00:00.000Z", 950.0),
                ("2026-03-30T03:00:00.000Z", 1000.0),
            ],
        ),
    }


@pytest.fixture
def mindicador_transport(mindicador_payloads: dict[str, dict]) -> httpx.MockTransport:
    """경로(/api/{code})별 샘플 응답을 반환하는 Mock 전송 계층"""

    def handler(request: httpx.Request) -> httpx.Response:
        code = request.url.path.rsplit("/", 1)[-1]
        if code not in mindicador_payloads:
            return httpx.Response(404, text="Not found")
        return httpx.Response(200, json=mindicador_payloads[code])

    return httpx.MockTransport(handler)
