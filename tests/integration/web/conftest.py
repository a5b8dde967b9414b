"""
Web 통합 테스트 픽스처

임시 DB를 사용하는 settings.yaml + FastAPI TestClient
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from core.config.loader import Settings, get_settings


@pytest.fixture
def app_settings(tmp_path: Path) -> Settings:
    """임시 DB, static 지표, clientes 목록 기준 설정"""
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text(
        f"""database:
  path: {(tmp_path / "web_test.db").as_posix()}
indicators:
  strategy: static
clients:
  list_source: clientes
""",
        encoding="utf-8",
    )
    return get_settings(settings_path)


@pytest.fixture
def client(app_settings: Settings) -> TestClient:
    """lifespan(스키마 초기화)까지 실행된 TestClient"""
    from web.app import app

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def registered_rut(client: TestClient) -> str:
    """등록된 고객 RUT"""
    rut = "76.123.456-7"
    response = client.post(
        "/api/register-client",
        json={"rut": rut, "name": "Comercial Sur Ltda."},
    )
    assert response.status_code == 200
    return rut
