"""
Web API 통합 테스트

실제 SQLite 파일과 FastAPI 앱을 사용한 라우트 검증.
"""

import sqlite3
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from core.config.loader import Settings
from web.dependencies import get_app_settings

ACCOUNTS = [
    {"id": 1, "name": "CAJA", "debit": 1500000, "credit": 300000},
    {"id": 9, "name": "CAPITAL", "debit": 0, "credit": "1200000"},
    {"id": 20, "name": "VENTAS", "credit": 500, "profit": 500},
    {"id": 21, "name": "SUELDOS", "debit": 200, "loss": 200},
]


class TestRegisterClient:
    """POST/GET /api/register-client"""

    def test_register(self, client: TestClient) -> None:
        response = client.post(
            "/api/register-client",
            json={
                "rut": "12.345.678-9",
                "name": "Juan Pérez",
                "address": "Av. Providencia 1234",
                "phone": "+56 9 1234 5678",
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Cliente registrado correctamente"
        assert body["client"]["rut"] == "12.345.678-9"
        assert body["client"]["createdAt"]

    def test_missing_required_fields(self, client: TestClient) -> None:
        response = client.post("/api/register-client", json={"rut": "  ", "name": "X"})

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "RUT y nombre son obligatorios",
            "client": None,
        }

    def test_duplicate_rut_conflict(self, client: TestClient, registered_rut: str) -> None:
        """중복 RUT는 409, 기존 레코드 유지"""
        response = client.post(
            "/api/register-client",
            json={"rut": registered_rut, "name": "Otro Nombre"},
        )

        assert response.status_code == 409
        assert response.json()["message"] == "Ya existe un cliente con este RUT"

        clients = client.get("/api/register-client").json()
        assert [c["name"] for c in clients] == ["Comercial Sur Ltda."]

    def test_list_includes_latest_balance(self, client: TestClient, registered_rut: str) -> None:
        client.post("/api/balances", json={"clientRut": registered_rut, "accounts": ACCOUNTS})
        latest = client.post(
            "/api/balances", json={"clientRut": registered_rut, "accounts": ACCOUNTS}
        ).json()

        clients = client.get("/api/register-client").json()

        assert len(clients) == 1
        assert [b["id"] for b in clients[0]["balances"]] == [latest["id"]]


class TestBalances:
    """/api/balances"""

    def test_save_balance(self, client: TestClient, registered_rut: str) -> None:
        response = client.post(
            "/api/balances",
            json={
                "clientRut": registered_rut,
                "clientName": "Comercial Sur Ltda.",
                "accounts": ACCOUNTS,
                "totals": {"debit": 1},
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["clientRut"] == registered_rut
        assert body["createdAt"]
        # 합계는 서버에서 다시 계산
        assert body["totals"]["debit"] == 1500200
        assert body["totals"]["creditor"] == 1200500
        assert body["accounts"][0]["debtor"] == 1200000

    def test_default_client_name(self, client: TestClient, registered_rut: str) -> None:
        body = client.post(
            "/api/balances", json={"clientRut": registered_rut, "accounts": []}
        ).json()

        assert body["clientName"] == f"Cliente {registered_rut}"

    def test_blank_rut_rejected(self, client: TestClient) -> None:
        response = client.post("/api/balances", json={"clientRut": "  ", "accounts": ACCOUNTS})

        assert response.status_code == 400

    def test_unregistered_rut(self, client: TestClient) -> None:
        response = client.post(
            "/api/balances", json={"clientRut": "99.999.999-9", "accounts": ACCOUNTS}
        )

        assert response.status_code == 404

    def test_malformed_amounts_become_zero(
        self, client: TestClient, registered_rut: str
    ) -> None:
        response = client.post(
            "/api/balances",
            json={
                "clientRut": registered_rut,
                "accounts": [
                    {"id": 1, "name": "CAJA", "debit": [1], "credit": {"a": 1}},
                    {"id": 2, "name": "BANCO", "debit": True, "profit": "abc"},
                ],
            },
        )

        assert response.status_code == 201
        totals = response.json()["totals"]
        assert totals["debit"] == 0
        assert totals["credit"] == 0
        assert totals["profit"] == 0
        assert client.get("/api/balances").json() == []

    def test_list_filter_and_order(self, client: TestClient, registered_rut: str) -> None:
        first = client.post(
            "/api/balances", json={"clientRut": registered_rut, "accounts": ACCOUNTS}
        ).json()
        second = client.post(
            "/api/balances", json={"clientRut": registered_rut, "accounts": []}
        ).json()

        all_records = client.get("/api/balances").json()
        filtered = client.get("/api/balances", params={"rut": registered_rut}).json()
        other = client.get("/api/balances", params={"rut": "1-9"}).json()

        assert [r["id"] for r in all_records] == [second["id"], first["id"]]
        assert filtered == all_records
        assert other == []

    def test_latest(self, client: TestClient, registered_rut: str) -> None:
        saved = client.post(
            "/api/balances", json={"clientRut": registered_rut, "accounts": ACCOUNTS}
        ).json()

        response = client.get("/api/balances/latest", params={"rut": registered_rut})

        assert response.status_code == 200
        assert response.json()["id"] == saved["id"]

    def test_latest_not_found(self, client: TestClient) -> None:
        response = client.get("/api/balances/latest", params={"rut": "1-9"})

        assert response.status_code == 404

    def test_store_failure(self, client: TestClient, app_settings: Settings) -> None:
        """저장소 오류는 500"""
        conn = sqlite3.connect(app_settings.db_path)
        conn.execute("DROP TABLE balances")
        conn.commit()
        conn.close()

        response = client.get("/api/balances")

        assert response.status_code == 500


class TestExport:
    """POST /api/export-pdf"""

    def test_export(self, client: TestClient) -> None:
        response = client.post(
            "/api/export-pdf",
            json={
                "clientRut": "12.345.678-9",
                "clientName": "Juan Pérez",
                "date": "2026-03-05",
                "accounts": [{"id": 1, "accountName": "CAJA", "debit": 1500, "credit": 0}],
                "totalDebit": 1500,
                "totalCredit": 0,
                "utility": 0,
            },
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert (
            response.headers["content-disposition"]
            == 'attachment; filename="balance_12.345.678-9_2026-03-05.html"'
        )
        assert "Balance General" in response.text
        assert "CAJA" in response.text
        assert "$1.500" in response.text


class TestFinancialData:
    """/api/financial-data"""

    def test_get(self, client: TestClient) -> None:
        response = client.get("/api/financial-data")

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"uf", "utm", "dollar", "accountingDate", "currentTime", "source"}
        assert set(body["uf"]) == {"value", "variation", "monthlyVariation"}
        assert body["source"] == "static"

    def test_post_not_allowed(self, client: TestClient) -> None:
        response = client.post("/api/financial-data")

        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed"}


class TestWorksheet:
    """/api/worksheet"""

    def test_defaults(self, client: TestClient) -> None:
        body = client.get("/api/worksheet/defaults").json()

        assert len(body["accounts"]) == 14
        assert body["nextId"] == 1000
        assert body["utility"] == 0

    def test_recalculate_with_set_action(self, client: TestClient) -> None:
        response = client.post(
            "/api/worksheet",
            json={
                "accounts": [{"id": 1, "name": "CAJA", "debit": 100, "credit": 0}],
                "action": {"type": "set", "id": 1, "field": "credit", "value": "40"},
            },
        )

        assert response.status_code == 200
        row = response.json()["accounts"][0]
        assert row["debtor"] == 60
        assert row["creditor"] == 0

    @pytest.mark.parametrize("value", [[1], {"a": 1}, True, "abc", None])
    def test_malformed_amount_is_zero(self, client: TestClient, value) -> None:
        response = client.post(
            "/api/worksheet",
            json={"accounts": [{"id": 1, "name": "CAJA", "debit": value, "credit": 5}]},
        )

        assert response.status_code == 200
        row = response.json()["accounts"][0]
        assert row["debit"] == 0
        assert row["creditor"] == 5

    def test_add_action(self, client: TestClient) -> None:
        body = client.post(
            "/api/worksheet",
            json={"accounts": None, "nextId": 1003, "action": {"type": "add"}},
        ).json()

        assert body["accounts"][-1]["id"] == 1003
        assert body["nextId"] == 1004

    def test_delete_last_row_kept(self, client: TestClient) -> None:
        body = client.post(
            "/api/worksheet",
            json={
                "accounts": [{"id": 1, "name": "CAJA"}],
                "action": {"type": "delete", "id": 1},
            },
        ).json()

        assert len(body["accounts"]) == 1

    def test_unknown_row(self, client: TestClient) -> None:
        response = client.post(
            "/api/worksheet",
            json={"action": {"type": "rename", "id": 999, "name": "X"}},
        )

        assert response.status_code == 404

    def test_missing_id(self, client: TestClient) -> None:
        response = client.post("/api/worksheet", json={"action": {"type": "delete"}})

        assert response.status_code == 400

    def test_invalid_action(self, client: TestClient) -> None:
        response = client.post("/api/worksheet", json={"action": {"type": "explode"}})

        assert response.status_code == 422


class TestHealth:
    """GET /health"""

    def test_healthy(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["version"] == "1.0.0"
        assert body["services"]["database"] == "connected (clientes: ok) (balances: ok)"
        assert body["services"]["apis"] == "financial-data: ok"

    def test_degraded_when_api_unreachable(self, client: TestClient, app_settings: Settings) -> None:
        from web.app import app

        app.dependency_overrides[get_app_settings] = lambda: SimpleNamespace(
            db_path=app_settings.db_path,
            financial_data_url="http://127.0.0.1:9/api/financial-data",
        )

        response = client.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "degraded"
        assert response.json()["services"]["database"].startswith("connected")

    def test_degraded_when_table_missing(self, client: TestClient, app_settings: Settings) -> None:
        conn = sqlite3.connect(app_settings.db_path)
        conn.execute("DROP TABLE clientes")
        conn.commit()
        conn.close()

        response = client.get("/health")

        assert response.status_code == 503
        assert "(clientes: error)" in response.json()["services"]["database"]


class TestPages:
    """HTML 페이지"""

    def test_dashboard(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert "Dashboard Financiero Chile" in response.text
        assert "37.850,32" in response.text

    def test_accounting(self, client: TestClient) -> None:
        response = client.get("/accounting")

        assert response.status_code == 200
        assert "/api/worksheet" in response.text

    def test_clients(self, client: TestClient) -> None:
        response = client.get("/clients")

        assert response.status_code == 200
        assert "Registro de Clientes" in response.text
