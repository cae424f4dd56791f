"""Integration tests for FastAPI endpoints."""
import xml.etree.ElementTree as ET
import pytest
from fastapi.testclient import TestClient
from terbilang_api.api.app import create_app
from terbilang_api.config import Settings


@pytest.mark.integration
class TestHealthEndpoint:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["service"] == "terbilang-api"


@pytest.mark.integration
class TestTerbilangGet:
    def test_basic(self, client):
        response = client.get("/terbilang", params={"angka": "1234567"})
        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is True
        assert data["terbilang"] == (
            "satu juta dua ratus tiga puluh empat ribu lima ratus enam puluh tujuh"
        )
        assert data["normalized"] == "1234567"
        assert data["negative"] is False
        assert data["integer"] == "1234567"
        assert data["fraction"] == ""
        assert "terbilang_idr" not in data

    def test_q_param_with_separators(self, client):
        data = client.get("/terbilang", params={"q": "1.234,56"}).json()
        assert data["normalized"] == "1234.56"
        assert data["terbilang"] == "seribu dua ratus tiga puluh empat koma lima enam"

    def test_negative(self, client):
        data = client.get("/terbilang", params={"angka": "-2001"}).json()
        assert data["terbilang"] == "minus dua ribu satu"
        assert data["negative"] is True

    def test_title_case(self, client):
        data = client.get("/terbilang", params={"angka": "1000", "case": "title"}).json()
        assert data["terbilang"] == "Seribu"

    def test_currency(self, client):
        data = client.get("/terbilang", params={"angka": "12500.75", "currency": "idr"}).json()
        assert "tujuh puluh lima sen" in data["terbilang_idr"]
        assert data["sen"] == 75
        assert data["sen_terbilang"] == "tujuh puluh lima sen"

    def test_currency_alias_without_sen(self, client):
        data = client.get("/terbilang", params={"angka": "999.996", "currency": "Rupiah"}).json()
        assert data["terbilang_idr"] == "seribu rupiah"
        assert "sen" not in data
        assert "sen_terbilang" not in data

    def test_currency_upper_case(self, client):
        data = client.get(
            "/terbilang", params={"angka": "1,5", "currency": "idr", "case": "upper"}
        ).json()
        assert data["terbilang_idr"] == "SATU RUPIAH LIMA PULUH SEN"
        assert data["sen_terbilang"] == "LIMA PULUH SEN"

    def test_unknown_currency_ignored(self, client):
        data = client.get("/terbilang", params={"angka": "5", "currency": "usd"}).json()
        assert "terbilang_idr" not in data

    def test_missing_input(self, client):
        response = client.get("/terbilang")
        assert response.status_code == 400
        data = response.json()
        assert data["ok"] is False
        assert data["error"] == "EMPTY_INPUT"
        assert data["detail"]
        assert "angka" in data["hint"]

    def test_invalid_integer(self, client):
        response = client.get("/terbilang", params={"angka": "12a3"})
        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_INTEGER_PART"

    def test_too_large(self, client):
        response = client.get("/terbilang", params={"angka": "1" + "0" * 21})
        assert response.status_code == 400
        assert response.json()["error"] == "UNSUPPORTED_MAGNITUDE"

    def test_pretty(self, client):
        response = client.get("/terbilang", params={"angka": "7", "pretty": ""})
        assert "\n  " in response.text
        assert response.json()["terbilang"] == "tujuh"

    def test_xml(self, client):
        response = client.get("/terbilang", params={"angka": "-2001", "format": "xml"})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/xml")
        root = ET.fromstring(response.text.split("\n", 1)[1])
        assert root.findtext("terbilang") == "minus dua ribu satu"
        assert root.findtext("negative") == "true"

    def test_xml_error(self, client):
        response = client.get("/terbilang", params={"angka": "x", "format": "xml"})
        assert response.status_code == 400
        root = ET.fromstring(response.text.split("\n", 1)[1])
        assert root.findtext("error") == "INVALID_INTEGER_PART"


@pytest.mark.integration
class TestTerbilangPost:
    def test_json_body(self, client):
        response = client.post("/terbilang", json={"angka": "1.000,25"})
        assert response.status_code == 200
        data = response.json()
        assert data["normalized"] == "1000.25"
        assert data["terbilang"] == "seribu koma dua lima"

    def test_body_q_and_options(self, client):
        data = client.post(
            "/terbilang", json={"q": "2000", "case": "sentence", "currency": "idr"}
        ).json()
        assert data["terbilang"] == "Dua ribu"
        assert data["terbilang_idr"] == "Dua ribu rupiah"

    def test_numeric_body_value(self, client):
        data = client.post("/terbilang", json={"angka": 0}).json()
        assert data["terbilang"] == "nol"

    def test_query_wins_over_body(self, client):
        data = client.post("/terbilang?angka=3", json={"angka": "4"}).json()
        assert data["terbilang"] == "tiga"

    def test_broken_body_is_empty_input(self, client):
        response = client.post(
            "/terbilang", content=b"{not json", headers={"content-type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["error"] == "EMPTY_INPUT"


@pytest.mark.integration
class TestTerbilangOptions:
    def test_options(self, client):
        response = client.options("/terbilang")
        assert response.status_code == 200
        assert response.json() == {"ok": True}

    def test_cors_preflight(self, client):
        response = client.options("/terbilang", headers={
            "Origin": "https://example.com",
            "Access-Control-Request-Method": "POST",
        })
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_cors_header_on_get(self, client):
        response = client.get(
            "/terbilang", params={"angka": "1"}, headers={"Origin": "https://example.com"}
        )
        assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.integration
class TestPlainEndpoint:
    def test_words(self, client):
        response = client.get("/terbilang/plain", params={"angka": "1.500.000"})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "satu juta lima ratus ribu"

    def test_invalid(self, client):
        response = client.get("/terbilang/plain", params={"angka": "abc"})
        assert response.status_code == 400
        assert response.text == "Input tidak valid"


@pytest.mark.integration
class TestSettingsDrivenBehaviour:
    def test_default_case_from_settings(self):
        app = create_app(Settings(default_case="title", log_level="WARNING"))
        client = TestClient(app)
        data = client.get("/terbilang", params={"angka": "2001"}).json()
        assert data["terbilang"] == "Dua Ribu Satu"

    def test_xml_disabled(self):
        app = create_app(Settings(enable_xml=False, log_level="WARNING"))
        client = TestClient(app)
        response = client.get("/terbilang", params={"angka": "1", "format": "xml"})
        assert response.headers["content-type"].startswith("application/json")


@pytest.mark.integration
class TestUnhandledErrors:
    def test_unexpected_exception_returns_500(self, client, monkeypatch):
        def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("terbilang_api.api.routes.terbilang.convert", explode)
        response = client.get("/terbilang", params={"angka": "1", "format": "xml"})
        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}

    def test_next_request_unaffected(self, client, monkeypatch):
        def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("terbilang_api.api.routes.terbilang.convert", explode)
        assert client.get("/terbilang", params={"angka": "1"}).status_code == 500
        monkeypatch.undo()
        assert client.get("/terbilang", params={"angka": "1"}).json()["terbilang"] == "satu"
