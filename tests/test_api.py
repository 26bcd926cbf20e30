"""HTTP tests for the telemetry and ingestion endpoints."""
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from monitoreo_api.core.config import Settings
from monitoreo_api.core.dependencies import get_optional_query_api, get_settings, get_write_api
from monitoreo_api.main import create_app

from conftest import make_tables

API = "/api/v1"


@pytest.fixture
def query_api():
    api = AsyncMock()
    api.query.return_value = []
    return api


@pytest.fixture
def write_api():
    return AsyncMock()


@pytest.fixture
def app(query_api, write_api):
    application = create_app()
    application.dependency_overrides[get_optional_query_api] = lambda: query_api
    application.dependency_overrides[get_write_api] = lambda: write_api
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)


class TestSeriesEndpoint:

    def test_series_from_storage(self, client, query_api):
        t0 = datetime.now(timezone.utc) - timedelta(minutes=20)
        query_api.query.return_value = make_tables([(t0, 21.0), (t0 + timedelta(minutes=10), 22.5)])

        response = client.get(f"{API}/data/temperatura", params={"timeFrame": "hour"})

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert [p["y"] for p in body] == [21.0, 22.5]
        assert set(body[0]) == {"x", "y"}

    def test_empty_store_returns_empty_list(self, client):
        response = client.get(f"{API}/data/temperatura")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_invalid_metric_type_is_400(self, client, query_api):
        response = client.get(f"{API}/data/pressure")
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "pressure" in response.json()["error"]
        query_api.query.assert_not_awaited()

    def test_storage_failure_falls_back(self, client, query_api):
        query_api.query.side_effect = ConnectionError("refused")

        response = client.get(f"{API}/data/consumoKwh", params={"timeFrame": "week"})

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert len(body) == 7
        assert "X-Data-Source" not in response.headers

    def test_unexpected_failure_is_500(self, client, query_api):
        query_api.query.side_effect = RuntimeError("bug")
        response = client.get(f"{API}/data/humedad")
        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Error al obtener los datos"}

    def test_debug_header_tags_source(self, app, client, query_api):
        app.dependency_overrides[get_settings] = lambda: Settings(DEBUG=True)
        query_api.query.side_effect = ConnectionError("refused")

        response = client.get(f"{API}/data/humedad")

        assert response.headers["X-Data-Source"] == "synthetic"

    def test_always_synthesize_mode(self, app, client):
        app.dependency_overrides[get_settings] = lambda: Settings(ALWAYS_SYNTHESIZE=True, DEBUG=True)
        # Sin override: la dependencia real no debe crear un cliente de InfluxDB
        del app.dependency_overrides[get_optional_query_api]

        response = client.get(f"{API}/data/calidadAire", params={"timeFrame": "year"})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()) == 12
        assert response.headers["X-Data-Source"] == "synthetic"

    def test_annotated_series_with_threshold_override(self, client, query_api):
        query_api.query.side_effect = ConnectionError("refused")

        response = client.get(f"{API}/data/humedad/annotated", params={"threshold": 70})

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["threshold"] == 70
        assert body["unit"] == "%"
        assert len(body["series"]) == len(body["exceeded"]) == len(body["threshold_line"]) == 24
        assert body["exceeded"][17:20] == [True, True, True]
        assert body["series"][18]["y"] == 84.0

    @pytest.mark.parametrize("metric", ["consumoKwh", "humedad"])
    @pytest.mark.parametrize("value", ["nan", "inf", "-inf"])
    def test_non_finite_threshold_is_400(self, app, client, metric, value):
        app.dependency_overrides[get_settings] = lambda: Settings(ALWAYS_SYNTHESIZE=True)

        response = client.get(f"{API}/data/{metric}", params={"timeFrame": "week", "threshold": value})
        annotated = client.get(f"{API}/data/{metric}/annotated", params={"threshold": value})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "Umbral" in response.json()["error"]
        assert annotated.status_code == status.HTTP_400_BAD_REQUEST

    def test_catalog(self, client):
        response = client.get(f"{API}/metrics")
        assert response.status_code == status.HTTP_200_OK
        types = [entry["metric_type"] for entry in response.json()]
        assert types == ["temperatura", "humedad", "consumoKwh", "corrienteRms", "calidadAire"]


class TestIngestEndpoint:

    payload = {
        "temperatura": 23.4,
        "humedad": 55.1,
        "consumoKwh": 4.82,
        "corrienteRms": 9.75,
        "calidadAire": 87,
    }

    def test_ingest_reading(self, client, write_api):
        response = client.post(f"{API}/data", json=self.payload)
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["success"] is True
        write_api.write.assert_awaited_once()

    def test_invalid_body_is_400(self, client, write_api):
        response = client.post(f"{API}/data", json={**self.payload, "calidadAire": "mala"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Datos inválidos"
        write_api.write.assert_not_awaited()

    def test_write_failure_is_503(self, client, write_api):
        write_api.write.side_effect = ConnectionError("refused")
        response = client.post(f"{API}/data", json=self.payload)
        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
