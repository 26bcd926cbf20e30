"""Shared test fixtures."""
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from influxdb_client.client.flux_table import FluxRecord, FluxTable

from monitoreo_api.core.config import TelemetryConfig


def make_tables(rows):
    """Build an InfluxDB query result from (timestamp, value) rows."""
    table = FluxTable()
    for timestamp, value in rows:
        table.records.append(FluxRecord(0, {"_time": timestamp, "_value": value, "_field": "temperatura"}))
    return [table]


@pytest.fixture
def now():
    return datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def config():
    return TelemetryConfig(bucket="sensores", org="monitoreo", measurement="medicion")


@pytest.fixture
def synth_config():
    return TelemetryConfig(bucket="sensores", org="monitoreo", measurement="medicion", always_synthesize=True)


@pytest.fixture
def empty_query_api():
    """Query API of a reachable but empty store."""
    api = AsyncMock()
    api.query.return_value = []
    return api


@pytest.fixture
def failing_query_api():
    """Query API whose store cannot be reached."""
    api = AsyncMock()
    api.query.side_effect = ConnectionError("connection refused")
    return api
