# services/telemetry_query.py
"""
Consulta de series de una métrica en InfluxDB.

Este módulo solo lee: nunca genera datos de respaldo. Cualquier fallo de acceso a la
base de datos se traduce en StorageUnavailable y es el llamador quien decide qué hacer.
"""
import asyncio
import logging
from datetime import datetime, timezone
from typing import List

import aiohttp
from influxdb_client.client.exceptions import InfluxDBError

from ..core.config import TelemetryConfig
from ..core.enums import MetricType
from ..core.exceptions import StorageUnavailable
from ..models.common import DataPoint, TimeWindow

logger = logging.getLogger(__name__)

# Errores de red/cliente que consideramos "base de datos no disponible"
STORAGE_ERRORS = (InfluxDBError, aiohttp.ClientError, asyncio.TimeoutError, OSError)


def field_for_metric(metric_type: MetricType) -> str:
    """Nombre del campo de InfluxDB donde se guarda cada métrica."""
    if metric_type is MetricType.TEMPERATURE:
        return "temperatura"
    elif metric_type is MetricType.HUMIDITY:
        return "humedad"
    elif metric_type is MetricType.POWER_CONSUMPTION:
        return "consumo_kwh"
    elif metric_type is MetricType.RMS_CURRENT:
        return "corriente_rms"
    elif metric_type is MetricType.AIR_QUALITY:
        return "calidad_aire"
    raise ValueError(f"No field mapping for metric {metric_type!r}")


def _format_instant(instant: datetime) -> str:
    """Formatea a RFC3339 con 'Z' (UTC)."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc).isoformat(timespec='microseconds').replace('+00:00', 'Z')


def build_flux_query(metric_type: MetricType, window: TimeWindow, config: TelemetryConfig) -> str:
    field = field_for_metric(metric_type)
    return f'''
        from(bucket: "{config.bucket}")
          |> range(start: {_format_instant(window.start)})
          |> filter(fn: (r) => r["_measurement"] == "{config.measurement}")
          |> filter(fn: (r) => r["_field"] == "{field}")
          |> group()
          |> sort(columns: ["_time"])
        '''


def _to_data_point(record) -> DataPoint:
    time = record.get_time()
    value = record.get_value()
    if time is None or isinstance(value, bool) or not isinstance(value, (int, float)):
        raise StorageUnavailable(f"Unexpected record in telemetry query: {record.values}")
    return DataPoint(timestamp=time, value=float(value))


async def query_metric_series(
    metric_type: MetricType, window: TimeWindow, config: TelemetryConfig, query_api
) -> List[DataPoint]:
    """
    Devuelve los puntos (timestamp, valor) de la métrica con timestamp >= window.start,
    en orden ascendente. Una ventana sin datos devuelve una lista vacía.
    Un único intento, sin reintentos.
    """
    flux_query = build_flux_query(metric_type, window, config)
    logger.debug("Telemetry query for %s:\n%s", metric_type.value, flux_query)

    try:
        result = await query_api.query(query=flux_query, org=config.org)
    except STORAGE_ERRORS as e:
        raise StorageUnavailable(f"InfluxDB query failed for '{metric_type.value}': {e}") from e

    points: List[DataPoint] = []
    for table in result or []:
        for record in table.records:
            points.append(_to_data_point(record))

    points.sort(key=lambda p: p.timestamp)
    logger.debug("Fetched %d points for %s since %s", len(points), metric_type.value, window.start)
    return points
