# services/data_provider.py
import logging
from datetime import datetime, timezone
from random import Random
from typing import Optional, Union

from influxdb_client import Point

from ..core.config import TelemetryConfig
from ..core.enums import DataSource, MetricType, TimeFrame
from ..core.exceptions import StorageUnavailable
from ..models.common import ChartPoint
from ..models.ingest import SensorReading
from ..models.telemetry import AnnotatedSeries, TelemetrySeries
from .catalog import get_catalog_entry, parse_metric_type
from .fallback import synthesize_series
from .telemetry_query import STORAGE_ERRORS, field_for_metric, query_metric_series
from .thresholds import annotate_series, resolve_threshold, threshold_line
from .time_frames import resolve_time_frame, resolve_window

logger = logging.getLogger(__name__)


# --- Funciones de ayuda ---

def get_unit_for_metric(metric_type: Union[MetricType, str]) -> str:
    """Devuelve la unidad de una métrica del catálogo."""
    return get_catalog_entry(metric_type).unit

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# --- Funciones de recuperación de datos ---

async def get_metric_series(
    metric_type: Union[MetricType, str],
    time_frame: Union[TimeFrame, str, None],
    config: TelemetryConfig,
    query_api=None,
    threshold_override: Optional[float] = None,
    now: Optional[datetime] = None,
    rng: Optional[Random] = None,
) -> TelemetrySeries:
    """
    Obtiene la serie de una métrica para un período.

    Consulta la base de datos salvo que la configuración pida datos sintéticos siempre.
    Si la base de datos no está disponible se devuelve una serie sintética con el mismo
    formato; el tipo de dato inválido (InvalidMetricType) se propaga sin respaldo.
    """
    metric = parse_metric_type(metric_type)
    frame = resolve_time_frame(time_frame)
    now = now or _utcnow()
    window = resolve_window(frame, now)
    entry = get_catalog_entry(metric)
    threshold = resolve_threshold(entry, threshold_override)

    def _synthetic() -> TelemetrySeries:
        points = synthesize_series(metric, frame, entry, now, threshold=threshold, rng=rng)
        return TelemetrySeries(
            metric_type=metric, time_frame=frame, window=window,
            threshold=threshold, points=points, source=DataSource.SYNTHETIC,
        )

    if config.always_synthesize or query_api is None:
        logger.debug("Synthesizing %s/%s (storage disabled)", metric.value, frame.value)
        return _synthetic()

    try:
        points = await query_metric_series(metric, window, config, query_api)
    except StorageUnavailable as e:
        logger.warning("Storage unavailable for %s/%s, using synthetic data: %s", metric.value, frame.value, e)
        return _synthetic()

    return TelemetrySeries(
        metric_type=metric, time_frame=frame, window=window,
        threshold=threshold, points=points, source=DataSource.STORAGE,
    )


def build_annotated_series(series: TelemetrySeries) -> AnnotatedSeries:
    """Añade a la serie las marcas de umbral superado y la línea de umbral."""
    annotation = annotate_series(series.points, series.threshold)
    return AnnotatedSeries(
        metric_type=series.metric_type,
        time_frame=series.time_frame,
        unit=get_unit_for_metric(series.metric_type),
        threshold=series.threshold,
        series=series.chart_points(),
        exceeded=annotation.exceeded,
        threshold_line=[ChartPoint.from_data_point(p) for p in threshold_line(series.points, series.threshold)],
    )


# --- Escritura ---

def reading_to_point(reading: SensorReading, measurement: str) -> Point:
    """Convierte una lectura en un Point de InfluxDB con un campo por métrica."""
    values = {
        MetricType.TEMPERATURE: reading.temperatura,
        MetricType.HUMIDITY: reading.humedad,
        MetricType.POWER_CONSUMPTION: reading.consumo_kwh,
        MetricType.RMS_CURRENT: reading.corriente_rms,
        MetricType.AIR_QUALITY: reading.calidad_aire,
    }
    point = Point(measurement)
    for metric, value in values.items():
        point.field(field_for_metric(metric), value)
    point.time(reading.timestamp or _utcnow())
    return point


async def write_sensor_reading(reading: SensorReading, config: TelemetryConfig, write_api) -> None:
    """Escribe una lectura en InfluxDB. Lanza StorageUnavailable si falla la escritura."""
    point = reading_to_point(reading, config.measurement)
    logger.debug("Writing point: %s", point.to_line_protocol())
    try:
        await write_api.write(bucket=config.bucket, org=config.org, record=point)
    except STORAGE_ERRORS as e:
        raise StorageUnavailable(f"Failed to write reading to InfluxDB: {e}") from e
