# services/catalog.py
from typing import Dict, List, Union

from ..core.enums import MetricType
from ..core.exceptions import InvalidMetricType
from ..models.common import MetricCatalogEntry

# Valores de referencia del panel: base para datos sintéticos, rango válido y umbral de alerta
METRIC_CATALOG: Dict[MetricType, MetricCatalogEntry] = {
    MetricType.TEMPERATURE: MetricCatalogEntry(
        metric_type=MetricType.TEMPERATURE, label="Temperatura", unit="°C",
        baseline=22, min=-10, max=50, default_threshold=30,
    ),
    MetricType.HUMIDITY: MetricCatalogEntry(
        metric_type=MetricType.HUMIDITY, label="Humedad", unit="%",
        baseline=60, min=0, max=100, default_threshold=80,
    ),
    MetricType.POWER_CONSUMPTION: MetricCatalogEntry(
        metric_type=MetricType.POWER_CONSUMPTION, label="Consumo", unit="kWh",
        baseline=5, default_threshold=10,
    ),
    MetricType.RMS_CURRENT: MetricCatalogEntry(
        metric_type=MetricType.RMS_CURRENT, label="Corriente RMS", unit="A",
        baseline=10, default_threshold=15,
    ),
    MetricType.AIR_QUALITY: MetricCatalogEntry(
        metric_type=MetricType.AIR_QUALITY, label="Calidad del aire", unit="AQI",
        baseline=80, min=0, max=500, default_threshold=150,
    ),
}


def parse_metric_type(token: Union[MetricType, str, None]) -> MetricType:
    """Valida el tipo de dato recibido contra el conjunto cerrado de métricas."""
    if isinstance(token, MetricType):
        return token
    try:
        return MetricType(token)
    except ValueError:
        raise InvalidMetricType(token) from None


def get_catalog_entry(metric_type: Union[MetricType, str]) -> MetricCatalogEntry:
    return METRIC_CATALOG[parse_metric_type(metric_type)]


def list_catalog() -> List[MetricCatalogEntry]:
    return [METRIC_CATALOG[m] for m in MetricType]
