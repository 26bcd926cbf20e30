# services/fallback.py
"""
Generación de series sintéticas para cuando no hay datos reales disponibles.

La forma de la serie (número de puntos, intervalo, timestamps) depende solo del período
y de 'now'; el azar afecta únicamente a los valores. Cada serie incluye una zona por
encima del umbral para que la línea de umbral del gráfico tenga algo que mostrar.
"""
import random
from datetime import datetime
from typing import List, Optional, Union

from ..core.enums import MetricType, TimeFrame
from ..models.common import DataPoint, MetricCatalogEntry
from .time_frames import synthetic_shape_for

VARIATION = 10.0
EXCURSION_FACTOR = 1.2
EXCURSION_START = 0.7
EXCURSION_END = 0.8

# Métricas cuyo valor sintético se recorta al rango del catálogo
CLAMPED_METRICS = (MetricType.HUMIDITY, MetricType.AIR_QUALITY, MetricType.TEMPERATURE)


def in_excursion(index: int, point_count: int) -> bool:
    return EXCURSION_START * point_count < index < EXCURSION_END * point_count


def synthesize_series(
    metric_type: MetricType,
    time_frame: Union[TimeFrame, str, None],
    entry: MetricCatalogEntry,
    now: datetime,
    threshold: Optional[float] = None,
    rng: Optional[random.Random] = None,
) -> List[DataPoint]:
    """
    Genera una serie sintética con el mismo formato que una consulta real.

    Args:
        metric_type: Métrica a generar.
        time_frame: Período; uno desconocido se trata como 'day'.
        entry: Entrada del catálogo con el valor base y el rango de la métrica.
        now: Instante de referencia; el último punto queda un intervalo antes.
        threshold: Umbral usado para la excursión (por defecto, el del catálogo).
        rng: Generador aleatorio; permite fijar la semilla en pruebas.

    Returns:
        Lista de DataPoint en orden ascendente.
    """
    rng = rng or random.Random()
    if threshold is None:
        threshold = entry.default_threshold
    point_count, interval = synthetic_shape_for(time_frame)

    points: List[DataPoint] = []
    for i in range(point_count):
        timestamp = now - (point_count - i) * interval
        value = entry.baseline + rng.uniform(-VARIATION, VARIATION)

        if in_excursion(i, point_count):
            value = threshold * EXCURSION_FACTOR

        if metric_type in CLAMPED_METRICS:
            value = entry.clamp(value)

        points.append(DataPoint(timestamp=timestamp, value=round(value, 1)))
    return points
