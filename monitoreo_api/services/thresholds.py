# services/thresholds.py
import math
from typing import List, Optional

from ..core.exceptions import InvalidThreshold
from ..models.common import DataPoint, MetricCatalogEntry
from ..models.telemetry import ThresholdAnnotation


def resolve_threshold(entry: MetricCatalogEntry, override: Optional[float] = None) -> float:
    """El umbral enviado por el llamador tiene prioridad sobre el del catálogo."""
    if override is None:
        return entry.default_threshold
    # nan/inf no se pueden serializar como número en la respuesta
    if not math.isfinite(override):
        raise InvalidThreshold(override)
    return float(override)


def exceeds(value: float, threshold: float) -> bool:
    return value > threshold


def annotate_series(series: List[DataPoint], threshold: float) -> ThresholdAnnotation:
    """Marca los puntos estrictamente por encima del umbral."""
    return ThresholdAnnotation(
        series=list(series),
        exceeded=[exceeds(p.value, threshold) for p in series],
    )


def threshold_line(series: List[DataPoint], threshold: float) -> List[DataPoint]:
    """Línea de umbral: un punto por cada timestamp de la serie, con valor constante."""
    return [DataPoint(timestamp=p.timestamp, value=threshold) for p in series]
