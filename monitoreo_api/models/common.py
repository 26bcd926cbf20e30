# models/common.py
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional
from datetime import datetime
from ..core.enums import MetricType

class DataPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    value: float

class ChartPoint(BaseModel):
    """Punto en el formato que consume el gráfico: x = instante, y = valor."""
    x: datetime
    y: float

    @classmethod
    def from_data_point(cls, point: DataPoint) -> "ChartPoint":
        return cls(x=point.timestamp, y=point.value)

class TimeWindow(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def check_order(self):
        if self.start >= self.end:
            raise ValueError("window start must be before end")
        return self

class MetricCatalogEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    metric_type: MetricType
    label: str
    unit: str
    baseline: float
    min: Optional[float] = None  # None = sin límite
    max: Optional[float] = None
    default_threshold: float = Field(..., description="Umbral de alerta por defecto")

    @model_validator(mode="after")
    def check_bounds(self):
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"{self.metric_type.value}: min > max")
        for name, value in (("baseline", self.baseline), ("default_threshold", self.default_threshold)):
            if self.min is not None and value < self.min:
                raise ValueError(f"{self.metric_type.value}: {name} below min")
            if self.max is not None and value > self.max:
                raise ValueError(f"{self.metric_type.value}: {name} above max")
        return self

    def clamp(self, value: float) -> float:
        """Recorta un valor al rango válido de la métrica (si lo tiene)."""
        if self.min is not None:
            value = max(self.min, value)
        if self.max is not None:
            value = min(self.max, value)
        return value
