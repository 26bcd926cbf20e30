# models/telemetry.py
from pydantic import BaseModel, Field
from typing import List
from ..core.enums import DataSource, MetricType, TimeFrame
from ..models.common import ChartPoint, DataPoint, TimeWindow

class TelemetrySeries(BaseModel):
    """Resultado interno de una consulta. 'source' no forma parte de la respuesta HTTP."""
    metric_type: MetricType
    time_frame: TimeFrame
    window: TimeWindow
    threshold: float
    points: List[DataPoint] = Field(default_factory=list)
    source: DataSource

    def chart_points(self) -> List[ChartPoint]:
        return [ChartPoint.from_data_point(p) for p in self.points]

class ThresholdAnnotation(BaseModel):
    series: List[DataPoint]
    exceeded: List[bool]

class AnnotatedSeries(BaseModel):
    metric_type: MetricType
    time_frame: TimeFrame
    unit: str
    threshold: float
    series: List[ChartPoint]
    exceeded: List[bool]
    threshold_line: List[ChartPoint]

