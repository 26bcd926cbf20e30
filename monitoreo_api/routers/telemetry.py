# routers/telemetry.py
from fastapi import APIRouter, Depends, Path, Query, Response
from typing import List, Optional

from ..core.config import Settings, TelemetryConfig
from ..core.dependencies import get_config, get_optional_query_api, get_settings
from ..models.common import ChartPoint, MetricCatalogEntry
from ..models.telemetry import AnnotatedSeries, TelemetrySeries
from ..services.catalog import list_catalog
from ..services.data_provider import build_annotated_series, get_metric_series

DATA_SOURCE_HEADER = "X-Data-Source"

router = APIRouter(tags=["Telemetry"])


def _tag_source(response: Response, series: TelemetrySeries, app_settings: Settings) -> None:
    # Solo en depuración: permite saber si la serie es real o sintética
    if app_settings.DEBUG:
        response.headers[DATA_SOURCE_HEADER] = series.source.value


@router.get("/data/{metric_type}", response_model=List[ChartPoint], summary="Get Metric Series")
async def read_metric_series(
    response: Response,
    metric_type: str = Path(..., description="Tipo de dato: temperatura, humedad, consumoKwh, corrienteRms o calidadAire"),
    time_frame: Optional[str] = Query(None, alias="timeFrame", description="hour, day, week, month o year (por defecto day)"),
    threshold: Optional[float] = Query(None, description="Umbral que sustituye al del catálogo"),
    config: TelemetryConfig = Depends(get_config),
    query_api=Depends(get_optional_query_api),
    app_settings: Settings = Depends(get_settings),
):
    """Devuelve la serie [{x, y}] de una métrica en orden ascendente."""
    series = await get_metric_series(
        metric_type, time_frame, config, query_api=query_api, threshold_override=threshold
    )
    _tag_source(response, series, app_settings)
    return series.chart_points()


@router.get("/data/{metric_type}/annotated", response_model=AnnotatedSeries, summary="Get Metric Series With Threshold")
async def read_annotated_series(
    response: Response,
    metric_type: str = Path(..., description="Tipo de dato"),
    time_frame: Optional[str] = Query(None, alias="timeFrame"),
    threshold: Optional[float] = Query(None),
    config: TelemetryConfig = Depends(get_config),
    query_api=Depends(get_optional_query_api),
    app_settings: Settings = Depends(get_settings),
):
    """Serie junto con el umbral aplicado, los puntos que lo superan y la línea de umbral."""
    series = await get_metric_series(
        metric_type, time_frame, config, query_api=query_api, threshold_override=threshold
    )
    _tag_source(response, series, app_settings)
    return build_annotated_series(series)


@router.get("/metrics", response_model=List[MetricCatalogEntry], summary="List Metric Catalog")
async def read_metric_catalog():
    return list_catalog()
