# routers/ingest.py
from fastapi import APIRouter, Body, Depends, status

from ..core.config import TelemetryConfig
from ..core.dependencies import get_config, get_write_api
from ..models.ingest import SensorReading
from ..services.data_provider import write_sensor_reading

router = APIRouter(tags=["Data Ingestion"])

@router.post(
    "/data",
    status_code=status.HTTP_201_CREATED,
    summary="Ingest Sensor Reading",
    description="Receives a full sensor reading and writes it to the time-series database."
)
async def ingest_reading_endpoint(
    reading: SensorReading = Body(..., description="Lectura de todos los sensores"),
    config: TelemetryConfig = Depends(get_config),
    write_api=Depends(get_write_api),
):
    """
    Endpoint para recibir y almacenar lecturas de sensores.
    Si la base de datos no responde, el manejador de StorageUnavailable devuelve 503.
    """
    await write_sensor_reading(reading, config, write_api)
    return {"success": True, "message": "Datos recibidos correctamente"}
