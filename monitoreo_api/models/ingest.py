# models/ingest.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

class SensorReading(BaseModel):
    """
    Lectura completa de los sensores recibida en el endpoint de ingesta.
    Los nombres en JSON son los mismos tokens que usa la consulta (consumoKwh, ...).
    """
    # Si el origen no envía timestamp se usa la hora de recepción
    timestamp: Optional[datetime] = Field(None, description="Timestamp (ISO 8601 UTC preferible) de la medición.")

    temperatura: float = Field(..., description="Temperatura en °C.")
    humedad: float = Field(..., description="Humedad relativa en %.")
    consumo_kwh: float = Field(..., alias="consumoKwh", description="Consumo de energía en kWh.")
    corriente_rms: float = Field(..., alias="corrienteRms", description="Corriente RMS en A.")
    calidad_aire: int = Field(..., alias="calidadAire", description="Índice de calidad del aire (entero).")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "timestamp": "2024-03-01T10:30:00Z",
                    "temperatura": 23.4,
                    "humedad": 55.1,
                    "consumoKwh": 4.82,
                    "corrienteRms": 9.75,
                    "calidadAire": 87
                }
            ]
        }
    )
