# core/config.py
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Configuración de la aplicación cargada desde .env o variables de entorno."""
    PROJECT_NAME: str = "Monitoreo API"
    API_V1_STR: str = "/api/v1"

    # Configuración InfluxDB
    INFLUXDB_URL: str = "http://localhost:8086"
    INFLUXDB_TOKEN: str = ""
    INFLUXDB_ORG: str = "monitoreo"
    INFLUXDB_BUCKET: str = "sensores"
    INFLUXDB_MEASUREMENT: str = "medicion"
    INFLUXDB_TIMEOUT_MS: int = 5000

    # Si es True nunca se consulta la base de datos: todas las series son sintéticas
    ALWAYS_SYNTHESIZE: bool = False

    # Configuración Opcional
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=False
    )


class TelemetryConfig(BaseModel):
    """Configuración que los servicios reciben explícitamente en cada consulta."""
    bucket: str
    org: str
    measurement: str
    always_synthesize: bool = False


def get_telemetry_config(source: Settings) -> TelemetryConfig:
    return TelemetryConfig(
        bucket=source.INFLUXDB_BUCKET,
        org=source.INFLUXDB_ORG,
        measurement=source.INFLUXDB_MEASUREMENT,
        always_synthesize=source.ALWAYS_SYNTHESIZE,
    )

settings = Settings()
