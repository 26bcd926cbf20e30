# core/dependencies.py
# Dependencias de FastAPI: la configuración se resuelve aquí una vez por petición
# y se inyecta en los servicios, que nunca leen 'settings' directamente.
from fastapi import Depends

from .config import Settings, TelemetryConfig, get_telemetry_config, settings
from .db_client import get_query_api, get_write_api_async

def get_settings() -> Settings:
    return settings

def get_config(app_settings: Settings = Depends(get_settings)) -> TelemetryConfig:
    return get_telemetry_config(app_settings)

async def get_optional_query_api(config: TelemetryConfig = Depends(get_config)):
    """API de consulta, o None si el despliegue trabaja solo con datos sintéticos."""
    if config.always_synthesize:
        return None
    return await get_query_api()

async def get_write_api():
    return await get_write_api_async()
