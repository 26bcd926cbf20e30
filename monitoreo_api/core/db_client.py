# core/db_client.py
import logging
from typing import Optional

from influxdb_client.client.influxdb_client_async import InfluxDBClientAsync

from ..core.config import settings

logger = logging.getLogger(__name__)

_async_influx_client: Optional[InfluxDBClientAsync] = None

def get_influxdb_client() -> InfluxDBClientAsync:
    """Obtiene una instancia Singleton del cliente asíncrono de InfluxDB."""
    global _async_influx_client
    if _async_influx_client is None:
        logger.info("Initializing InfluxDB async client for %s", settings.INFLUXDB_URL)
        _async_influx_client = InfluxDBClientAsync(
            url=settings.INFLUXDB_URL,
            token=settings.INFLUXDB_TOKEN,
            org=settings.INFLUXDB_ORG,
            timeout=settings.INFLUXDB_TIMEOUT_MS,
        )
    return _async_influx_client

async def get_query_api():
    """Obtiene la API de consulta del cliente InfluxDB."""
    client = get_influxdb_client()
    return client.query_api()

async def get_write_api_async():
    """Obtiene la API de escritura asíncrona del cliente InfluxDB."""
    client = get_influxdb_client()
    return client.write_api()


async def close_influxdb_client():
    """Cierra la conexión del cliente InfluxDB si existe."""
    global _async_influx_client
    if _async_influx_client:
        logger.info("Closing InfluxDB async client...")
        await _async_influx_client.close()
        _async_influx_client = None
