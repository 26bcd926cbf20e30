# seed.py
"""
Puebla InfluxDB con lecturas aleatorias para desarrollo.

Uso: python -m monitoreo_api.seed [--days 7] [--interval-minutes 5] [--keep]
"""
import argparse
import asyncio
import logging
import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from .core.config import get_telemetry_config, settings
from .core.db_client import close_influxdb_client, get_influxdb_client
from .core.logging_config import setup_logging
from .models.ingest import SensorReading
from .services.data_provider import reading_to_point

logger = logging.getLogger(__name__)


def generate_random_reading(timestamp: datetime, rng: Optional[random.Random] = None) -> SensorReading:
    """Lectura aleatoria dentro de rangos realistas para cada sensor."""
    rng = rng or random.Random()
    return SensorReading(
        timestamp=timestamp,
        temperatura=round(15 + rng.random() * 20, 1),
        humedad=round(40 + rng.random() * 50, 1),
        consumo_kwh=round(1 + rng.random() * 10, 2),
        corriente_rms=round(5 + rng.random() * 15, 2),
        calidad_aire=int(20 + rng.random() * 400),
    )


def generate_readings(end: datetime, days: int, interval: timedelta, rng: Optional[random.Random] = None) -> List[SensorReading]:
    """Lecturas desde end - days hasta end (incluido), cada 'interval'."""
    readings = []
    current = end - timedelta(days=days)
    while current <= end:
        readings.append(generate_random_reading(current, rng))
        current += interval
    return readings


async def seed(days: int = 7, interval_minutes: int = 5, clear: bool = True) -> int:
    config = get_telemetry_config(settings)
    client = get_influxdb_client()
    end = datetime.now(timezone.utc)
    try:
        if clear:
            logger.info("Deleting existing '%s' data from bucket '%s'", config.measurement, config.bucket)
            await client.delete_api().delete(
                start=datetime(1970, 1, 1, tzinfo=timezone.utc),
                stop=end,
                predicate=f'_measurement="{config.measurement}"',
                bucket=config.bucket,
                org=config.org,
            )

        readings = generate_readings(end, days, timedelta(minutes=interval_minutes))
        logger.info("Inserting %d readings...", len(readings))
        points = [reading_to_point(r, config.measurement) for r in readings]
        await client.write_api().write(bucket=config.bucket, org=config.org, record=points)
        logger.info("Database seeded successfully.")
        return len(readings)
    finally:
        await close_influxdb_client()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Seed InfluxDB with random sensor readings.")
    parser.add_argument("--days", type=int, default=7)
    parser.add_argument("--interval-minutes", type=int, default=5)
    parser.add_argument("--keep", action="store_true", help="Do not delete existing data first")
    args = parser.parse_args(argv)

    setup_logging(settings.LOG_LEVEL)
    asyncio.run(seed(days=args.days, interval_minutes=args.interval_minutes, clear=not args.keep))


if __name__ == "__main__":
    main()
