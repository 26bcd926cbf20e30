"""Tests for the development seed data generator."""
import random
from datetime import timedelta

from monitoreo_api.seed import generate_random_reading, generate_readings


def test_generate_readings_every_five_minutes(now):
    readings = generate_readings(now, days=1, interval=timedelta(minutes=5), rng=random.Random(0))

    assert len(readings) == 24 * 12 + 1
    assert readings[0].timestamp == now - timedelta(days=1)
    assert readings[-1].timestamp == now


def test_random_reading_ranges(now):
    rng = random.Random(9)
    for _ in range(200):
        reading = generate_random_reading(now, rng)
        assert 15 <= reading.temperatura <= 35
        assert 40 <= reading.humedad <= 90
        assert 1 <= reading.consumo_kwh <= 11
        assert 5 <= reading.corriente_rms <= 20
        assert 20 <= reading.calidad_aire < 420
        assert isinstance(reading.calidad_aire, int)
