# core/enums.py
from enum import Enum

class MetricType(str, Enum):
    """Magnitudes medidas por los sensores. El valor es el token usado en la API."""
    TEMPERATURE = "temperatura"
    HUMIDITY = "humedad"
    POWER_CONSUMPTION = "consumoKwh"
    RMS_CURRENT = "corrienteRms"
    AIR_QUALITY = "calidadAire"

class TimeFrame(str, Enum):
    """Períodos simbólicos de consulta hacia atrás desde 'ahora'."""
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

class DataSource(str, Enum):
    """Procedencia de una serie: base de datos o generada como respaldo."""
    STORAGE = "storage"
    SYNTHETIC = "synthetic"
