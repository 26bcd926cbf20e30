# core/logging_config.py
import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

def setup_logging(level: str = "INFO") -> None:
    """Configura el logger raíz con el nivel indicado (p. ej. settings.LOG_LEVEL)."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    # influxdb_client es muy verboso en DEBUG
    logging.getLogger("influxdb_client").setLevel(max(numeric_level, logging.WARNING))
