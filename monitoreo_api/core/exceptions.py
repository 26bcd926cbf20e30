# core/exceptions.py

class MonitoreoError(Exception):
    """Excepción base de la API."""

class InvalidMetricType(MonitoreoError):
    """El tipo de dato solicitado no pertenece al catálogo."""

    def __init__(self, metric_type):
        self.metric_type = metric_type
        super().__init__(f"Tipo de dato inválido: {metric_type}")

class InvalidThreshold(MonitoreoError):
    """El umbral enviado no es un número finito."""

    def __init__(self, threshold):
        self.threshold = threshold
        super().__init__(f"Umbral inválido: {threshold}")

class StorageUnavailable(MonitoreoError):
    """La base de datos no respondió o devolvió datos con un esquema inesperado."""
