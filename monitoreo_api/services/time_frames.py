# services/time_frames.py
import logging
from datetime import datetime, timedelta
from typing import Dict, Tuple, Union

from ..core.enums import TimeFrame
from ..models.common import TimeWindow

logger = logging.getLogger(__name__)

DEFAULT_TIME_FRAME = TimeFrame.DAY

# Aproximaciones fijas, no dependen del calendario
LOOKBACK: Dict[TimeFrame, timedelta] = {
    TimeFrame.HOUR: timedelta(hours=1),
    TimeFrame.DAY: timedelta(hours=24),
    TimeFrame.WEEK: timedelta(days=7),
    TimeFrame.MONTH: timedelta(days=30),
    TimeFrame.YEAR: timedelta(days=365),
}

# (número de puntos, intervalo) de las series sintéticas
SYNTHETIC_SHAPE: Dict[TimeFrame, Tuple[int, timedelta]] = {
    TimeFrame.HOUR: (60, timedelta(minutes=1)),
    TimeFrame.DAY: (24, timedelta(hours=1)),
    TimeFrame.WEEK: (7, timedelta(days=1)),
    TimeFrame.MONTH: (30, timedelta(days=1)),
    TimeFrame.YEAR: (12, timedelta(days=30)),
}


def resolve_time_frame(token: Union[TimeFrame, str, None]) -> TimeFrame:
    """Convierte el token recibido en un TimeFrame. Un valor desconocido o ausente equivale a 'day'."""
    if isinstance(token, TimeFrame):
        return token
    if token:
        try:
            return TimeFrame(token)
        except ValueError:
            logger.debug("Unknown time frame '%s', using '%s'", token, DEFAULT_TIME_FRAME.value)
    return DEFAULT_TIME_FRAME


def lookback_for(time_frame: Union[TimeFrame, str, None]) -> timedelta:
    return LOOKBACK[resolve_time_frame(time_frame)]


def synthetic_shape_for(time_frame: Union[TimeFrame, str, None]) -> Tuple[int, timedelta]:
    return SYNTHETIC_SHAPE[resolve_time_frame(time_frame)]


def resolve_window(time_frame: Union[TimeFrame, str, None], now: datetime) -> TimeWindow:
    """Calcula la ventana [now - duración, now] para el período indicado."""
    return TimeWindow(start=now - lookback_for(time_frame), end=now)
