"""
Funciones auxiliares generales
"""
import time
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from config import LOCAL_TZ_NAME

LOCAL_TZ = ZoneInfo(LOCAL_TZ_NAME)


def is_nan(x):
    """Verifica si un valor es NaN"""
    if x is None:
        return True
    return x != x


def as_local(ts: datetime, tz=None) -> datetime:
    """Pasa un instante a hora local (los naive se consideran UTC)"""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(tz or LOCAL_TZ)


def fmt_day(ts: datetime, tz=None) -> str:
    """Clave de día 'dd.mm' en hora local"""
    return as_local(ts, tz).strftime("%d.%m")


def es_datetime_from_epoch(epoch: float) -> str:
    """Convierte epoch a fecha y hora local"""
    dt = datetime.fromtimestamp(epoch, tz=LOCAL_TZ)
    return dt.strftime("%d-%m-%Y %H:%M:%S")


def age_string(epoch: float) -> str:
    """Calcula la edad de un dato desde epoch"""
    diff_s = int(time.time() - epoch)
    if diff_s < 60:
        return f"{diff_s}s"
    if diff_s < 3600:
        return f"{diff_s // 60}m"
    return f"{diff_s // 3600}h {(diff_s % 3600) // 60}m"


def fmt_score(x, decimals=2):
    """Formatea una puntuación 0-1"""
    if is_nan(x):
        return "—"
    return f"{x:.{decimals}f}"
