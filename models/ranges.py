"""
Filtrado por ventana temporal y agregados de la serie de índice
"""
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from config import METRIC_KEYS, STATS_DECIMALS, TREND_DAYS
from providers.types import SeriesRecord
from utils.helpers import LOCAL_TZ, fmt_day
from .anomaly import clamp01


RANGE_PRESETS = {
    "24h": timedelta(hours=24),
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
}


def to_instant(value) -> Optional[datetime]:
    """
    Normaliza un límite de ventana a datetime con zona.

    None o "" = sin límite. Los valores sin zona se interpretan en hora local.
    """
    if value is None:
        return None
    if isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        value = datetime.fromisoformat(raw)
    if not isinstance(value, datetime):
        raise TypeError(f"Límite de ventana no válido: {value!r}")
    if value.tzinfo is None:
        value = value.replace(tzinfo=LOCAL_TZ)
    return value


def filter_by_range(records: Iterable[SeriesRecord], start=None, end=None) -> List[SeriesRecord]:
    """Registros con start <= t <= end (ambos inclusivos; ausente = infinito)."""
    lo = to_instant(start)
    hi = to_instant(end)
    return [
        r for r in records
        if (lo is None or r.timestamp >= lo) and (hi is None or r.timestamp <= hi)
    ]


def quick_stats(records: Iterable[SeriesRecord]) -> Dict[str, float]:
    """
    Mínimo, máximo y media del índice acotado, a 3 decimales.

    Una ventana sin datos devuelve ceros: es un estado válido, no un error.
    """
    values = pd.Series([clamp01(r.index) for r in records], dtype="float64")
    if values.empty:
        return {"min": 0.0, "max": 0.0, "avg": 0.0}
    return {
        "min": round(float(values.min()), STATS_DECIMALS),
        "max": round(float(values.max()), STATS_DECIMALS),
        "avg": round(float(values.mean()), STATS_DECIMALS),
    }


def daily_average(records: Iterable[SeriesRecord], tz=None) -> List[Dict]:
    """
    Media diaria del índice agrupando por día local 'dd.mm'.

    Los días salen en el orden en que aparecen por primera vez en la entrada.
    """
    rows = [(fmt_day(r.timestamp, tz), clamp01(r.index)) for r in records]
    if not rows:
        return []
    df = pd.DataFrame(rows, columns=["day", "index"])
    means = df.groupby("day", sort=False)["index"].mean()
    return [
        {"day": day, "avg_index": round(float(v), STATS_DECIMALS)}
        for day, v in means.items()
    ]


def _now(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    return to_instant(now)


def preset_window(preset: str, now: Optional[datetime] = None) -> Tuple[Optional[datetime], Optional[datetime]]:
    """
    Ventana (desde, hasta) de un preajuste: '24h', '7d', '30d' o 'all'.
    """
    if preset == "all":
        return None, None
    if preset not in RANGE_PRESETS:
        raise ValueError(f"Preajuste de rango desconocido: {preset}")
    ref = _now(now)
    return ref - RANGE_PRESETS[preset], ref


def last_days_trend(records: Iterable[SeriesRecord], days: int = TREND_DAYS,
                    now: Optional[datetime] = None, tz=None) -> List[Dict]:
    """Media diaria de los últimos `days` días (datos del gráfico de tendencia)."""
    ref = _now(now)
    window = filter_by_range(records, ref - timedelta(days=days), ref)
    return daily_average(window, tz=tz)


def records_to_frame(records: Iterable[SeriesRecord], tz=None) -> pd.DataFrame:
    """DataFrame con una fila por registro (gráficos y exportación CSV)."""
    rows = []
    for r in records:
        row = {
            "timestamp": r.timestamp.astimezone(tz or LOCAL_TZ),
            "point_id": r.point_id,
            "point_name": r.point_name,
            "kind": r.kind,
            "index": clamp01(r.index),
        }
        for key in METRIC_KEYS:
            row[key] = (r.metrics or {}).get(key, float("nan"))
        rows.append(row)
    columns = ["timestamp", "point_id", "point_name", "kind", "index", *METRIC_KEYS]
    return pd.DataFrame(rows, columns=columns)
