"""
Series temporales sintéticas para la visualización de tendencias

La hoja solo publica la foto actual de cada estación; no hay histórico.
Estas series oscilan suavemente alrededor del valor actual para dibujar
una tendencia. Son deterministas: misma estación + mismo "now" = misma serie.
"""
from datetime import datetime, timedelta, timezone
from typing import List, Optional

import numpy as np

from config import (
    SERIES_DAYS, SERIES_POINTS_PER_DAY, SERIES_PHASE_STEP,
    SERIES_NOISE_STATION, SERIES_NOISE_REFERENCE, SERIES_AMPLITUDES,
)
from providers.types import MonitoringPoint, ReferencePoint, SeriesRecord
from .anomaly import clamp01, anomaly_index


def point_seed(point_id: str) -> int:
    """Semilla entera: suma de los códigos de carácter del id."""
    return sum(ord(c) for c in str(point_id))


def _now_utc(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def oscillation(steps: np.ndarray, seed: int, base: float) -> np.ndarray:
    """
    Perturbación suave (sin(phase) + cos(0.7·phase))·base

    Args:
        steps: Índices i (pasos hacia atrás desde "now")
        seed: Semilla del punto
        base: Amplitud base

    Returns:
        Array de perturbaciones, una por paso
    """
    phase = (steps + seed) * SERIES_PHASE_STEP
    return (np.sin(phase) + np.cos(phase * 0.7)) * base


def _timeline(days: int, points_per_day: int, now: Optional[datetime]):
    """Pasos i (de total-1 a 0) e instantes correspondientes, del más antiguo al más reciente."""
    days = int(days)
    points_per_day = int(points_per_day)
    if days < 1 or points_per_day < 1:
        return np.array([], dtype=np.int64), []
    ref = _now_utc(now)
    step = timedelta(hours=24.0 / points_per_day)
    steps = np.arange(days * points_per_day - 1, -1, -1, dtype=np.int64)
    times = [ref - int(i) * step for i in steps]
    return steps, times


def generate_station_series(point: MonitoringPoint, days: int = SERIES_DAYS,
                            points_per_day: int = SERIES_POINTS_PER_DAY,
                            now: Optional[datetime] = None) -> List[SeriesRecord]:
    """
    Serie de una estación: cada métrica se perturba con su amplitud propia,
    se vuelve a acotar y se recalcula el índice en cada punto.
    """
    steps, times = _timeline(days, points_per_day, now)
    noise = oscillation(steps, point_seed(point.id), SERIES_NOISE_STATION)
    base = {key: clamp01((point.metrics or {}).get(key, 0.0)) for key in SERIES_AMPLITUDES}
    out = []

    for t, n in zip(times, noise):
        metrics = {
            key: clamp01(base[key] + float(n) * amp)
            for key, amp in SERIES_AMPLITUDES.items()
        }
        metrics["Cosmic"] = metrics["Muller"]

        out.append(SeriesRecord(
            timestamp=t,
            point_id=point.id,
            point_name=point.name,
            kind="station",
            metrics=metrics,
            index=anomaly_index(metrics),
        ))
    return out


def generate_reference_series(ref: ReferencePoint, days: int = SERIES_DAYS,
                              points_per_day: int = SERIES_POINTS_PER_DAY,
                              now: Optional[datetime] = None) -> List[SeriesRecord]:
    """Serie de una ciudad de referencia: solo índice, sin métricas."""
    steps, times = _timeline(days, points_per_day, now)
    noise = oscillation(steps, point_seed(ref.id), SERIES_NOISE_REFERENCE)
    base = clamp01(ref.ref)

    return [
        SeriesRecord(
            timestamp=t,
            point_id=ref.id,
            point_name=ref.name,
            kind="reference",
            metrics=None,
            index=clamp01(base + float(n)),
        )
        for t, n in zip(times, noise)
    ]
