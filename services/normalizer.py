"""
Normalización de lecturas a puntuaciones 0-1 y construcción de estaciones
"""
import logging
import math
from typing import Dict, Optional

from config import RAW_MAXIMA, NEUTRAL_DEFAULTS, METRIC_KEYS, COORD_EPSILON
from models.anomaly import clamp01
from providers.types import MonitoringPoint, RawReadings
from .fields import resolve_field, resolve_field_number

logger = logging.getLogger(__name__)

# métrica -> (campo de puntuación, campo bruto)
METRIC_SOURCES = {
    "ERT": ("ert_score", "ert_raw"),
    "EMF": ("emf_score", "emf_raw"),
    "Radon": ("radon_score", "radon_raw"),
    "Muller": ("muller_score", "muller_raw"),
    "Leaf": ("leaf_score", "leaf_raw"),
}

NEUTRAL_SOURCES = {
    "CO2": "co2_score",
    "CH4": "ch4_score",
}


def normalize_metric(score: Optional[float], raw: Optional[float], raw_max: float) -> float:
    """
    Puntuación de una métrica.

    1. Si la hoja trae puntuación > 0 se usa (acotada).
    2. Si no, lectura bruta / máximo físico, acotada.
    """
    if score is not None and score > 0:
        return clamp01(score)
    if raw is None or not raw_max:
        return 0.0
    return clamp01(raw / raw_max)


def build_metric_set(values: Optional[Dict[str, float]] = None) -> Dict[str, float]:
    """
    Completa y acota un conjunto de métricas.

    Las ausentes valen 0 (CO2/CH4: valor neutro) y Cosmic refleja Muller.
    """
    values = values or {}
    out = {}
    for key in METRIC_KEYS:
        if key == "Cosmic":
            continue
        if key in values and values[key] is not None:
            out[key] = clamp01(values[key])
        else:
            out[key] = NEUTRAL_DEFAULTS.get(key, 0.0)
    out["Cosmic"] = out["Muller"]
    return {key: out[key] for key in METRIC_KEYS}


def is_valid_point(point_id: str, name: str, lat, lon) -> bool:
    """Identidad no vacía y coordenadas finitas alejadas del (0, 0) de relleno."""
    if not point_id or not name:
        return False
    try:
        lat = float(lat)
        lon = float(lon)
    except (TypeError, ValueError):
        return False
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return False
    return abs(lat) > COORD_EPSILON and abs(lon) > COORD_EPSILON


def normalize_row(row: Dict[str, str], delimiter: str = ",") -> Optional[MonitoringPoint]:
    """
    Convierte una fila de la hoja en estación.

    Returns:
        MonitoringPoint, o None si la fila no tiene identidad o coordenadas válidas
    """
    point_id = resolve_field(row, "id")
    name = resolve_field(row, "name")
    lat = resolve_field_number(row, "lat", delimiter)
    lon = resolve_field_number(row, "lon", delimiter)

    if lat is None or lon is None or not is_valid_point(point_id, name, lat, lon):
        logger.debug(f"Fila descartada (id={point_id!r}, lat={lat}, lon={lon})")
        return None

    raws = {}
    metrics = {}
    for key, (score_field, raw_field) in METRIC_SOURCES.items():
        score = resolve_field_number(row, score_field, delimiter)
        raw = resolve_field_number(row, raw_field, delimiter)
        raws[key] = raw if raw is not None else 0.0
        metrics[key] = normalize_metric(score, raw, RAW_MAXIMA[key])

    for key, score_field in NEUTRAL_SOURCES.items():
        score = resolve_field_number(row, score_field, delimiter)
        if score is not None and score > 0:
            metrics[key] = clamp01(score)

    raw = RawReadings(
        ert=raws["ERT"],
        emf=raws["EMF"],
        radon=raws["Radon"],
        muller=raws["Muller"],
        leaf=raws["Leaf"],
        alert_code=resolve_field(row, "alert"),
        validity=resolve_field(row, "validity"),
        source_date=resolve_field(row, "date"),
    )

    return MonitoringPoint(
        id=point_id,
        name=name,
        lat=float(lat),
        lon=float(lon),
        metrics=build_metric_set(metrics),
        raw=raw,
    )
