"""
Índice de anomalía y clasificación de alarma

Todas las métricas llegan ya normalizadas a 0-1; aun así cada consumidor
vuelve a pasar por clamp01 porque la entrada puede venir fuera de rango.
"""
import math

from config import ANOMALY_WEIGHTS, ALARM_YELLOW, ALARM_ORANGE, ALARM_RED
from providers.types import AlarmTier


ALARM_TIERS = {
    "green": AlarmTier("green", "Verde (Bajo)", "#27AE60"),
    "yellow": AlarmTier("yellow", "Amarillo (Medio)", "#F1C40F"),
    "orange": AlarmTier("orange", "Naranja (Alto)", "#E67E22"),
    "red": AlarmTier("red", "Rojo (Muy alto)", "#E74C3C"),
}


def clamp01(x) -> float:
    """
    Acota un valor a [0, 1]

    Args:
        x: Valor numérico (o texto numérico)

    Returns:
        0.0 si no es un número finito, si no max(0, min(1, x))
    """
    if isinstance(x, bool):
        x = int(x)
    try:
        v = float(x)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(v):
        return 0.0
    return max(0.0, min(1.0, v))


def anomaly_index(metrics, weights=None) -> float:
    """
    Media ponderada de las métricas incluidas en la tabla de pesos.

    Las claves fuera de la tabla (CO2, CH4, Cosmic) son descriptivas y no
    contribuyen. La división por la suma de pesos mantiene el resultado en
    0-1 aunque la tabla no esté normalizada.

    Args:
        metrics: Diccionario métrica -> puntuación
        weights: Tabla de pesos (por defecto ANOMALY_WEIGHTS)

    Returns:
        Índice en [0, 1]
    """
    table = ANOMALY_WEIGHTS if weights is None else weights
    metrics = metrics or {}

    s = 0.0
    w = 0.0
    for key, wk in table.items():
        s += wk * clamp01(metrics.get(key, 0.0))
        w += wk
    return 0.0 if w == 0 else s / w


def alarm_tier(index) -> AlarmTier:
    """Escalera fija de umbrales: el umbral exacto pertenece al nivel superior."""
    t = clamp01(index)
    if t < ALARM_YELLOW:
        return ALARM_TIERS["green"]
    if t < ALARM_ORANGE:
        return ALARM_TIERS["yellow"]
    if t < ALARM_RED:
        return ALARM_TIERS["orange"]
    return ALARM_TIERS["red"]
