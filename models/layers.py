"""
Valores y estilos de las capas del mapa
"""
from typing import Dict, Iterable, List, Tuple

from providers.types import MonitoringPoint
from .anomaly import clamp01, anomaly_index

LAYERS = ("ERT", "EMF", "Radon", "Cosmic", "INDEX")
UNKNOWN_LAYER_VALUE = 0.3

# Anillos de la nube de calor EMF: (desplazamiento en grados, factor)
EMF_HEAT_RINGS = ((0.18, 0.75), (0.40, 0.45), (0.70, 0.25))

_COLOR_RAMP = (
    (0.25, "#2E86DE"),
    (0.50, "#27AE60"),
    (0.70, "#F1C40F"),
    (0.85, "#E67E22"),
)
_COLOR_TOP = "#E74C3C"


def layer_value(point: MonitoringPoint, layer: str) -> float:
    """Valor 0-1 que pinta una estación en la capa indicada."""
    metrics = point.metrics or {}
    if layer == "INDEX":
        return clamp01(anomaly_index(metrics))
    if layer == "Cosmic":
        # Cosmic y Muller son el mismo canal físico
        return clamp01(metrics.get("Muller", 0.0))
    if layer in ("ERT", "EMF", "Radon"):
        return clamp01(metrics.get(layer, 0.0))
    return UNKNOWN_LAYER_VALUE


def color_for_value(v) -> str:
    t = clamp01(v)
    for limit, color in _COLOR_RAMP:
        if t < limit:
            return color
    return _COLOR_TOP


def hex_to_rgb(color: str, alpha: int = 255) -> List[int]:
    """'#RRGGBB' -> [r, g, b, a] para pydeck"""
    c = color.lstrip("#")
    return [int(c[0:2], 16), int(c[2:4], 16), int(c[4:6], 16), int(alpha)]


def radius_for_value(v) -> float:
    return 10 + clamp01(v) * 18


def triangle_around(lat: float, lon: float, size: float = 0.22) -> List[Tuple[float, float]]:
    """Vértices (lat, lon) del triángulo de la capa Radon."""
    return [
        (lat + size, lon),
        (lat - size, lon - size * 0.9),
        (lat - size, lon + size * 0.9),
    ]


def emf_heat_points(points: Iterable[MonitoringPoint]) -> List[Dict[str, float]]:
    """
    Nube de puntos para la capa de calor EMF.

    Cada estación aporta su centro y 8 vecinos por anillo (cruz + diagonales)
    con el valor atenuado por el factor del anillo.
    """
    out = []
    for p in points:
        base = clamp01((p.metrics or {}).get("EMF", 0.0))
        out.append({"lat": p.lat, "lon": p.lon, "v": base})

        for d, w in EMF_HEAT_RINGS:
            v = clamp01(base * w)
            k = d * 0.7
            offsets = (
                (d, 0.0), (-d, 0.0), (0.0, d), (0.0, -d),
                (k, k), (k, -k), (-k, k), (-k, -k),
            )
            for dlat, dlon in offsets:
                out.append({"lat": p.lat + dlat, "lon": p.lon + dlon, "v": v})
    return out
