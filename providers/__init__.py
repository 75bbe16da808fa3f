"""
Tipos de dominio y conjuntos de puntos incluidos.
"""
from .types import (
    RawReadings,
    MonitoringPoint,
    ReferencePoint,
    SeriesRecord,
    AlarmTier,
    DecodedFeed,
)
from .defaults import DEFAULT_STATIONS, DEFAULT_SELECTION, REFERENCE_POINTS

__all__ = [
    "RawReadings",
    "MonitoringPoint",
    "ReferencePoint",
    "SeriesRecord",
    "AlarmTier",
    "DecodedFeed",
    "DEFAULT_STATIONS",
    "DEFAULT_SELECTION",
    "REFERENCE_POINTS",
]
