"""
Tipos de dominio para puntos de monitorización y series.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional


@dataclass(frozen=True)
class RawReadings:
    """Lecturas físicas sin convertir y campos de procedencia (no puntúan)."""
    ert: float = 0.0
    emf: float = 0.0
    radon: float = 0.0
    muller: float = 0.0
    leaf: float = 0.0
    alert_code: str = ""
    validity: str = ""
    source_date: str = ""


@dataclass(frozen=True)
class MonitoringPoint:
    """Estación geolocalizada con sus métricas normalizadas (0-1)."""
    id: str
    name: str
    lat: float
    lon: float
    metrics: Dict[str, float] = field(default_factory=dict)
    raw: RawReadings = field(default_factory=RawReadings)


@dataclass(frozen=True)
class ReferencePoint:
    """Ciudad de referencia del modo simulación regional."""
    id: str
    name: str
    lat: float
    lon: float
    ref: float


@dataclass(frozen=True)
class SeriesRecord:
    timestamp: datetime
    point_id: str
    point_name: str
    kind: str  # "station" | "reference"
    metrics: Optional[Dict[str, float]]
    index: float


@dataclass(frozen=True)
class AlarmTier:
    key: str
    label: str
    color: str


@dataclass(frozen=True)
class DecodedFeed:
    """Resultado del decodificador: filas por cabecera y separador detectado."""
    rows: List[Dict[str, str]]
    delimiter: str
    headers: List[str] = field(default_factory=list)
