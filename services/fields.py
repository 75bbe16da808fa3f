"""
Resolución de campos lógicos a partir de las columnas publicadas.

La hoja se edita a mano y las cabeceras cambian (mayúsculas, versiones con
y sin acentos turcos). Cada campo lógico tiene una lista ordenada de alias
aceptados; gana el primero que exista con valor no vacío.
"""
import logging
import math
from typing import Dict, Optional, Sequence

logger = logging.getLogger(__name__)


FIELD_ALIASES: Dict[str, Sequence[str]] = {
    # Identidad y posición
    "id": ("ID", "Id", "id", "KOD", "Kod"),
    "name": ("NAME", "Name", "name", "ISTASYON", "İSTASYON", "Istasyon", "İstasyon"),
    "lat": ("LAT", "Lat", "lat", "ENLEM", "Enlem"),
    "lon": ("LON", "Lon", "lon", "LNG", "Lng", "BOYLAM", "Boylam"),
    # Lecturas físicas
    "ert_raw": ("ERT_RAW",),
    "emf_raw": ("EMF_RAW",),
    "radon_raw": ("RADON_RAW", "RADON", "Radon"),
    "muller_raw": ("MULLER_RAW", "MULLER", "Muller", "MÜLLER"),
    "leaf_raw": ("LEAF_RAW", "LEAF", "Leaf"),
    # Puntuaciones ya normalizadas (0-1)
    "ert_score": ("ERT_S", "ERT_SCORE", "ERT"),
    "emf_score": ("EMF_S", "EMF_SCORE", "EMF"),
    "radon_score": ("RADON_S", "RADON_SCORE"),
    "muller_score": ("MULLER_S", "MULLER_SCORE", "COSMIC_S"),
    "leaf_score": ("LEAF_S", "LEAF_SCORE"),
    "co2_score": ("CO2_S", "CO2_SCORE", "CO2"),
    "ch4_score": ("CH4_S", "CH4_SCORE", "CH4"),
    # Procedencia
    "alert": ("ALERT", "ALARM", "ALARM_KODU"),
    "validity": ("VALID", "GECERLI", "GEÇERLİ", "STATUS"),
    "date": ("DATE", "TARIH", "TARİH", "Tarih", "TIMESTAMP"),
}


def _cell(row: Dict[str, str], alias: str) -> str:
    value = row.get(alias)
    if value is None:
        return ""
    return str(value).strip()


def resolve_text(row: Dict[str, str], aliases: Sequence[str]) -> str:
    """Valor del primer alias presente con contenido, o "" si ninguno."""
    for alias in aliases:
        value = _cell(row, alias)
        if value:
            return value
    return ""


def to_number(value, delimiter: str = ",") -> float:
    """
    Convierte una celda a número.

    Con ';' como separador de campos la coma es el separador decimal.
    Celdas vacías o ilegibles valen 0: una celda mala degrada una sola
    métrica, nunca descarta la estación.
    """
    if value is None:
        return 0.0
    s = str(value).strip()
    if not s:
        return 0.0
    if delimiter == ";":
        s = s.replace(",", ".")
    try:
        v = float(s)
    except ValueError:
        logger.debug(f"Celda no numérica {value!r}: se usa 0")
        return 0.0
    if not math.isfinite(v):
        logger.debug(f"Celda no finita {value!r}: se usa 0")
        return 0.0
    return v


def resolve_number(row: Dict[str, str], aliases: Sequence[str], delimiter: str = ",") -> Optional[float]:
    """
    Número del primer alias con contenido.

    Returns:
        None si el campo no está (ningún alias con valor); en otro caso el
        número, que puede ser 0 si la celda era ilegible.
    """
    txt = resolve_text(row, aliases)
    if not txt:
        return None
    return to_number(txt, delimiter)


def resolve_field(row: Dict[str, str], field_name: str) -> str:
    return resolve_text(row, FIELD_ALIASES[field_name])


def resolve_field_number(row: Dict[str, str], field_name: str, delimiter: str = ",") -> Optional[float]:
    return resolve_number(row, FIELD_ALIASES[field_name], delimiter)
