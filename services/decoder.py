"""
Decodificador de la hoja exportada (texto delimitado por ',' o ';')
"""
import csv
import re
from typing import Dict, Iterable, List

from api.errors import InvalidFeedFormat
from config import MARKUP_SNIFF_CHARS
from providers.types import DecodedFeed, MonitoringPoint

_PLACEHOLDER_HEADER = re.compile(r"^(?:-+|#|Unnamed: ?\d+)$")

# Cabeceras del formato pre-puntuado que genera encode_table
ENCODE_COLUMNS = [
    ("ERT_S", "ERT"),
    ("EMF_S", "EMF"),
    ("RADON_S", "Radon"),
    ("MULLER_S", "Muller"),
    ("LEAF_S", "Leaf"),
    ("CO2_S", "CO2"),
    ("CH4_S", "CH4"),
]


def detect_delimiter(header_line: str) -> str:
    """';' solo si aparece estrictamente más veces que ',' en la cabecera."""
    return ";" if header_line.count(";") > header_line.count(",") else ","


def looks_like_markup(text: str) -> bool:
    head = text.lstrip("﻿ \t\r\n")[:MARKUP_SNIFF_CHARS].lower()
    return "<html" in head or "<!doctype" in head


def _is_placeholder(header: str) -> bool:
    return not header or bool(_PLACEHOLDER_HEADER.match(header))


def decode_table(text: str) -> DecodedFeed:
    """
    Convierte el CSV publicado en filas indexadas por cabecera.

    - Se eliminan '\\r' y las líneas en blanco.
    - Las filas cortas se completan con "" (nunca es un error).
    - Las columnas sin nombre (índice exportado por la hoja) se descartan.
    - Las celdas entre comillas pueden contener el separador.

    Raises:
        InvalidFeedFormat: texto vacío o página HTML en lugar de datos
    """
    if text is None:
        raise InvalidFeedFormat("Respuesta vacía")
    if looks_like_markup(text):
        raise InvalidFeedFormat("La hoja devolvió HTML en lugar de CSV (¿no está publicada?)")

    lines = [ln for ln in text.replace("\r", "").split("\n") if ln.strip()]
    if not lines:
        raise InvalidFeedFormat("Respuesta vacía")

    header_line = lines[0].lstrip("﻿")
    delimiter = detect_delimiter(header_line)
    reader = csv.reader([header_line] + lines[1:], delimiter=delimiter)
    headers = [h.strip() for h in next(reader)]
    keep = [i for i, h in enumerate(headers) if not _is_placeholder(h)]

    rows: List[Dict[str, str]] = []
    for cells in reader:
        row = {}
        for i in keep:
            row[headers[i]] = cells[i] if i < len(cells) else ""
        rows.append(row)

    return DecodedFeed(rows=rows, delimiter=delimiter, headers=[headers[i] for i in keep])


def _fmt_number(value: float, delimiter: str) -> str:
    txt = repr(float(value))
    return txt.replace(".", ",") if delimiter == ";" else txt


def encode_table(points: Iterable[MonitoringPoint], delimiter: str = ",") -> str:
    """
    Serializa un conjunto de estaciones en el formato pre-puntuado.

    Con ';' como separador los decimales se escriben con coma, igual que
    la hoja en configuración regional turca/española.
    """
    if delimiter not in (",", ";"):
        raise ValueError(f"Separador no soportado: {delimiter!r}")

    def clean(txt: str) -> str:
        return str(txt).replace(delimiter, " ").replace("\n", " ").strip()

    header = ["ID", "NAME", "LAT", "LON"] + [col for col, _ in ENCODE_COLUMNS]
    out = [delimiter.join(header)]
    for p in points:
        cells = [clean(p.id), clean(p.name), _fmt_number(p.lat, delimiter), _fmt_number(p.lon, delimiter)]
        cells += [_fmt_number(p.metrics.get(key, 0.0), delimiter) for _, key in ENCODE_COLUMNS]
        out.append(delimiter.join(cells))
    return "\n".join(out) + "\n"
