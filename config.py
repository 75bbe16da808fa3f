"""
Configuración global de Sirius
"""
import logging
import os

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    """Lee un número de una variable de entorno; si no es válido, usa el valor por defecto."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} no es un número: se usa {default}")
        return default


# ============================================================
# FUENTE DE DATOS (HOJA PUBLICADA EN CSV)
# ============================================================
# URL pública de la hoja exportada como CSV. Vacía = solo estaciones por defecto.
FEED_URL = os.getenv("SIRIUS_FEED_URL", "").strip()
FEED_TIMEOUT_SECONDS = _env_float("SIRIUS_FEED_TIMEOUT", 12.0)
FEED_CACHE_BUSTER_PARAM = "_"
MARKUP_SNIFF_CHARS = 200  # Ventana inicial donde se busca <html / <!doctype

# ============================================================
# CONFIGURACIÓN DE REFRESCO
# ============================================================
REFRESH_SECONDS = 120
MIN_REFRESH_SECONDS = 30

# ============================================================
# ZONA HORARIA LOCAL (agrupación por día)
# ============================================================
LOCAL_TZ_NAME = os.getenv("SIRIUS_TZ", "Europe/Istanbul")

# ============================================================
# PERSISTENCIA DE REGISTROS
# ============================================================
RECORDS_PATH = os.getenv("SIRIUS_RECORDS_PATH", "data.json")

# ============================================================
# MÉTRICAS
# ============================================================
METRIC_KEYS = ("ERT", "EMF", "Radon", "Cosmic", "Muller", "Leaf", "CO2", "CH4")

# Máximo físico por métrica para pasar de lectura bruta a puntuación 0-1
RAW_MAXIMA = {
    "ERT": 600.0,
    "EMF": 300.0,
    "Radon": 150.0,
    "Muller": 3.0,
    "Leaf": 800.0,
}

# Sin columna de origen en la hoja: valores neutros
NEUTRAL_DEFAULTS = {
    "CO2": 0.20,
    "CH4": 0.15,
}

# ============================================================
# ÍNDICE DE ANOMALÍA
# ============================================================
ANOMALY_WEIGHTS = {
    "EMF": 0.40,
    "Radon": 0.25,
    "ERT": 0.20,
    "Muller": 0.10,
    "Leaf": 0.05,
}

# ============================================================
# UMBRALES DE ALARMA (índice 0-1)
# ============================================================
ALARM_YELLOW = 0.25
ALARM_ORANGE = 0.50
ALARM_RED = 0.75

# ============================================================
# VALIDACIÓN DE COORDENADAS
# ============================================================
COORD_EPSILON = 0.1  # |lat| y |lon| deben superarlo (0,0 = sin posición)

# ============================================================
# SERIE SINTÉTICA
# ============================================================
SERIES_DAYS = 30
SERIES_POINTS_PER_DAY = 4
SERIES_PHASE_STEP = 0.22
SERIES_NOISE_STATION = 0.04
SERIES_NOISE_REFERENCE = 0.035
SERIES_AMPLITUDES = {
    "ERT": 0.8,
    "EMF": 1.1,
    "Radon": 0.9,
    "Muller": 0.6,
    "Leaf": 0.5,
    "CO2": 0.3,
    "CH4": 0.3,
}

# ============================================================
# TENDENCIA
# ============================================================
TREND_DAYS = 7
STATS_DECIMALS = 3
