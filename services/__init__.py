"""
Módulo de servicios de ingesta y consulta
"""
from .decoder import decode_table, encode_table, detect_delimiter
from .fields import FIELD_ALIASES, resolve_text, resolve_number, to_number
from .normalizer import normalize_metric, normalize_row, build_metric_set
from .repository import StationRepository, SyncResult, build_stations
from .monitor import AnomalyMonitor

__all__ = [
    'decode_table',
    'encode_table',
    'detect_delimiter',
    'FIELD_ALIASES',
    'resolve_text',
    'resolve_number',
    'to_number',
    'normalize_metric',
    'normalize_row',
    'build_metric_set',
    'StationRepository',
    'SyncResult',
    'build_stations',
    'AnomalyMonitor',
]
