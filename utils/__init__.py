"""
Módulo de utilidades
"""
from .helpers import (
    LOCAL_TZ,
    is_nan,
    as_local,
    fmt_day,
    es_datetime_from_epoch,
    age_string,
    fmt_score
)
from .storage import RecordStore

__all__ = [
    'LOCAL_TZ',
    'is_nan',
    'as_local',
    'fmt_day',
    'es_datetime_from_epoch',
    'age_string',
    'fmt_score',
    'RecordStore',
]
