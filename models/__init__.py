"""
Módulo de modelos y cálculos
"""
from .anomaly import clamp01, anomaly_index, alarm_tier, ALARM_TIERS

from .series import (
    point_seed, generate_station_series, generate_reference_series
)

from .ranges import (
    filter_by_range, quick_stats, daily_average,
    last_days_trend, preset_window, records_to_frame, RANGE_PRESETS
)

from .layers import (
    LAYERS, layer_value, color_for_value, hex_to_rgb,
    radius_for_value, triangle_around, emf_heat_points
)

__all__ = [
    # Anomaly
    'clamp01', 'anomaly_index', 'alarm_tier', 'ALARM_TIERS',
    # Series
    'point_seed', 'generate_station_series', 'generate_reference_series',
    # Ranges
    'filter_by_range', 'quick_stats', 'daily_average',
    'last_days_trend', 'preset_window', 'records_to_frame', 'RANGE_PRESETS',
    # Layers
    'LAYERS', 'layer_value', 'color_for_value', 'hex_to_rgb',
    'radius_for_value', 'triangle_around', 'emf_heat_points',
]
