"""
Módulo de componentes visuales
"""
from .cards import card, metric_card, alarm_pill, section_title, render_grid, html_clean
from .sidebar import render_sidebar

__all__ = [
    'card',
    'metric_card',
    'alarm_pill',
    'section_title',
    'render_grid',
    'render_sidebar',
    'html_clean',
]
