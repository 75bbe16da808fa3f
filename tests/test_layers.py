"""Tests de valores y estilos de capas del mapa."""
import pytest

from models.anomaly import anomaly_index
from models.layers import (
    layer_value, color_for_value, hex_to_rgb, radius_for_value,
    triangle_around, emf_heat_points, EMF_HEAT_RINGS,
)
from providers.types import MonitoringPoint

POINT = MonitoringPoint(
    "P1", "Punto", 39.0, 35.0,
    {"ERT": 0.2, "EMF": 0.8, "Radon": 1.4, "Muller": 0.33, "Cosmic": 0.9, "Leaf": 0.1},
)


def test_layer_values():
    assert layer_value(POINT, "EMF") == 0.8
    assert layer_value(POINT, "Radon") == 1.0
    assert layer_value(POINT, "Cosmic") == 0.33
    assert layer_value(POINT, "INDEX") == pytest.approx(anomaly_index(POINT.metrics))
    assert layer_value(POINT, "CO2") == 0.3


@pytest.mark.parametrize("value, color", [
    (0.0, "#2E86DE"),
    (0.25, "#27AE60"),
    (0.69, "#F1C40F"),
    (0.7, "#E67E22"),
    (0.85, "#E74C3C"),
    (float("nan"), "#2E86DE"),
])
def test_color_ramp(value, color):
    assert color_for_value(value) == color


def test_hex_to_rgb():
    assert hex_to_rgb("#E74C3C") == [231, 76, 60, 255]
    assert hex_to_rgb("2E86DE", 100) == [46, 134, 222, 100]


def test_radius():
    assert radius_for_value(0) == 10
    assert radius_for_value(1) == 28
    assert radius_for_value(7) == 28


def test_triangle():
    top, left, right = triangle_around(40.0, 30.0, 0.2)
    assert top == pytest.approx((40.2, 30.0))
    assert left[0] == right[0] == pytest.approx(39.8)
    assert left[1] < 30.0 < right[1]


def test_emf_heat_points():
    cloud = emf_heat_points([POINT])
    assert len(cloud) == 1 + 8 * len(EMF_HEAT_RINGS)
    assert cloud[0] == {"lat": 39.0, "lon": 35.0, "v": 0.8}
    assert {round(p["v"], 6) for p in cloud[1:9]} == {round(0.8 * 0.75, 6)}
