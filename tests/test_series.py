"""Tests del generador de series sintéticas."""
import math
from datetime import timedelta

import pytest

from models.anomaly import anomaly_index
from models.series import point_seed, generate_station_series, generate_reference_series
from providers.defaults import DEFAULT_STATIONS, REFERENCE_POINTS

KMR = next(s for s in DEFAULT_STATIONS if s.id == "KMR")
ANK = next(r for r in REFERENCE_POINTS if r.id == "ANK")


def test_point_seed_is_sum_of_char_codes():
    assert point_seed("KMR") == ord("K") + ord("M") + ord("R") == 234
    assert point_seed("") == 0


def test_length_spacing_and_order(fixed_now):
    series = generate_station_series(KMR, days=30, points_per_day=4, now=fixed_now)
    assert len(series) == 120
    assert series[-1].timestamp == fixed_now
    assert series[0].timestamp == fixed_now - timedelta(hours=6 * 119)
    gaps = {b.timestamp - a.timestamp for a, b in zip(series, series[1:])}
    assert gaps == {timedelta(hours=6)}


def test_deterministic_for_same_inputs(fixed_now):
    a = generate_station_series(KMR, days=5, points_per_day=3, now=fixed_now)
    b = generate_station_series(KMR, days=5, points_per_day=3, now=fixed_now)
    assert a == b


def test_newest_point_matches_closed_form(fixed_now):
    series = generate_station_series(KMR, days=2, points_per_day=4, now=fixed_now)
    phase = 234 * 0.22  # i = 0
    noise = (math.sin(phase) + math.cos(phase * 0.7)) * 0.04
    newest = series[-1]
    assert newest.metrics["EMF"] == pytest.approx(min(1.0, max(0.0, 0.95 + noise * 1.1)))
    assert newest.metrics["Radon"] == pytest.approx(min(1.0, max(0.0, 0.55 + noise * 0.9)))


def test_metrics_are_clamped_and_index_recomputed(fixed_now):
    for record in generate_station_series(KMR, days=10, now=fixed_now):
        assert record.kind == "station"
        assert record.point_id == "KMR"
        assert all(0.0 <= v <= 1.0 for v in record.metrics.values())
        assert record.metrics["Cosmic"] == record.metrics["Muller"]
        assert record.index == pytest.approx(anomaly_index(record.metrics))


def test_reference_series(fixed_now):
    series = generate_reference_series(ANK, days=1, points_per_day=4, now=fixed_now)
    assert len(series) == 4
    assert all(r.kind == "reference" and r.metrics is None for r in series)
    phase = point_seed("ANK") * 0.22
    noise = (math.sin(phase) + math.cos(phase * 0.7)) * 0.035
    assert series[-1].index == pytest.approx(min(1.0, max(0.0, 0.32 + noise)))


@pytest.mark.parametrize("days, ppd", [(0, 4), (3, 0), (-1, 4)])
def test_degenerate_parameters_give_empty_series(fixed_now, days, ppd):
    assert generate_station_series(KMR, days=days, points_per_day=ppd, now=fixed_now) == []
    assert generate_reference_series(ANK, days=days, points_per_day=ppd, now=fixed_now) == []


def test_naive_now_is_treated_as_utc(fixed_now):
    naive = fixed_now.replace(tzinfo=None)
    series = generate_station_series(KMR, days=1, points_per_day=2, now=naive)
    assert series[-1].timestamp == fixed_now
