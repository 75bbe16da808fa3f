"""Tests del índice de anomalía y de la escalera de alarmas."""
import math

import pytest

from config import ANOMALY_WEIGHTS
from models.anomaly import clamp01, anomaly_index, alarm_tier


class TestClamp01:

    @pytest.mark.parametrize("x", [-5.0, -0.1, 0.0, 0.3, 1.0, 1.7, 1e9])
    def test_idempotent_and_in_range(self, x):
        once = clamp01(x)
        assert 0.0 <= once <= 1.0
        assert clamp01(once) == once

    @pytest.mark.parametrize("x", [float("nan"), float("inf"), float("-inf"), None, "abc", ""])
    def test_non_finite_or_non_numeric_is_zero(self, x):
        assert clamp01(x) == 0.0

    def test_numeric_text_is_accepted(self):
        assert clamp01("0.42") == pytest.approx(0.42)


class TestAnomalyIndex:

    def test_all_ones_gives_one(self):
        metrics = {k: 1.0 for k in ANOMALY_WEIGHTS}
        assert anomaly_index(metrics) == pytest.approx(1.0)

    def test_single_metric_contributes_its_weight(self):
        assert anomaly_index({"EMF": 1.0}) == pytest.approx(0.40)
        assert anomaly_index({"Leaf": 1.0}) == pytest.approx(0.05)

    def test_descriptive_keys_never_contribute(self):
        assert anomaly_index({"CO2": 1.0, "CH4": 1.0, "Cosmic": 1.0}) == 0.0

    def test_out_of_range_inputs_are_clamped(self):
        assert anomaly_index({"EMF": 5.0, "Radon": -3.0}) == pytest.approx(0.40)

    def test_invariant_under_uniform_weight_scaling(self):
        metrics = {"EMF": 0.7, "Radon": 0.2, "ERT": 0.9, "Muller": 0.1, "Leaf": 0.5}
        scaled = {k: w * 7.5 for k, w in ANOMALY_WEIGHTS.items()}
        assert anomaly_index(metrics, scaled) == pytest.approx(anomaly_index(metrics))

    def test_zero_weight_table_gives_zero(self):
        assert anomaly_index({"EMF": 1.0}, {"EMF": 0.0}) == 0.0

    def test_empty_or_missing_metrics(self):
        assert anomaly_index({}) == 0.0
        assert anomaly_index(None) == 0.0


class TestAlarmTier:

    @pytest.mark.parametrize("value, key", [
        (0.0, "green"),
        (0.249999, "green"),
        (0.25, "yellow"),
        (0.49, "yellow"),
        (0.5, "orange"),
        (0.74999, "orange"),
        (0.75, "red"),
        (1.0, "red"),
    ])
    def test_boundaries(self, value, key):
        assert alarm_tier(value).key == key

    def test_out_of_range_values_are_clamped_first(self):
        assert alarm_tier(2.5).key == "red"
        assert alarm_tier(-1).key == "green"
        assert alarm_tier(math.nan).key == "green"

    def test_labels(self):
        assert alarm_tier(0.1).label == "Verde (Bajo)"
        assert alarm_tier(0.9).label == "Rojo (Muy alto)"
