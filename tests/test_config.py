"""Tests de lectura de variables de entorno."""
import logging

from config import _env_float


def test_env_float_reads_value(monkeypatch):
    monkeypatch.setenv("SIRIUS_TEST_TIMEOUT", "7.5")
    assert _env_float("SIRIUS_TEST_TIMEOUT", 12.0) == 7.5


def test_env_float_missing_or_blank(monkeypatch):
    monkeypatch.delenv("SIRIUS_TEST_TIMEOUT", raising=False)
    assert _env_float("SIRIUS_TEST_TIMEOUT", 12.0) == 12.0
    monkeypatch.setenv("SIRIUS_TEST_TIMEOUT", "  ")
    assert _env_float("SIRIUS_TEST_TIMEOUT", 12.0) == 12.0


def test_env_float_malformed_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("SIRIUS_TEST_TIMEOUT", "doce")
    with caplog.at_level(logging.WARNING, logger="config"):
        assert _env_float("SIRIUS_TEST_TIMEOUT", 12.0) == 12.0
    assert "SIRIUS_TEST_TIMEOUT" in caplog.text
