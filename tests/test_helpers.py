"""Tests de utilidades de formato."""
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from utils.helpers import is_nan, as_local, fmt_day, fmt_score


def test_is_nan():
    assert is_nan(None)
    assert is_nan(float("nan"))
    assert not is_nan(0.0)


def test_naive_instant_is_utc():
    local = as_local(datetime(2024, 3, 1, 22, 0), ZoneInfo("Europe/Istanbul"))
    assert local.hour == 1
    assert local.day == 2


def test_fmt_day():
    ts = datetime(2024, 3, 9, 23, 0, tzinfo=timezone.utc)
    assert fmt_day(ts, timezone.utc) == "09.03"
    assert fmt_day(ts, ZoneInfo("Europe/Istanbul")) == "10.03"


def test_fmt_score():
    assert fmt_score(0.456) == "0.46"
    assert fmt_score(0.456, 3) == "0.456"
    assert fmt_score(None) == "—"
