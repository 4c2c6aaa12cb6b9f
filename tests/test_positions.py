"""Tests for the stylized Earth / 3I/ATLAS position model."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import numpy as np
import pytest

from atlasintercept.core.mission import InvalidMissionParameters
from atlasintercept.core.positions import positions, target_distance_au, years_from_perihelion
from atlasintercept.utils.constants import REFERENCE_EPOCH

ONE_YEAR = timedelta(days=365.25)


def test_positions_at_perihelion():
    origin, target = positions(REFERENCE_EPOCH)
    np.testing.assert_allclose(origin, [-2.7, 0.0, 0.0])
    np.testing.assert_allclose(target, [2.8, 3.0, 0.0])


def test_positions_one_year_after():
    """A full year brings Earth back to the same phase; the target has receded."""
    origin, target = positions(REFERENCE_EPOCH + ONE_YEAR)
    np.testing.assert_allclose(origin, [-2.7, 0.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(target, [6.8, 3.5, 0.0])


def test_positions_half_year_before():
    """Recession is symmetric in distance, but height drifts with the signed offset."""
    origin, target = positions(REFERENCE_EPOCH - ONE_YEAR / 2)
    np.testing.assert_allclose(origin, [-3.3, 0.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(target, [4.8, 2.75, 0.0])


def test_positions_deterministic():
    epoch = datetime(2026, 3, 14, 15, 9)
    first = positions(epoch)
    second = positions(epoch)
    assert np.array_equal(first[0], second[0])
    assert np.array_equal(first[1], second[1])


def test_positions_accepts_iso_string():
    from_string = positions("2025-12-19T08:30")
    from_datetime = positions(datetime(2025, 12, 19, 8, 30))
    assert np.array_equal(from_string[0], from_datetime[0])
    assert np.array_equal(from_string[1], from_datetime[1])


def test_positions_aware_datetime_converted_to_utc():
    aware = datetime(2025, 10, 30, 2, 0, tzinfo=timezone(timedelta(hours=2)))
    origin, target = positions(aware)
    np.testing.assert_allclose(origin, [-2.7, 0.0, 0.0])
    np.testing.assert_allclose(target, [2.8, 3.0, 0.0])


def test_positions_are_read_only():
    origin, target = positions(REFERENCE_EPOCH)
    with pytest.raises(ValueError):
        origin[0] = 0.0
    with pytest.raises(ValueError):
        target[0] = 0.0


def test_positions_invalid_epoch():
    with pytest.raises(InvalidMissionParameters):
        positions("not a date")


def test_years_and_distance_helpers():
    assert years_from_perihelion(REFERENCE_EPOCH) == 0.0
    assert years_from_perihelion(REFERENCE_EPOCH - ONE_YEAR) == pytest.approx(-1.0)
    assert target_distance_au(REFERENCE_EPOCH) == pytest.approx(1.4)
    assert target_distance_au(REFERENCE_EPOCH - ONE_YEAR) == pytest.approx(3.4)
