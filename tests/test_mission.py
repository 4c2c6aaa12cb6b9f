"""Tests for mission parameters and outcome records."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from atlasintercept.core.mission import (
    FallbackOutcome,
    InvalidMissionParameters,
    MissionOutcome,
    MissionParameters,
    MissionStatus,
    PayloadClass,
    PropulsionVariant,
    RemoteOutcome,
    parse_launch_epoch,
)

SAMPLE_RESPONSE = {
    "travel_time": 4.2,
    "delta_v": 18.7,
    "success_probability": 0.73,
    "mission_log": [
        "Launch window confirmed",
        "Trans-interstellar injection burn nominal",
        "Intercept geometry acquired",
    ],
    "fuel_cost": 21.5,
    "mission_status": "success",
}


class TestMissionParameters:
    def test_from_inputs(self):
        params = MissionParameters.from_inputs("2025-10-30T10:00", "ion", "medium")
        assert params.launch_epoch == datetime(2025, 10, 30, 10, 0)
        assert params.propulsion is PropulsionVariant.ION
        assert params.payload is PayloadClass.MEDIUM

    @pytest.mark.parametrize("spelling", ["solar-sail", "solarSail", "solar_sail", "SOLAR-SAIL"])
    def test_solar_sail_spellings(self, spelling):
        params = MissionParameters.from_inputs("2025-10-30", spelling, "large")
        assert params.propulsion is PropulsionVariant.SOLAR_SAIL

    def test_to_request(self):
        params = MissionParameters.from_inputs("2025-10-30T10:00", "solar-sail", "small")
        assert params.to_request() == {
            "launch_date": "2025-10-30T10:00",
            "propulsion_type": "solar-sail",
            "payload_size": "small",
        }

    def test_invalid_launch_date(self):
        with pytest.raises(InvalidMissionParameters, match="launch date"):
            MissionParameters.from_inputs("next tuesday", "ion", "medium")

    def test_invalid_propulsion(self):
        with pytest.raises(InvalidMissionParameters, match="propulsion"):
            MissionParameters.from_inputs("2025-10-30", "antimatter", "medium")

    def test_invalid_payload(self):
        with pytest.raises(InvalidMissionParameters, match="payload"):
            MissionParameters.from_inputs("2025-10-30", "ion", "enormous")

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            MissionParameters.from_inputs("", "ion", "medium")

    def test_parameters_are_frozen(self):
        params = MissionParameters.from_inputs("2025-10-30", "ion", "medium")
        with pytest.raises(AttributeError):
            params.payload = PayloadClass.LARGE


class TestParseLaunchEpoch:
    def test_naive_passthrough(self):
        epoch = datetime(2026, 1, 1, 12, 0)
        assert parse_launch_epoch(epoch) == epoch

    def test_aware_converted_to_naive_utc(self):
        aware = datetime(2025, 10, 30, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        assert parse_launch_epoch(aware) == datetime(2025, 10, 30, 10, 0)

    def test_string_with_offset(self):
        assert parse_launch_epoch("2025-10-30T12:00+02:00") == datetime(2025, 10, 30, 10, 0)

    @pytest.mark.parametrize("text", ["2025-10-30T10:00:00Z", "2025-10-30T10:00z"])
    def test_string_with_zulu_suffix(self, text):
        assert parse_launch_epoch(text) == datetime(2025, 10, 30, 10, 0)

    def test_from_inputs_accepts_zulu_suffix(self):
        params = MissionParameters.from_inputs("2025-10-30T10:00:00Z", "ion", "medium")
        assert params.launch_epoch == datetime(2025, 10, 30, 10, 0)


class TestMissionOutcome:
    def test_from_response_maps_fields(self):
        outcome = MissionOutcome.from_response(SAMPLE_RESPONSE)
        assert outcome.transit_years == 4.2
        assert outcome.delta_v_km_s == 18.7
        assert outcome.success_probability == 0.73
        assert outcome.propellant_cost == 21.5
        assert outcome.log == tuple(SAMPLE_RESPONSE["mission_log"])
        assert outcome.status is MissionStatus.SUCCESS

    def test_response_round_trip(self):
        outcome = MissionOutcome.from_response(SAMPLE_RESPONSE)
        assert outcome.to_response() == SAMPLE_RESPONSE

    def test_missing_fields(self):
        partial = {k: v for k, v in SAMPLE_RESPONSE.items() if k not in ("delta_v", "fuel_cost")}
        with pytest.raises(ValueError, match="delta_v, fuel_cost"):
            MissionOutcome.from_response(partial)

    def test_unknown_status(self):
        with pytest.raises(ValueError):
            MissionOutcome.from_response({**SAMPLE_RESPONSE, "mission_status": "exploded"})

    def test_log_must_be_list(self):
        with pytest.raises(ValueError, match="mission_log"):
            MissionOutcome.from_response({**SAMPLE_RESPONSE, "mission_log": "single line"})

    @pytest.mark.parametrize("probability", [-0.1, 1.2, float("nan")])
    def test_probability_out_of_range(self, probability):
        with pytest.raises(ValueError, match="success_probability"):
            MissionOutcome.from_response({**SAMPLE_RESPONSE, "success_probability": probability})

    @pytest.mark.parametrize("name", ["travel_time", "delta_v", "fuel_cost"])
    def test_negative_metrics_rejected(self, name):
        with pytest.raises(ValueError, match="non-negative"):
            MissionOutcome.from_response({**SAMPLE_RESPONSE, name: -1.0})

    def test_pending(self):
        outcome = MissionOutcome.pending()
        assert outcome.status is MissionStatus.PENDING
        assert outcome.log == ()
        assert outcome.delta_v_km_s == 0.0
        assert outcome.success_probability == 0.0


def test_result_variants_carry_degraded_flag():
    outcome = MissionOutcome.from_response(SAMPLE_RESPONSE)
    remote = RemoteOutcome(outcome=outcome)
    fallback = FallbackOutcome(outcome=outcome, reason="ConnectionError: refused")
    assert remote.degraded is False
    assert remote.advisory is None
    assert fallback.degraded is True
    assert "offline mode" in fallback.advisory
    assert fallback.reason == "ConnectionError: refused"

    unusable = FallbackOutcome(outcome=outcome, reason="ValueError: bad status", invalid_response=True)
    assert unusable.degraded is True
    assert unusable.advisory != fallback.advisory
    assert "unusable result" in unusable.advisory
