"""Tests for configuration loading and validation."""

import pytest

from photo_availability.config import AppConfig, FleetConfig, SchedulingConfig, _validate_config


def _config(scheduling: SchedulingConfig = None, fleet: FleetConfig = None) -> AppConfig:
    config = AppConfig.__new__(AppConfig)
    object.__setattr__(config, "scheduling", scheduling or SchedulingConfig())
    object.__setattr__(config, "fleet", fleet or FleetConfig())
    object.__setattr__(config, "log_level", "INFO")
    object.__setattr__(config, "service_name", "test")
    return config


def _scheduling(**overrides) -> SchedulingConfig:
    values = {
        "slot_step_minutes": 30,
        "default_session_duration_minutes": 120,
        "default_lead_time_hours": 24.0,
        "placeholder_start_time": "00:00",
        "placeholder_end_time": "12:00",
    }
    values.update(overrides)
    scheduling = SchedulingConfig.__new__(SchedulingConfig)
    for name, value in values.items():
        object.__setattr__(scheduling, name, value)
    return scheduling


def _fleet(max_concurrency: int = 8, fetch_timeout_sec: float = 5.0) -> FleetConfig:
    fleet = FleetConfig.__new__(FleetConfig)
    object.__setattr__(fleet, "max_concurrency", max_concurrency)
    object.__setattr__(fleet, "fetch_timeout_sec", fetch_timeout_sec)
    return fleet


class TestConfigValidation:
    def test_default_config_passes_validation(self):
        config = AppConfig()
        _validate_config(config)  # should not raise

    def test_defaults(self):
        config = AppConfig()
        assert config.scheduling.slot_step_minutes == 30
        assert config.scheduling.default_session_duration_minutes == 120

    def test_invalid_session_duration(self):
        with pytest.raises(ValueError, match="DEFAULT_SESSION_DURATION_MINUTES"):
            _validate_config(_config(scheduling=_scheduling(default_session_duration_minutes=0)))

    def test_negative_lead_time(self):
        with pytest.raises(ValueError, match="DEFAULT_LEAD_TIME_HOURS"):
            _validate_config(_config(scheduling=_scheduling(default_lead_time_hours=-1.0)))

    def test_malformed_placeholder_time(self):
        with pytest.raises(ValueError, match="SCHEDULE_PLACEHOLDER_END"):
            _validate_config(_config(scheduling=_scheduling(placeholder_end_time="noon")))

    def test_invalid_concurrency(self):
        with pytest.raises(ValueError, match="FLEET_MAX_CONCURRENCY"):
            _validate_config(_config(fleet=_fleet(max_concurrency=0)))

    def test_invalid_timeout(self):
        with pytest.raises(ValueError, match="FLEET_FETCH_TIMEOUT_SEC"):
            _validate_config(_config(fleet=_fleet(fetch_timeout_sec=0)))

    def test_safe_int_parsing(self):
        from photo_availability.config import _safe_int

        assert _safe_int("NONEXISTENT_VAR_12345", "42") == 42

    def test_safe_int_rejects_garbage(self, monkeypatch):
        from photo_availability.config import _safe_int

        monkeypatch.setenv("PHOTO_TEST_INT", "twelve")
        with pytest.raises(ValueError, match="PHOTO_TEST_INT"):
            _safe_int("PHOTO_TEST_INT", "1")

    def test_safe_float_parsing(self):
        from photo_availability.config import _safe_float

        assert _safe_float("NONEXISTENT_VAR_12345", "3.14") == pytest.approx(3.14)
