"""
Centralized configuration with environment variable overrides.

Scheduling defaults, fleet fan-out limits and logging settings live here.
Nothing in the scheduling modules hardcodes these values.
"""

import logging
import os
import re
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# Slot start times advance by this many minutes. Not configurable per request.
SLOT_STEP_MINUTES = 30

_CLOCK_TIME = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class SchedulingConfig:
    """Slot generation defaults and the weekly schedule placeholder."""

    slot_step_minutes: int = SLOT_STEP_MINUTES
    default_session_duration_minutes: int = _safe_int(
        "DEFAULT_SESSION_DURATION_MINUTES", "120"
    )
    default_lead_time_hours: float = _safe_float("DEFAULT_LEAD_TIME_HOURS", "24")
    placeholder_start_time: str = os.getenv("SCHEDULE_PLACEHOLDER_START", "00:00")
    placeholder_end_time: str = os.getenv("SCHEDULE_PLACEHOLDER_END", "12:00")


@dataclass(frozen=True)
class FleetConfig:
    """Limits for the fleet-wide availability fan-out."""

    max_concurrency: int = _safe_int("FLEET_MAX_CONCURRENCY", "8")
    fetch_timeout_sec: float = _safe_float("FLEET_FETCH_TIMEOUT_SEC", "5.0")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    scheduling: SchedulingConfig = field(default_factory=SchedulingConfig)
    fleet: FleetConfig = field(default_factory=FleetConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    service_name: str = os.getenv("SERVICE_NAME", "photo-availability")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if config.scheduling.default_session_duration_minutes < 1:
        raise ValueError(
            "DEFAULT_SESSION_DURATION_MINUTES must be >= 1, "
            f"got {config.scheduling.default_session_duration_minutes}"
        )
    if config.scheduling.default_lead_time_hours < 0:
        raise ValueError(
            "DEFAULT_LEAD_TIME_HOURS must be >= 0, "
            f"got {config.scheduling.default_lead_time_hours}"
        )
    if config.scheduling.slot_step_minutes < 1:
        raise ValueError(
            f"slot_step_minutes must be >= 1, got {config.scheduling.slot_step_minutes}"
        )
    for name, value in [
        ("SCHEDULE_PLACEHOLDER_START", config.scheduling.placeholder_start_time),
        ("SCHEDULE_PLACEHOLDER_END", config.scheduling.placeholder_end_time),
    ]:
        if not _CLOCK_TIME.match(value):
            raise ValueError(f"{name} must be an HH:MM time, got {value!r}")

    if config.fleet.max_concurrency < 1:
        raise ValueError(
            f"FLEET_MAX_CONCURRENCY must be >= 1, got {config.fleet.max_concurrency}"
        )
    if config.fleet.fetch_timeout_sec <= 0:
        raise ValueError(
            f"FLEET_FETCH_TIMEOUT_SEC must be > 0, got {config.fleet.fetch_timeout_sec}"
        )


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.info("Configuration loaded for '%s'", config.service_name)
    return config


# Singleton instance
settings = load_config()
