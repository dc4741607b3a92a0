import logging
import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fitcycle.constants import DEFAULT_CYCLE_LENGTH


@dataclass(frozen=True)
class Config:
    timezone: str = "UTC"
    log_format: str = "json"
    log_level: str = "INFO"
    default_cycle_length: int = DEFAULT_CYCLE_LENGTH

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @classmethod
    def from_env(cls) -> "Config":
        timezone = os.environ.get("FITCYCLE_TIMEZONE", "UTC")
        try:
            ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise RuntimeError(f"FITCYCLE_TIMEZONE is not a known timezone: {timezone}") from exc

        raw_length = os.environ.get("FITCYCLE_DEFAULT_CYCLE_LENGTH", str(DEFAULT_CYCLE_LENGTH))
        try:
            cycle_length = int(raw_length)
        except ValueError as exc:
            raise RuntimeError(f"FITCYCLE_DEFAULT_CYCLE_LENGTH must be an integer: {raw_length}") from exc
        if cycle_length < 1:
            raise RuntimeError("FITCYCLE_DEFAULT_CYCLE_LENGTH must be positive")

        log_level = os.environ.get("FITCYCLE_LOG_LEVEL", "INFO").upper()
        if log_level not in logging.getLevelNamesMapping():
            raise RuntimeError(f"FITCYCLE_LOG_LEVEL is not a logging level: {log_level}")

        return cls(
            timezone=timezone,
            log_format=os.environ.get("FITCYCLE_LOG_FORMAT", "json"),
            log_level=log_level,
            default_cycle_length=cycle_length,
        )
