# backend/slotfinder/services/availability/config.py
"""
Slot grid configuration for availability calculation.
"""

from dataclasses import dataclass
from datetime import datetime, time
from functools import lru_cache

from ...config import settings


@dataclass(frozen=True)
class SlotConfig:
    """
    Configuration for the availability slot grid.

    Attributes:
        slot_step_minutes: Grid step in minutes (15/30/60)
        default_number_of_days: Days returned when the caller gives no count
        max_number_of_days: Largest range the HTTP layer accepts
    """
    slot_step_minutes: int = 30  # 15 / 30 / 60
    default_number_of_days: int = 7
    max_number_of_days: int = 60

    def __post_init__(self):
        """Validate configuration."""
        if self.slot_step_minutes not in (15, 30, 60):
            raise ValueError(f"slot_step_minutes must be 15, 30, or 60, got {self.slot_step_minutes}")
        if self.default_number_of_days < 0:
            raise ValueError(f"default_number_of_days must be >= 0, got {self.default_number_of_days}")


@lru_cache
def get_slot_config() -> SlotConfig:
    """Get slot configuration (singleton), built from application settings."""
    return SlotConfig(
        slot_step_minutes=settings.slot_step_minutes,
        default_number_of_days=settings.default_number_of_days,
        max_number_of_days=settings.max_number_of_days,
    )


def time_to_minutes(value: time | datetime) -> int:
    """Minutes since midnight for a time-of-day value."""
    return value.hour * 60 + value.minute


def minutes_to_time_str(minutes: int) -> str:
    """
    Convert minutes since midnight to a slot label "H:MM".

    The hour carries no leading zero ("9:00", "13:30"). Offsets past
    midnight wrap around (overnight windows).
    """
    hour, minute = divmod(minutes % (24 * 60), 60)
    return f"{hour}:{minute:02d}"
