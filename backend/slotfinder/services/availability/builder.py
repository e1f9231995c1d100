# backend/slotfinder/services/availability/builder.py
"""
Availabilities for consecutive days.

Entry point: compute_availabilities(start_date, number_of_days=7)
"""

import logging
from datetime import date, datetime, timedelta

from ...errors import InvalidNumberOfDaysError, InvalidStartDateError
from .config import SlotConfig, get_slot_config
from .events import Availability, ScheduleIndex
from .fetcher import EventFetcher, SqlEventFetcher
from .generator import generate_slots
from .indexer import build_schedule_index
from .resolver import resolve_openings

logger = logging.getLogger(__name__)


def parse_start_date(value: date | datetime | str) -> date:
    """Normalize a start date; raise InvalidStartDateError when unparseable."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            pass
    raise InvalidStartDateError(value)


def _check_number_of_days(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidNumberOfDaysError(value)
    return value


def build_availabilities(
    start_date: date,
    number_of_days: int,
    index: ScheduleIndex,
    config: SlotConfig | None = None,
) -> list[Availability]:
    """One Availability per day, in request order. Empty slots = closed day."""
    config = config or get_slot_config()
    availabilities = []

    for i in range(number_of_days):
        target_date = start_date + timedelta(days=i)
        openings = resolve_openings(target_date, index)
        if openings:
            slots = generate_slots(target_date, index, openings, config)
        else:
            slots = []
        availabilities.append(Availability(date=target_date, slots=slots))

    return availabilities


async def compute_availabilities(
    start_date: date | datetime | str,
    number_of_days: int = 7,
    fetcher: EventFetcher | None = None,
    config: SlotConfig | None = None,
) -> list[Availability]:
    """
    Compute bookable slots for number_of_days consecutive days.

    Input is validated before storage is touched; a failing fetch
    propagates to the caller unchanged.
    """
    start = parse_start_date(start_date)
    number_of_days = _check_number_of_days(number_of_days)
    if number_of_days <= 0:
        return []

    fetcher = fetcher or SqlEventFetcher()
    events = await fetcher.fetch_events(start)
    index = build_schedule_index(events)

    logger.debug("Computing %d days of availability from %s", number_of_days, start)
    return build_availabilities(start, number_of_days, index, config)
