# backend/slotfinder/services/availability/__init__.py
"""
Availability calculation module.

Fetcher → Indexer → Resolver / Generator → Range Builder
"""

from .config import SlotConfig, get_slot_config
from .events import Availability, Event, EventKind, ScheduleIndex
from .indexer import build_schedule_index
from .resolver import resolve_opening, resolve_openings
from .generator import generate_slots
from .fetcher import EventFetcher, InMemoryEventFetcher, SqlEventFetcher
from .builder import build_availabilities, compute_availabilities, parse_start_date

__all__ = [
    "SlotConfig",
    "get_slot_config",
    "Availability",
    "Event",
    "EventKind",
    "ScheduleIndex",
    "build_schedule_index",
    "resolve_opening",
    "resolve_openings",
    "generate_slots",
    "EventFetcher",
    "InMemoryEventFetcher",
    "SqlEventFetcher",
    "build_availabilities",
    "compute_availabilities",
    "parse_start_date",
]
