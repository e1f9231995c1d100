# backend/slotfinder/services/availability/indexer.py
"""Build the per-date schedule index from fetched events."""

import logging
from typing import Iterable

from .events import Event, EventKind, ScheduleIndex

logger = logging.getLogger(__name__)

_KNOWN_KINDS = tuple(kind.value for kind in EventKind)


def build_schedule_index(events: Iterable[Event]) -> ScheduleIndex:
    """
    Group events by start date and collect weekly-recurring opening anchors.

    Events of an unknown kind take no part in resolution; each one is
    reported as a data-integrity warning.
    """
    index = ScheduleIndex()

    for event in events:
        if event.kind not in _KNOWN_KINDS:
            logger.warning(
                "Ignoring event with unknown kind=%r starting at %s",
                event.kind, event.starts_at,
            )
            continue

        index.events_by_date.setdefault(event.day, []).append(event)

        if event.is_recurring_opening:
            index.recurring_by_anchor.setdefault(event.day, []).append(event)

    for day_events in index.events_by_date.values():
        day_events.sort(key=lambda e: e.starts_at)
    for anchored in index.recurring_by_anchor.values():
        anchored.sort(key=lambda e: e.starts_at)

    logger.debug(
        "Schedule index: %d dates, %d recurring anchors",
        len(index.events_by_date), len(index.recurring_by_anchor),
    )
    return index
