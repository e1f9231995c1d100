# backend/slotfinder/services/availability/events.py
"""
Calendar events and the per-date schedule index built from them.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum


class EventKind(str, Enum):
    OPENING = "opening"
    APPOINTMENT = "appointment"


def _to_datetime(value: datetime | str) -> datetime:
    if isinstance(value, datetime):
        return value
    # SQLite stores "YYYY-MM-DD HH:MM:SS"; fromisoformat accepts both separators
    return datetime.fromisoformat(value)


def _to_kind(value) -> EventKind | str:
    # unknown kinds stay raw; the indexer reports them
    try:
        return EventKind(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class Event:
    """One calendar block: an opening window or a booked appointment."""
    kind: EventKind | str
    starts_at: datetime
    ends_at: datetime
    weekly_recurring: bool = False

    @classmethod
    def from_row(cls, row) -> "Event":
        """Build an Event from a storage row (ORM object, Row or mapping)."""
        if isinstance(row, dict):
            get = row.get
        else:
            def get(name):
                return getattr(row, name, None)
        return cls(
            kind=_to_kind(get("kind")),
            starts_at=_to_datetime(get("starts_at")),
            ends_at=_to_datetime(get("ends_at")),
            weekly_recurring=bool(get("weekly_recurring")),
        )

    @property
    def day(self) -> date:
        return self.starts_at.date()

    @property
    def is_opening(self) -> bool:
        return self.kind == EventKind.OPENING

    @property
    def is_appointment(self) -> bool:
        return self.kind == EventKind.APPOINTMENT

    @property
    def is_recurring_opening(self) -> bool:
        return self.is_opening and self.weekly_recurring


@dataclass
class ScheduleIndex:
    """
    Events grouped by the calendar date they start on.

    Every event is kept: several events on the same date never overwrite
    each other. Weekly-recurring openings are additionally grouped by their
    anchor date.
    """
    events_by_date: dict[date, list[Event]] = field(default_factory=dict)
    recurring_by_anchor: dict[date, list[Event]] = field(default_factory=dict)

    def events_on(self, day: date) -> list[Event]:
        return list(self.events_by_date.get(day, ()))

    def openings_on(self, day: date) -> list[Event]:
        return [e for e in self.events_on(day) if e.is_opening]

    def appointments_on(self, day: date) -> list[Event]:
        return [e for e in self.events_on(day) if e.is_appointment]

    @property
    def anchors(self) -> list[date]:
        """Anchor dates of weekly-recurring openings, ascending, unique."""
        return sorted(self.recurring_by_anchor)

    def recurring_on(self, anchor: date) -> list[Event]:
        return list(self.recurring_by_anchor.get(anchor, ()))


@dataclass
class Availability:
    """Bookable slots of one calendar day."""
    date: date
    slots: list[str] = field(default_factory=list)
