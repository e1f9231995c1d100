# backend/slotfinder/services/availability/fetcher.py
"""
Event fetchers: the single storage read of an availability computation.

Both fetchers return every event that is weekly-recurring or still
relevant (ends after the requested start date).
"""

import asyncio
import logging
from datetime import date, datetime, time
from typing import Iterable, Protocol

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, sessionmaker

from ...models.generated import Events
from .events import Event

logger = logging.getLogger(__name__)


class EventFetcher(Protocol):
    async def fetch_events(self, start_date: date) -> list[Event]:
        ...


class SqlEventFetcher:
    """Reads events through a SQLAlchemy session factory."""

    def __init__(self, session_factory: sessionmaker | None = None):
        if session_factory is None:
            from ...database import SessionLocal
            session_factory = SessionLocal
        self.session_factory = session_factory

    async def fetch_events(self, start_date: date) -> list[Event]:
        # Session work is blocking; keep it off the event loop
        return await asyncio.to_thread(self._query, start_date)

    def _query(self, start_date: date) -> list[Event]:
        # ends_at is ISO text stored as "YYYY-MM-DD HH:MM:SS"; rows written with
        # a "T" separator are normalized so lexical comparison orders like datetimes
        boundary = datetime.combine(start_date, time.min).isoformat(sep=" ")
        ends_at = func.replace(Events.ends_at, "T", " ")
        db: Session = self.session_factory()
        try:
            rows = (
                db.query(
                    Events.kind,
                    Events.starts_at,
                    Events.ends_at,
                    Events.weekly_recurring,
                )
                .filter(or_(Events.weekly_recurring == 1, ends_at > boundary))
                .all()
            )
        finally:
            db.close()

        logger.debug("Fetched %d events for start_date=%s", len(rows), boundary)
        return [Event.from_row(row) for row in rows]


class InMemoryEventFetcher:
    """Applies the storage filter to an in-process list of events."""

    def __init__(self, events: Iterable[Event] = ()):
        self.events = list(events)

    async def fetch_events(self, start_date: date) -> list[Event]:
        boundary = datetime.combine(start_date, time.min)
        return [
            e for e in self.events
            if e.weekly_recurring or e.ends_at > boundary
        ]
