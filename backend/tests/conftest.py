"""Pytest fixtures for availability tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from slotfinder.database import init_db
from slotfinder.models.generated import Events
from slotfinder.services.availability import SlotConfig

from factories import opening


@pytest.fixture
def config():
    return SlotConfig(slot_step_minutes=30)


@pytest.fixture
def weekly_morning():
    """Weekly opening anchored on Monday 2014-08-04, 9:30-12:30."""
    return opening("2014-08-04 09:30", "2014-08-04 12:30", weekly_recurring=True)


@pytest.fixture
def session_factory():
    """In-memory SQLite database with the events table."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    engine.dispose()


@pytest.fixture
def insert_events(session_factory):
    """Insert raw event rows (ISO text timestamps, integer recurrence flag)."""
    def _insert(*rows):
        db = session_factory()
        try:
            for row in rows:
                db.add(Events(**row))
            db.commit()
        finally:
            db.close()
    return _insert
