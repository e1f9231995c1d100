"""
Insert sample events:

  - weekly opening, Monday 2014-08-04 09:30-12:30
  - appointment, Monday 2014-08-11 10:30-11:30

GET /availabilities?start_date=2014-08-10 then shows the 2014-08-11
morning without the 10:30 and 11:00 slots.
"""

import sys, pathlib
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1] / "backend"))

from slotfinder.database import SessionLocal, init_db
from slotfinder.models.generated import Events

SAMPLE_EVENTS = [
    {
        "kind": "opening",
        "starts_at": "2014-08-04 09:30:00",
        "ends_at": "2014-08-04 12:30:00",
        "weekly_recurring": 1,
    },
    {
        "kind": "appointment",
        "starts_at": "2014-08-11 10:30:00",
        "ends_at": "2014-08-11 11:30:00",
        "weekly_recurring": 0,
    },
]


def main():
    init_db()
    db = SessionLocal()
    try:
        for data in SAMPLE_EVENTS:
            db.add(Events(**data))
        db.commit()
        print(f"Inserted {len(SAMPLE_EVENTS)} events.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
