# backend/slotfinder/services/availability/resolver.py
"""
Recurrence resolution: which opening window governs a calendar date.

Precedence:
  1. Openings that start on the date itself (date-specific override).
  2. Weekly-recurring openings whose anchor date lies a whole number of
     weeks before (or on) the date. When several anchors match, the latest
     anchor wins and every recurring opening anchored on it applies.
"""

from datetime import date

from .events import Event, ScheduleIndex


def resolve_openings(target_date: date, index: ScheduleIndex) -> list[Event]:
    """
    Get the opening windows that govern target_date.

    Returns:
        Governing openings ordered by start time. Empty list = closed day.
    """
    direct = index.openings_on(target_date)
    if direct:
        return direct

    anchor = _latest_matching_anchor(target_date, index.anchors)
    if anchor is None:
        return []
    return list(index.recurring_on(anchor))


def resolve_opening(target_date: date, index: ScheduleIndex) -> Event | None:
    """Single-window form of resolve_openings: the earliest governing opening."""
    openings = resolve_openings(target_date, index)
    return openings[0] if openings else None


def _latest_matching_anchor(target_date: date, anchors: list[date]) -> date | None:
    """Largest anchor A <= target_date with (target_date - A) a multiple of 7 days."""
    match = None
    for anchor in anchors:
        diff_days = (target_date - anchor).days
        if diff_days < 0:
            continue
        if diff_days % 7 == 0 and (match is None or anchor > match):
            match = anchor
    return match
