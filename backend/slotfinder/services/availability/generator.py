# backend/slotfinder/services/availability/generator.py
"""
Slot generation for a single day.

Windows are half-open minute intervals [start, end) on the target day.

Steps:
  1. Governing windows: date-specific openings if any, else the
     resolved recurring openings.
  2. Baseline grid: one slot every slot_step_minutes from each window start
     while strictly before the window end.
  3. Free time: merged windows minus every appointment of the day.
  4. A slot survives when its interval (clipped to its window end) lies
     entirely inside free time.
"""

from datetime import date
from typing import Sequence

from .config import SlotConfig, get_slot_config, time_to_minutes, minutes_to_time_str
from .events import Event, ScheduleIndex

Interval = tuple[int, int]


def generate_slots(
    target_date: date,
    index: ScheduleIndex,
    governing: Event | Sequence[Event],
    config: SlotConfig | None = None,
) -> list[str]:
    """
    Calculate bookable slots of target_date.

    Returns:
        Ascending, duplicate-free slot labels ("9:00", "9:30", ...).
    """
    config = config or get_slot_config()
    if isinstance(governing, Event):
        governing = [governing]

    # A date-specific opening replaces the recurring window, it does not intersect it
    windows = [event_window(e) for e in (index.openings_on(target_date) or governing)]
    windows = [w for w in windows if w[0] < w[1]]
    if not windows:
        return []

    free = _merge_intervals(windows)
    for appointment in index.appointments_on(target_date):
        block = event_window(appointment)
        free = [piece for interval in free for piece in _interval_subtract(interval, block)]

    step = config.slot_step_minutes
    available: set[int] = set()
    for start, end in windows:
        t = start
        while t < end:
            if _is_free((t, min(t + step, end)), free):
                available.add(t)
            t += step

    return [minutes_to_time_str(t) for t in sorted(available)]


def event_window(event: Event) -> Interval:
    """Time-of-day window of an event as minutes since midnight of its start day."""
    start = time_to_minutes(event.starts_at)
    duration = int((event.ends_at - event.starts_at).total_seconds() // 60)
    return start, start + duration


# ── Interval helpers ─────────────────────────────────────────────────────


def _merge_intervals(intervals: list[Interval]) -> list[Interval]:
    """Join overlapping or adjacent intervals."""
    merged: list[Interval] = []
    for start, end in sorted(intervals):
        if merged and start <= merged[-1][1]:
            if end > merged[-1][1]:
                merged[-1] = (merged[-1][0], end)
        else:
            merged.append((start, end))
    return merged


def _interval_subtract(interval: Interval, block: Interval) -> list[Interval]:
    """
    Remove block from interval.

    Returns 0, 1 or 2 intervals.
    """
    start, end = interval
    block_start, block_end = block

    if block_end <= start or block_start >= end:
        return [interval]

    pieces = []
    if block_start > start:
        pieces.append((start, block_start))
    if block_end < end:
        pieces.append((block_end, end))
    return pieces


def _is_free(slot: Interval, free: list[Interval]) -> bool:
    return any(start <= slot[0] and slot[1] <= end for start, end in free)
