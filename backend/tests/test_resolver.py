"""Tests for recurrence resolution."""

from datetime import date

from slotfinder.services.availability import (
    build_schedule_index,
    resolve_opening,
    resolve_openings,
)

from factories import appointment, opening


class TestResolveOpenings:

    def test_anchor_date_itself(self, weekly_morning):
        index = build_schedule_index([weekly_morning])
        assert resolve_opening(date(2014, 8, 4), index) == weekly_morning

    def test_whole_weeks_after_anchor(self, weekly_morning):
        index = build_schedule_index([weekly_morning])
        for day in (date(2014, 8, 11), date(2014, 8, 18), date(2015, 8, 3)):
            assert resolve_opening(day, index) == weekly_morning

    def test_other_weekdays_are_closed(self, weekly_morning):
        index = build_schedule_index([weekly_morning])
        assert resolve_opening(date(2014, 8, 12), index) is None
        assert resolve_openings(date(2014, 8, 10), index) == []

    def test_dates_before_anchor_are_closed(self, weekly_morning):
        index = build_schedule_index([weekly_morning])
        assert resolve_opening(date(2014, 7, 28), index) is None

    def test_date_specific_opening_takes_precedence(self, weekly_morning):
        override = opening("2014-08-11 13:00", "2014-08-11 14:00")
        index = build_schedule_index([weekly_morning, override])

        assert resolve_openings(date(2014, 8, 11), index) == [override]

    def test_latest_matching_anchor_wins(self, weekly_morning):
        later = opening("2014-08-18 14:00", "2014-08-18 16:00", weekly_recurring=True)
        # insertion order must not matter
        index = build_schedule_index([later, weekly_morning])

        assert resolve_opening(date(2014, 8, 11), index) == weekly_morning
        assert resolve_opening(date(2014, 8, 25), index) == later

    def test_several_windows_on_the_same_anchor(self, weekly_morning):
        afternoon = opening("2014-08-04 14:00", "2014-08-04 16:00", weekly_recurring=True)
        index = build_schedule_index([afternoon, weekly_morning])

        assert resolve_openings(date(2014, 8, 11), index) == [weekly_morning, afternoon]

    def test_appointment_on_anchor_date_keeps_recurrence(self, weekly_morning):
        appt = appointment("2014-08-04 10:00", "2014-08-04 10:30")
        index = build_schedule_index([weekly_morning, appt])

        assert resolve_opening(date(2014, 8, 11), index) == weekly_morning

    def test_result_does_not_alias_the_index(self, weekly_morning):
        index = build_schedule_index([weekly_morning])

        resolve_openings(date(2014, 8, 11), index).clear()

        assert resolve_openings(date(2014, 8, 18), index) == [weekly_morning]
        assert index.recurring_on(date(2014, 8, 4)) == [weekly_morning]
