"""Tests for domain values, storage encodings and tracker drafts."""

from __future__ import annotations

import uuid
from datetime import date, datetime
from itertools import combinations

import pytest

from trackday.dates import WeekDay
from trackday.domain import (
    Color,
    Tracker,
    TrackerCategory,
    TrackerDraft,
    TrackerFilter,
    TrackerKind,
    TrackerRecord,
    color_to_hex,
    decode_schedule,
    encode_schedule,
    format_schedule,
    hex_to_color,
)
from trackday.errors import ValidationError


class TestScheduleEncoding:
    def test_encode_sorts_ordinals(self):
        assert encode_schedule({WeekDay.FRIDAY, WeekDay.MONDAY, WeekDay.WEDNESDAY}) == "1,3,5"

    def test_empty_schedule_encodes_to_empty_string(self):
        assert encode_schedule(frozenset()) == ""
        assert decode_schedule("") == frozenset()
        assert decode_schedule(None) == frozenset()

    def test_round_trip_for_every_subset_size(self):
        days = list(WeekDay)
        for size in range(len(days) + 1):
            for subset in combinations(days, size):
                assert decode_schedule(encode_schedule(subset)) == frozenset(subset)

    def test_decode_collapses_duplicates_and_ignores_order(self):
        assert decode_schedule("5, 1,5,3,,") == {WeekDay.MONDAY, WeekDay.WEDNESDAY, WeekDay.FRIDAY}

    def test_decode_skips_invalid_tokens(self, caplog):
        with caplog.at_level("WARNING", logger="trackday"):
            assert decode_schedule("1,9,x,7") == {WeekDay.MONDAY, WeekDay.SUNDAY}
        assert "invalid schedule token" in caplog.text

    def test_format_schedule(self):
        assert format_schedule(WeekDay) == "Every day"
        assert format_schedule({WeekDay.WEDNESDAY, WeekDay.MONDAY}) == "Mon, Wed"
        assert format_schedule(()) == ""


class TestColorEncoding:
    def test_hex_is_lowercase_with_hash(self):
        assert color_to_hex(Color.from_channels(0x1A, 0x2B, 0x3C)) == "#1a2b3c"
        assert color_to_hex(Color(0)) == "#000000"

    def test_hex_parsing_is_lenient_about_prefix_and_case(self):
        assert hex_to_color("#1A2B3C") == Color(0x1A2B3C)
        assert hex_to_color(" 1a2b3c ") == Color(0x1A2B3C)

    @pytest.mark.parametrize("bad", ["", "#12345", "#1234567", "zzzzzz", "#12 456"])
    def test_malformed_hex_rejected(self, bad):
        with pytest.raises(ValidationError):
            hex_to_color(bad)

    @pytest.mark.parametrize("channels", [(0, 0, 0), (255, 255, 255), (253, 76, 73), (1, 128, 254)])
    def test_float_channels_round_trip(self, channels):
        rgb = tuple(c / 255 for c in channels)
        decoded = hex_to_color(color_to_hex(Color.from_rgb(*rgb)))
        for got, want in zip(decoded.rgb, rgb):
            assert abs(got - want) <= 1 / 255

    def test_float_channels_are_rounded_and_clamped(self):
        color = Color.from_rgb(1.2, -0.1, 0.5)
        assert (color.red, color.green, color.blue) == (255, 0, 128)

    def test_out_of_range_values_rejected(self):
        with pytest.raises(ValidationError):
            Color(0x1000000)
        with pytest.raises(ValidationError):
            Color.from_channels(256, 0, 0)


class TestTracker:
    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            Tracker.new("   ", "🏃", Color(0))
        with pytest.raises(ValidationError):
            Tracker(id=uuid.uuid4(), name="", emoji="🏃", color=Color(0))

    def test_new_trims_name_and_mints_id(self):
        first = Tracker.new("  Read  ", "📚", Color(0))
        second = Tracker.new("Read", "📚", Color(0))
        assert first.name == "Read"
        assert first.id != second.id

    def test_habit_versus_irregular_event(self):
        habit = Tracker.new("Run", "🏃", Color(0), [WeekDay.MONDAY])
        event = Tracker.new("Dentist", "🦷", Color(0))
        assert habit.is_habit and not habit.is_irregular
        assert event.is_irregular and not event.is_habit
        assert habit.occurs_on(WeekDay.MONDAY)
        assert not habit.occurs_on(WeekDay.TUESDAY)
        assert all(event.occurs_on(day) for day in WeekDay)

    def test_schedule_is_normalized_to_frozenset(self):
        tracker = Tracker(id=uuid.uuid4(), name="Run", emoji="🏃", color=Color(0), schedule=[WeekDay.MONDAY])
        assert tracker.schedule == frozenset({WeekDay.MONDAY})

    def test_replace_keeps_identity(self):
        tracker = Tracker.new("Run", "🏃", Color(0))
        edited = tracker.replace(name="Jog", id=uuid.uuid4())
        assert edited.id == tracker.id
        assert edited.name == "Jog"
        with pytest.raises(ValidationError):
            tracker.replace(name=" ")


def test_category_requires_title():
    with pytest.raises(ValidationError):
        TrackerCategory(id=uuid.uuid4(), title="  ")


def test_records_compare_at_day_granularity():
    tracker_id = uuid.uuid4()
    morning = TrackerRecord(tracker_id, datetime(2024, 1, 3, 8, 0))
    evening = TrackerRecord.on(tracker_id, datetime(2024, 1, 3, 21, 0))
    assert morning == evening
    assert len({morning, evening}) == 1
    assert morning.day == date(2024, 1, 3)
    assert TrackerRecord(uuid.uuid4(), date(2024, 1, 3)) != morning


def test_filter_titles_and_parsing():
    assert TrackerFilter.ALL.title == "All trackers"
    assert TrackerFilter.parse("not_completed") is TrackerFilter.NOT_COMPLETED
    assert TrackerFilter.parse(" Completed ") is TrackerFilter.COMPLETED
    assert TrackerFilter.parse("") is None
    with pytest.raises(ValidationError):
        TrackerFilter.parse("weekly")


class TestTrackerDraft:
    def test_empty_draft_lists_everything_missing(self):
        draft = TrackerDraft()
        assert draft.missing_fields() == ["name", "category", "schedule", "emoji", "color"]
        assert not draft.is_ready

    def test_irregular_event_needs_no_schedule(self):
        draft = TrackerDraft(
            kind=TrackerKind.IRREGULAR_EVENT,
            name="Dentist",
            category_title="Health",
            emoji="🦷",
            color=Color(0xFF0000),
        )
        assert draft.is_ready

    def test_build_habit(self):
        draft = TrackerDraft(
            name=" Stretch ",
            category_title="Health",
            schedule={WeekDay.MONDAY, WeekDay.THURSDAY},
            emoji="🤸",
            color=Color(0x00FF00),
        )
        tracker = draft.build()
        assert tracker.name == "Stretch"
        assert tracker.schedule == {WeekDay.MONDAY, WeekDay.THURSDAY}

    def test_irregular_event_drops_leftover_schedule(self):
        draft = TrackerDraft(
            kind=TrackerKind.IRREGULAR_EVENT,
            name="Dentist",
            category_title="Health",
            schedule={WeekDay.MONDAY},
            emoji="🦷",
            color=Color(0),
        )
        assert draft.build().schedule == frozenset()

    def test_build_incomplete_draft_raises(self):
        draft = TrackerDraft(name="   ", category_title="Health", emoji="🤸", color=Color(0))
        with pytest.raises(ValidationError, match="name, schedule"):
            draft.build()
