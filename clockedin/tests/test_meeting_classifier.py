from datetime import datetime, timedelta, timezone

from clockedin.domain.schemas.calendar import CalendarEvent
from clockedin.services.meetings.classifier import classify, score_event

# 2025-03-08 is a Saturday, 2025-03-03 a Monday
SATURDAY = datetime(2025, 3, 8, 10, 0, tzinfo=timezone.utc)
MONDAY = datetime(2025, 3, 3, 10, 0, tzinfo=timezone.utc)


def _event(**kwargs) -> CalendarEvent:
    return CalendarEvent(**kwargs)


def test_sync_with_bob_scores_29_and_is_included() -> None:
    event = _event(
        title="Sync with Bob",
        start=SATURDAY,
        end=SATURDAY + timedelta(minutes=30),
        attendee_count=2,
        has_conference_data=True,
        recurrence_id="abc123",
    )

    result = classify(event)

    assert result.score == 10 + 8 + 6 + 5
    assert result.included is True


def test_all_day_company_offsite_is_excluded() -> None:
    event = _event(
        title="Company Offsite",
        start=datetime(2025, 3, 5, tzinfo=timezone.utc),
        end=datetime(2025, 3, 6, tzinfo=timezone.utc),
        all_day=True,
    )

    result = classify(event)

    assert result.score == -5
    assert result.included is False


def test_hard_exclusion_wins_over_every_signal() -> None:
    event = _event(
        title="Team Happy Hour",
        start=MONDAY,
        end=MONDAY + timedelta(hours=1),
        attendee_count=12,
        has_accepted_attendee=True,
        has_conference_data=True,
        recurrence_id="weekly",
        organizer_is_self=True,
        location="Conference Room A",
    )

    result = classify(event)

    assert result.included is False
    assert result.score == 0


def test_exclusion_keyword_in_description_excludes() -> None:
    event = _event(
        title="Project sync",
        description="Moved to next week, I'm on VACATION until Monday",
        attendee_count=4,
    )

    assert classify(event).included is False


def test_exclusion_matches_whole_words_only() -> None:
    event = _event(title="Breakout planning")

    result = classify(event)

    assert result.score == 8
    assert result.included is True


def test_threshold_boundary_five_is_included() -> None:
    event = _event(title="Something", recurrence_id="series-1")

    result = classify(event)

    assert result.score == 5
    assert result.included is True


def test_threshold_boundary_four_is_excluded() -> None:
    event = _event(title="Something", attendee_count=1, has_accepted_attendee=True)

    result = classify(event)

    assert result.score == 4
    assert result.included is False


def test_every_signal_adds_up() -> None:
    event = _event(
        title="Weekly review",
        start=MONDAY,
        end=MONDAY + timedelta(hours=1),
        attendee_count=5,
        has_accepted_attendee=True,
        has_conference_data=True,
        recurrence_id="weekly",
        organizer_is_self=True,
        location="Room 4",
    )

    assert score_event(event) == 10 + 8 + 6 + 5 + 4 + 3 + 2 + 2


def test_penalties_for_long_crowded_events() -> None:
    event = _event(
        title="Quarterly planning",
        start=SATURDAY,
        end=SATURDAY + timedelta(hours=5),
        attendee_count=40,
    )

    # meeting title, attendee range, large audience, long duration
    assert score_event(event) == 8 + 6 - 3 - 3


def test_attendee_range_is_exclusive_at_both_ends() -> None:
    assert score_event(_event(attendee_count=1)) == 0
    assert score_event(_event(attendee_count=2)) == 6
    assert score_event(_event(attendee_count=99)) == 6 - 3
    assert score_event(_event(attendee_count=100)) == -3


def test_conference_domain_in_description_counts_as_conference() -> None:
    event = _event(description="Join: https://us02web.zoom.us/j/123456")

    assert score_event(event) == 10


def test_work_hours_signal_needs_weekday_and_daytime() -> None:
    evening = MONDAY.replace(hour=18)
    morning = MONDAY.replace(hour=9)

    assert score_event(_event(start=morning, end=morning + timedelta(minutes=30))) == 2
    assert score_event(_event(start=evening, end=evening + timedelta(minutes=30))) == 0
    assert score_event(_event(start=SATURDAY, end=SATURDAY + timedelta(minutes=30))) == 0


def test_missing_timestamps_degrade_to_title_and_attendees() -> None:
    event = _event(title="Team sync", attendee_count=3)

    result = classify(event)

    assert result.score == 8 + 6
    assert result.included is True


def test_classify_is_deterministic() -> None:
    event = _event(
        title="1:1 with manager",
        start=MONDAY,
        end=MONDAY + timedelta(minutes=30),
        attendee_count=2,
    )

    first = classify(event)
    second = classify(event)

    assert first == second
    assert first.event == event
