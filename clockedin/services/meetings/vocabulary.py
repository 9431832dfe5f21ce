"""Keyword tables, signal weights and the inclusion threshold for meeting scoring.

The weights are empirical and meant to be tuned; nothing else depends on
their exact values.
"""

from __future__ import annotations

import re

INCLUSION_THRESHOLD = 5

SIGNAL_WEIGHTS: dict[str, int] = {
    "conference": 10,
    "meeting_title": 8,
    "attendees": 6,
    "recurring": 5,
    "accepted": 4,
    "meeting_location": 3,
    "organizer_self": 2,
    "work_hours": 2,
}

PENALTY_WEIGHTS: dict[str, int] = {
    "all_day": -5,
    "long_duration": -3,
    "large_audience": -3,
}

# social, entertainment, travel, personal time and out-of-office
EXCLUSION_TERMS: tuple[str, ...] = (
    "vacation",
    "holiday",
    "day off",
    "pto",
    "out of office",
    "ooo",
    "sick",
    "leave",
    "personal",
    "break",
    "lunch",
    "dinner",
    "breakfast",
    "brunch",
    "happy hour",
    "party",
    "birthday",
    "anniversary",
    "wedding",
    "drinks",
    "concert",
    "movie",
    "game night",
    "gym",
    "workout",
    "yoga",
    "doctor",
    "dentist",
    "haircut",
    "flight",
    "travel",
    "hotel",
    "commute",
    "school pickup",
    "focus time",
)

MEETING_TERMS: tuple[str, ...] = (
    "meeting",
    "call",
    "sync",
    "standup",
    "stand-up",
    "catch up",
    "catch-up",
    "catchup",
    "1:1",
    "1on1",
    "one-on-one",
    "review",
    "discussion",
    "interview",
    "retro",
    "retrospective",
    "planning",
    "kickoff",
    "kick-off",
    "demo",
    "check-in",
    "huddle",
    "workshop",
    "all hands",
    "all-hands",
    "briefing",
)

CONFERENCE_DOMAINS: tuple[str, ...] = (
    "zoom.",
    "meet.google",
    "teams.microsoft",
    "teams.live",
    "webex.com",
    "gotomeeting.com",
    "whereby.com",
    "chime.aws",
)

LOCATION_TERMS: tuple[str, ...] = (
    "room",
    "conference",
    "office",
)

ATTENDEE_RANGE = (1, 100)
LARGE_AUDIENCE = 30
LONG_DURATION_MINUTES = 4 * 60
WORK_HOURS = (9, 18)
WORK_DAYS = frozenset(range(5))


def _term_regex(terms: tuple[str, ...]) -> re.Pattern[str]:
    alternation = "|".join(re.escape(term) for term in sorted(terms, key=len, reverse=True))
    return re.compile(rf"(?<!\w)(?:{alternation})(?!\w)")


EXCLUSION_REGEX = _term_regex(EXCLUSION_TERMS)
MEETING_TITLE_REGEX = _term_regex(MEETING_TERMS)
LOCATION_REGEX = _term_regex(LOCATION_TERMS)
