# SPDX-License-Identifier: MIT

from typing import NamedTuple

from habitual.model.activity import Activity
from habitual.service.activity import get_day_value
from habitual.time import Clock


class StreakSummary(NamedTuple):
    current: int
    longest: int


def is_streak_day(activity: Activity, date: str) -> bool:
    """
    Check whether the day counts toward a streak under the activity's policy.

    A date without a record never counts, whatever the policy. The stored
    value is read as the activity's current kind first.

    - boolean, count-if-done: value is True
    - boolean, count-if-not-done: value is False
    - quantity, count-if-done: value > 0
    - quantity, count-if-not-done: value == 0
    """
    value = get_day_value(activity, date)
    if value is None:
        return False

    if activity["type"] == "boolean":
        done = value is True
    else:
        done = value > 0

    if activity["countType"] == "count-if-done":
        return done
    return not done


def longest_streak(activity: Activity) -> int:
    """
    Longest run of consecutive history entries that count.

    Entries are walked in date order. Dates missing from the history are not
    visited, so a gap between two counting entries does not break the run.
    """
    longest = 0
    in_progress = 0
    for date in sorted(activity["history"]):
        if is_streak_day(activity, date):
            in_progress += 1
            longest = max(longest, in_progress)
        else:
            in_progress = 0
    return longest


def current_streak(activity: Activity, clock: Clock) -> int:
    """
    Number of consecutive calendar days, ending today, that count.

    Today must count for the streak to be alive. The walk back steps one
    calendar day at a time, so a missing day ends the streak.
    """
    date = clock.today()
    if not is_streak_day(activity, date):
        return 0

    count = 1
    date = clock.previous_day(date)
    while is_streak_day(activity, date):
        count += 1
        date = clock.previous_day(date)
    return count


def calculate_streaks(activity: Activity, clock: Clock) -> StreakSummary:
    return StreakSummary(
        current=current_streak(activity, clock),
        longest=longest_streak(activity),
    )


def apply_streaks(activity: Activity, clock: Clock) -> bool:
    """Refresh the cached streak fields. Returns True if either value changed."""
    summary = calculate_streaks(activity, clock)
    changed = (
        activity["currentStreak"] != summary.current
        or activity["longestStreak"] != summary.longest
    )
    activity["currentStreak"] = summary.current
    activity["longestStreak"] = summary.longest
    return changed
