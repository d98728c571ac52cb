# SPDX-License-Identifier: MIT

import math
import re
from typing import Any, Optional, TypedDict, Union, cast

from habitual.error import ValidationError
from habitual.model.activity import (
    ACTIVITY_KINDS,
    COMPLETION_POLICIES,
    Activity,
    ActivityKind,
    CompletionPolicy,
    DayRecord,
)
from habitual.time import Clock, date_str_to_display_weekday

WHOLE_NUMBER_PATTERN = re.compile(r"^-?[0-9]+$")


class ChartBar(TypedDict):
    date: str
    weekday: str
    value: int
    height: float  # percentage of the chart scale, 0-100


# ─────────────────────────────────────────────────────────────
# Input validation
# ─────────────────────────────────────────────────────────────


def validate_name(name: str) -> str:
    """Return the trimmed name, rejecting empty names."""
    trimmed = name.strip()
    if not trimmed:
        raise ValidationError("Activity name cannot be empty.")
    return trimmed


def parse_kind(kind: str) -> ActivityKind:
    if kind not in ACTIVITY_KINDS:
        raise ValidationError(
            f"Invalid activity type: {kind}. "
            f"Valid options: {', '.join(ACTIVITY_KINDS)}"
        )
    return cast(ActivityKind, kind)


def parse_policy(policy: str) -> CompletionPolicy:
    if policy not in COMPLETION_POLICIES:
        raise ValidationError(
            f"Invalid count type: {policy}. "
            f"Valid options: {', '.join(COMPLETION_POLICIES)}"
        )
    return cast(CompletionPolicy, policy)


def _parse_whole_number(raw: Union[int, str], label: str) -> int:
    # bool is an int subclass, but True is not a quantity
    if isinstance(raw, bool):
        raise ValidationError(f"{label} must be a whole number, got {raw}.")
    if isinstance(raw, int):
        number = raw
    elif isinstance(raw, str) and WHOLE_NUMBER_PATTERN.match(raw.strip()):
        number = int(raw.strip())
    else:
        raise ValidationError(f"{label} must be a whole number, got '{raw}'.")

    if number < 0:
        raise ValidationError(f"{label} cannot be negative, got {number}.")
    return number


def parse_quantity(raw: Union[int, str]) -> int:
    """
    Parse a quantity entered by the user.

    Accepts non-negative ints and strings holding one. Negative numbers,
    fractions, booleans and any other text are rejected with ValidationError.
    """
    return _parse_whole_number(raw, "Quantity")


def parse_goal(raw: Optional[Union[int, str]]) -> int:
    """Parse a goal; None or an empty string means no goal (0)."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return 0
    return _parse_whole_number(raw, "Goal")


def parse_day_value(kind: ActivityKind, value: Any) -> Union[bool, int]:
    """Validate a value being recorded against the activity's type."""
    if kind == "boolean":
        if not isinstance(value, bool):
            raise ValidationError(
                f"Value for a boolean activity must be true or false, got '{value}'."
            )
        return value
    return parse_quantity(value)


# ─────────────────────────────────────────────────────────────
# Stored data normalization
# ─────────────────────────────────────────────────────────────


def normalize_day_value(kind: ActivityKind, value: Any) -> Union[bool, int]:
    """
    Clean up a stored value without converting it to the activity's kind.

    Booleans stay booleans and numbers become non-negative ints, so history
    logged under one kind survives a kind change and a change back. Values that
    are neither fall back to the kind's default.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float) and math.isfinite(value):
        return max(int(value), 0)
    if isinstance(value, str) and WHOLE_NUMBER_PATTERN.match(value.strip()):
        return max(int(value.strip()), 0)
    return False if kind == "boolean" else 0


def resolve_day_value(kind: ActivityKind, value: Union[bool, int]) -> Union[bool, int]:
    """Read a stored value as the activity's kind: bool or int."""
    if kind == "boolean":
        return bool(value)
    return int(value)


def get_day_value(activity: Activity, date: str) -> Optional[Union[bool, int]]:
    """The day's value resolved to the activity's kind, None when not logged."""
    record = activity["history"].get(date)
    if record is None:
        return None
    return resolve_day_value(activity["type"], record["value"])


def normalize_day_record(kind: ActivityKind, raw: Any) -> DayRecord:
    if not isinstance(raw, dict):
        raw = {"value": raw}
    notes = raw.get("notes")
    return {
        "value": normalize_day_value(kind, raw.get("value")),
        "notes": notes if isinstance(notes, str) else "",
    }


# ─────────────────────────────────────────────────────────────
# Read-side helpers for the views
# ─────────────────────────────────────────────────────────────


def is_completed(activity: Activity, date: str) -> bool:
    """Whether the activity was done on the date, regardless of count type."""
    value = get_day_value(activity, date)
    if value is None:
        return False
    return value > 0


def is_goal_met(activity: Activity, date: str) -> bool:
    if activity["type"] != "quantity" or activity["goal"] <= 0:
        return False
    value = get_day_value(activity, date)
    if value is None:
        return False
    return value >= activity["goal"]


def get_history_entries(activity: Activity) -> list[tuple[str, DayRecord]]:
    """History records, newest first."""
    return sorted(activity["history"].items(), key=lambda item: item[0], reverse=True)


def _chart_value(activity: Activity, date: str) -> int:
    value = get_day_value(activity, date)
    if value is None:
        return 0
    return int(value)


def get_chart_data(activity: Activity, clock: Clock, days: int = 7) -> list[ChartBar]:
    """
    Generate bar chart data for the last N days, oldest first.

    Bars are scaled against the goal when one is set. Boolean activities use a
    scale of 1, quantity activities without a goal use the largest value in the
    window (at least 10).
    """
    dates = clock.last_days(days)
    values = [_chart_value(activity, date) for date in dates]

    if activity["type"] == "quantity" and activity["goal"] > 0:
        scale = activity["goal"]
    elif activity["type"] == "boolean":
        scale = 1
    else:
        scale = max(values + [10])

    return [
        {
            "date": date,
            "weekday": date_str_to_display_weekday(date),
            "value": value,
            "height": min(value / scale * 100, 100.0) if scale > 0 else 0.0,
        }
        for date, value in zip(dates, values)
    ]
