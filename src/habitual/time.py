# SPDX-License-Identifier: MIT

import re
from typing import Optional, cast

import pendulum

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_date_str(date_str: str) -> bool:
    """Check that a string is a valid calendar date in 'YYYY-MM-DD' format."""
    if not DATE_PATTERN.match(date_str):
        return False
    try:
        date_from_str(date_str)
    except ValueError:
        return False
    return True


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string to a pendulum.Date."""
    return cast(pendulum.DateTime, pendulum.parse(date_str, strict=True)).date()


def date_to_str(date: pendulum.Date) -> str:
    return date.to_date_string()


def date_str_to_display_weekday(date_str: str) -> str:
    return date_from_str(date_str).format("ddd")


def date_str_to_display_local_date(date_str: str) -> str:
    return date_from_str(date_str).format("YYYY-MM-DD ddd")


class Clock:
    """
    Calendar used by the store and the streak engine.

    Dates are 'YYYY-MM-DD' strings in local time so they can be used directly
    as history keys.
    """

    def today(self) -> str:
        return date_to_str(pendulum.today("local").date())

    def previous_day(self, date_str: str) -> str:
        return date_to_str(date_from_str(date_str).subtract(days=1))

    def last_days(self, count: int, end: Optional[str] = None) -> list[str]:
        """Return `count` consecutive dates, oldest first, ending at `end` or today."""
        end_date = date_from_str(end if end is not None else self.today())
        return [
            date_to_str(end_date.subtract(days=offset))
            for offset in range(count - 1, -1, -1)
        ]


class FixedClock(Clock):
    """Clock pinned to a single day."""

    def __init__(self, today: str) -> None:
        self._today = date_to_str(date_from_str(today))

    def today(self) -> str:
        return self._today
