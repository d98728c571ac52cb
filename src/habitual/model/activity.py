# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict, Union

from habitual.model.entity_id import EntityId

ActivityKind = Literal["boolean", "quantity"]
CompletionPolicy = Literal["count-if-done", "count-if-not-done"]

ACTIVITY_KINDS: tuple[ActivityKind, ...] = ("boolean", "quantity")
COMPLETION_POLICIES: tuple[CompletionPolicy, ...] = (
    "count-if-done",
    "count-if-not-done",
)


class DayRecord(TypedDict):
    # bool for boolean activities, non-negative int for quantity activities
    value: Union[bool, int]
    notes: str


class Activity(TypedDict):
    id: EntityId
    name: str  # unique, case-sensitive
    type: ActivityKind
    countType: CompletionPolicy
    goal: int  # quantity only, 0 means no goal
    history: dict[str, DayRecord]  # keyed by YYYY-MM-DD

    # Cached by the streak engine, never edited directly
    currentStreak: int
    longestStreak: int
