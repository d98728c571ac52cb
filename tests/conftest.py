"""
Shared pytest fixtures for habitual tests.
"""
from typing import Any, Optional

import pytest

from habitual.error import PersistenceError
from habitual.model.activity import Activity
from habitual.repository.activity import ActivityRepository
from habitual.repository.key_value import MemoryKeyValueStore
from habitual.template.activity import get_activity_template
from habitual.time import FixedClock

TODAY = "2024-01-03"


class UnwritableKeyValueStore(MemoryKeyValueStore):
    """Reads work, every write fails."""

    def set_item(self, key: str, value: str) -> None:
        raise PersistenceError(f"disk full while writing {key}")


class UnreadableKeyValueStore(MemoryKeyValueStore):
    """Every read fails."""

    def get_item(self, key: str) -> Optional[str]:
        raise PersistenceError(f"permission denied reading {key}")


@pytest.fixture
def clock():
    return FixedClock(TODAY)


@pytest.fixture
def kv_store():
    return MemoryKeyValueStore()


@pytest.fixture
def repository(kv_store, clock):
    return ActivityRepository(kv_store, clock)


@pytest.fixture
def make_activity():
    """
    Build an activity with the given history, e.g.
    make_activity("boolean", {"2024-01-03": True}).
    """

    def _make_activity(
        kind: str = "boolean",
        values: Optional[dict[str, Any]] = None,
        policy: str = "count-if-done",
        goal: int = 0,
        name: str = "Read",
    ) -> Activity:
        activity = get_activity_template()
        activity["name"] = name
        activity["type"] = kind  # type: ignore[typeddict-item]
        activity["countType"] = policy  # type: ignore[typeddict-item]
        activity["goal"] = goal
        activity["history"] = {
            date: {"value": value, "notes": ""}
            for date, value in (values or {}).items()
        }
        return activity

    return _make_activity
