# SPDX-License-Identifier: MIT

import json
import logging
from copy import deepcopy
from typing import Any, Optional, Union

from habitual.error import NotFoundError, PersistenceError, ValidationError
from habitual.model.activity import (
    ACTIVITY_KINDS,
    COMPLETION_POLICIES,
    Activity,
    ActivityKind,
    CompletionPolicy,
    DayRecord,
)
from habitual.model.entity_id import EntityId, generate_entity_id
from habitual.repository.key_value import KeyValueStore
from habitual.service.activity import (
    normalize_day_record,
    parse_day_value,
    parse_goal,
    parse_kind,
    parse_policy,
    validate_name,
)
from habitual.service.streak import apply_streaks
from habitual.template.activity import get_activity_template, get_day_record_template
from habitual.time import Clock, is_date_str

logger = logging.getLogger(__name__)

ACTIVITIES_KEY = "activities"


class ActivityRepository:
    """
    Authoritative list of activities and their daily history.

    Every mutating call writes the whole collection back to the key-value
    store before returning. When several processes share one store the last
    writer wins.
    """

    def __init__(self, store: KeyValueStore, clock: Optional[Clock] = None) -> None:
        self._store = store
        self.clock = clock if clock is not None else Clock()
        self._activities: Optional[list[Activity]] = None

    @property
    def activities(self) -> list[Activity]:
        if self._activities is None:
            self._activities = self.__load_data()
        return self._activities

    # ─────────────────────────────────────────────────────────
    # Persistence
    # ─────────────────────────────────────────────────────────

    def __load_data(self) -> list[Activity]:
        try:
            raw_activities = self._store.get_item(ACTIVITIES_KEY)
        except PersistenceError as e:
            logger.warning("Activity store is unreadable, starting empty: %s", e)
            return []

        if raw_activities is None:
            return []

        try:
            data = json.loads(raw_activities)
        except ValueError as e:
            logger.warning(
                "Stored activities are not valid JSON, starting empty: %s", e
            )
            return []

        if not isinstance(data, list):
            logger.warning(
                "Stored activities are a %s, not a list; starting empty",
                type(data).__name__,
            )
            return []

        activities: list[Activity] = []
        seen_ids: set[EntityId] = set()
        for raw_activity in data:
            try:
                activity = self.__convert_activity_for_deserialization(raw_activity)
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed stored activity: %s", e)
                continue
            if activity["id"] in seen_ids:
                logger.warning("Skipping duplicate activity id %s", activity["id"])
                continue
            seen_ids.add(activity["id"])
            activities.append(activity)
        return activities

    def __save_data(self) -> None:
        serializable_activities = [
            self.__convert_activity_for_serialization(activity)
            for activity in self.activities
        ]
        self._store.set_item(ACTIVITIES_KEY, json.dumps(serializable_activities))

    def __convert_activity_for_serialization(
        self, activity: Activity
    ) -> dict[str, Any]:
        serializable_activity: dict[str, Any] = deepcopy(dict(activity))
        serializable_activity["history"] = dict(sorted(activity["history"].items()))
        return serializable_activity

    def __convert_activity_for_deserialization(self, raw: Any) -> Activity:
        if not isinstance(raw, dict):
            raise TypeError(f"expected an object, got {type(raw).__name__}")
        if raw.get("id") is None:
            raise KeyError("id")

        name = str(raw.get("name") or "").strip()
        if not name:
            raise ValueError(f"activity {raw['id']} has no name")

        kind: ActivityKind = raw.get("type", "boolean")
        if kind not in ACTIVITY_KINDS:
            logger.warning(
                "Activity '%s' has unknown type %r, using boolean", name, kind
            )
            kind = "boolean"
        policy: CompletionPolicy = raw.get("countType", "count-if-done")
        if policy not in COMPLETION_POLICIES:
            logger.warning(
                "Activity '%s' has unknown count type %r, using count-if-done",
                name,
                policy,
            )
            policy = "count-if-done"
        try:
            goal = parse_goal(raw.get("goal"))
        except ValidationError:
            goal = 0

        raw_history = raw.get("history") or {}
        if not isinstance(raw_history, dict):
            raise TypeError(f"history of activity '{name}' is not an object")

        activity = get_activity_template()
        activity["id"] = str(raw["id"])
        activity["name"] = name
        activity["type"] = kind
        activity["countType"] = policy
        activity["goal"] = goal
        activity["history"] = {}
        for date, record in raw_history.items():
            if not is_date_str(str(date)):
                logger.warning(
                    "Dropping history entry with bad date %r of '%s'", date, name
                )
                continue
            activity["history"][str(date)] = normalize_day_record(kind, record)
        activity["currentStreak"] = self.__convert_cached_streak(
            raw.get("currentStreak"), name
        )
        activity["longestStreak"] = self.__convert_cached_streak(
            raw.get("longestStreak"), name
        )
        return activity

    def __convert_cached_streak(self, raw: Any, name: str) -> int:
        # Cache only, so bad values read as 0
        if isinstance(raw, bool) or raw is None:
            return 0
        try:
            return max(int(raw), 0)
        except (TypeError, ValueError, OverflowError):
            logger.warning("Ignoring bad cached streak %r of '%s'", raw, name)
            return 0

    def load(self) -> list[Activity]:
        """
        Reload the collection from the store.

        Missing, unreadable or corrupt data yields an empty list; this never
        raises.
        """
        self._activities = self.__load_data()
        return deepcopy(self._activities)

    def save(self, activities: list[Activity]) -> None:
        """
        Replace the whole stored collection.

        Raises ValidationError for duplicate ids or names and for blank names,
        leaving everything unchanged. Streak caches are recomputed before
        writing. Raises PersistenceError if the write fails; the in-memory
        collection is still updated.
        """
        replacement = deepcopy(activities)
        seen_ids: set[EntityId] = set()
        seen_names: set[str] = set()
        for activity in replacement:
            activity["name"] = validate_name(activity["name"])
            if activity["id"] in seen_ids:
                raise ValidationError(f"Duplicate activity id {activity['id']}.")
            if activity["name"] in seen_names:
                raise ValidationError(
                    f"An activity named '{activity['name']}' already exists."
                )
            seen_ids.add(activity["id"])
            seen_names.add(activity["name"])
            apply_streaks(activity, self.clock)

        self._activities = replacement
        self.__save_data()

    # ─────────────────────────────────────────────────────────
    # Lookup
    # ─────────────────────────────────────────────────────────

    def __get(self, id: EntityId) -> Activity:
        for activity in self.activities:
            if activity["id"] == id:
                return activity
        raise NotFoundError(f"No activity with id {id}.")

    def get_all_activities(self) -> list[Activity]:
        return deepcopy(self.activities)

    def get_activity(self, id: EntityId) -> Activity:
        return deepcopy(self.__get(id))

    def get_activity_by_name(self, name: str) -> Activity:
        for activity in self.activities:
            if activity["name"] == name:
                return deepcopy(activity)
        raise NotFoundError(f"No activity named '{name}'.")

    def find_activity(self, reference: str) -> Activity:
        """Look an activity up by id, then by exact name."""
        for activity in self.activities:
            if activity["id"] == reference:
                return deepcopy(activity)
        return self.get_activity_by_name(reference)

    # ─────────────────────────────────────────────────────────
    # Activity management
    # ─────────────────────────────────────────────────────────

    def __validate_unique_name(
        self, name: str, own_id: Optional[EntityId] = None
    ) -> None:
        for activity in self.activities:
            if activity["name"] == name and activity["id"] != own_id:
                raise ValidationError(f"An activity named '{name}' already exists.")

    def __generate_unused_id(self) -> EntityId:
        existing_ids = {activity["id"] for activity in self.activities}
        id = generate_entity_id()
        while id in existing_ids:
            id = generate_entity_id()
        return id

    def create(
        self,
        name: str,
        kind: str,
        policy: str,
        goal: Optional[Union[int, str]] = 0,
    ) -> Activity:
        name = validate_name(name)
        self.__validate_unique_name(name)

        activity = get_activity_template()
        activity["id"] = self.__generate_unused_id()
        activity["name"] = name
        activity["type"] = parse_kind(kind)
        activity["countType"] = parse_policy(policy)
        activity["goal"] = parse_goal(goal)

        self.activities.append(activity)
        self.__save_data()
        logger.info("Created activity '%s' (%s)", name, activity["id"])
        return deepcopy(activity)

    def update(
        self,
        id: EntityId,
        name: str,
        kind: str,
        policy: str,
        goal: Optional[Union[int, str]] = 0,
    ) -> Activity:
        activity = self.__get(id)

        name = validate_name(name)
        self.__validate_unique_name(name, own_id=id)
        new_kind = parse_kind(kind)
        new_policy = parse_policy(policy)
        new_goal = parse_goal(goal)

        activity["name"] = name
        activity["type"] = new_kind
        activity["countType"] = new_policy
        activity["goal"] = new_goal
        apply_streaks(activity, self.clock)

        self.__save_data()
        logger.info("Updated activity '%s' (%s)", name, id)
        return deepcopy(activity)

    def delete(self, id: EntityId) -> None:
        remaining = [activity for activity in self.activities if activity["id"] != id]
        if len(remaining) == len(self.activities):
            logger.debug("Delete of unknown activity %s ignored", id)
            return
        self._activities = remaining
        self.__save_data()
        logger.info("Deleted activity %s", id)

    # ─────────────────────────────────────────────────────────
    # Daily log
    # ─────────────────────────────────────────────────────────

    def __ensure_today_record(self, activity: Activity) -> tuple[DayRecord, bool]:
        today = self.clock.today()
        created = today not in activity["history"]
        if created:
            activity["history"][today] = get_day_record_template(activity["type"])
        return activity["history"][today], created

    def ensure_today(self, id: EntityId) -> DayRecord:
        """Return today's record for the activity, creating the default one."""
        activity = self.__get(id)
        record, created = self.__ensure_today_record(activity)
        if created:
            apply_streaks(activity, self.clock)
            self.__save_data()
        return deepcopy(record)

    def ensure_today_for_all(self) -> None:
        any_created = False
        for activity in self.activities:
            _, created = self.__ensure_today_record(activity)
            if created:
                apply_streaks(activity, self.clock)
                any_created = True
        if any_created:
            self.__save_data()

    def record_today(
        self,
        id: EntityId,
        value: Union[bool, int, str],
        notes: str = "",
    ) -> DayRecord:
        """
        Overwrite today's value and notes.

        Raises ValidationError for a value that does not fit the activity's type
        (non-boolean for boolean activities, negative or non-numeric for quantity
        activities); the stored record is left untouched in that case.
        """
        activity = self.__get(id)
        parsed_value = parse_day_value(activity["type"], value)

        record, _ = self.__ensure_today_record(activity)
        record["value"] = parsed_value
        record["notes"] = notes
        apply_streaks(activity, self.clock)

        self.__save_data()
        return deepcopy(record)

    def toggle_today(self, id: EntityId, notes: Optional[str] = None) -> DayRecord:
        """Flip today's done state of a boolean activity."""
        activity = self.__get(id)
        if activity["type"] != "boolean":
            raise ValidationError(
                f"'{activity['name']}' is a quantity activity and cannot be toggled."
            )

        record, _ = self.__ensure_today_record(activity)
        record["value"] = not record["value"]
        if notes is not None:
            record["notes"] = notes
        apply_streaks(activity, self.clock)

        self.__save_data()
        return deepcopy(record)

    def save_notes(self, id: EntityId, notes: str) -> DayRecord:
        """Replace today's notes, keeping the value."""
        activity = self.__get(id)
        record, _ = self.__ensure_today_record(activity)
        record["notes"] = notes
        apply_streaks(activity, self.clock)

        self.__save_data()
        return deepcopy(record)

    def refresh_streaks(self) -> list[Activity]:
        """Recompute the cached streak numbers of every activity."""
        changed = False
        for activity in self.activities:
            if apply_streaks(activity, self.clock):
                changed = True
        if changed:
            self.__save_data()
        return deepcopy(self.activities)
