# SPDX-License-Identifier: MIT

from habitual.model.activity import Activity, ActivityKind, DayRecord
from habitual.model.entity_id import generate_entity_id


def get_activity_template() -> Activity:
    return {
        "id": generate_entity_id(),
        "name": "",
        "type": "boolean",
        "countType": "count-if-done",
        "goal": 0,
        "history": {},
        "currentStreak": 0,
        "longestStreak": 0,
    }


def get_day_record_template(kind: ActivityKind) -> DayRecord:
    if kind == "boolean":
        return {"value": False, "notes": ""}
    return {"value": 0, "notes": ""}
