# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from habitual.model.activity import Activity
from habitual.service.activity import get_day_value, is_completed, is_goal_met
from habitual.view.theme import Palette
from habitual.view.views.header import header


def format_goal(activity: Activity) -> str:
    if activity["type"] != "quantity" or activity["goal"] <= 0:
        return "None"
    return str(activity["goal"])


def format_day_value(activity: Activity, date: str) -> str:
    value = get_day_value(activity, date)
    if value is None:
        return "-"
    if activity["type"] == "boolean":
        return "done" if value else "not done"
    return str(value)


def activities_view(
    palette: Palette,
    today: str,
    activities: list[Activity],
) -> None:
    """Display all activities in a table."""
    header(palette, today, "activities")

    console = Console()
    if len(activities) == 0:
        console.print(
            f"[{palette['muted']}]No activities yet. "
            f"Add one with 'habitual activity add NAME'.[/]"
        )
        return

    activities_table = Table(box=box.SIMPLE)
    activities_table.add_column("id")
    activities_table.add_column("name")
    activities_table.add_column("type")
    activities_table.add_column("count type")
    activities_table.add_column("goal")

    for activity in activities:
        activities_table.add_row(
            activity["id"][:8],
            f"[{palette['name']}]{escape(activity['name'])}[/]",
            activity["type"],
            activity["countType"],
            format_goal(activity),
        )

    console.print(activities_table)


def single_activity_view(
    palette: Palette,
    today: str,
    activity: Activity,
) -> None:
    """Display detailed view of a single activity."""
    header(palette, today, "activity")

    activity_table = Table(box=box.SIMPLE)
    activity_table.add_column("property")
    activity_table.add_column("value")

    activity_table.add_row("id", activity["id"])
    activity_table.add_row("name", escape(activity["name"]))
    activity_table.add_row("type", activity["type"])
    activity_table.add_row("count type", activity["countType"])
    activity_table.add_row("goal", format_goal(activity))
    activity_table.add_row("days logged", str(len(activity["history"])))
    activity_table.add_row("today", format_day_value(activity, today))
    activity_table.add_row("current streak", str(activity["currentStreak"]))
    activity_table.add_row("longest streak", str(activity["longestStreak"]))

    console = Console()
    console.print(activity_table)


def today_view(
    palette: Palette,
    today: str,
    activities: list[Activity],
) -> None:
    """
    Display today's log for all activities.

    Activity     Type       Status  Value  Goal       Notes
    ──────────────────────────────────────────────────────────
    Read         boolean    X       done
    Water        quantity   X       6      5 (met!)
    Smoking      boolean    -       -
    """
    header(palette, today, "today")

    today_table = Table(box=box.SIMPLE)
    today_table.add_column("activity")
    today_table.add_column("type")
    today_table.add_column("status")
    today_table.add_column("value")
    today_table.add_column("goal")
    today_table.add_column("notes")

    for activity in activities:
        record = activity["history"].get(today)
        completed = is_completed(activity, today)

        status_style = palette["done"] if completed else palette["muted"]
        status_str = f"[{status_style}]{'X' if completed else '-'}[/]"

        value_str = format_day_value(activity, today)

        goal_str = ""
        if activity["type"] == "quantity" and activity["goal"] > 0:
            goal_str = str(activity["goal"])
            if is_goal_met(activity, today):
                goal_str = f"{goal_str} [{palette['done']}](met!)[/]"

        notes_str = escape(record["notes"]) if record is not None else ""

        today_table.add_row(
            f"[{palette['name']}]{escape(activity['name'])}[/]",
            activity["type"],
            status_str,
            value_str,
            goal_str,
            notes_str,
        )

    console = Console()
    console.print(today_table)


def streaks_view(
    palette: Palette,
    today: str,
    activities: list[Activity],
) -> None:
    """Display current and longest streaks for all activities."""
    header(palette, today, "streaks")

    streaks_table = Table(box=box.SIMPLE)
    streaks_table.add_column("activity")
    streaks_table.add_column("current")
    streaks_table.add_column("longest")

    for activity in activities:
        streaks_table.add_row(
            f"[{palette['name']}]{escape(activity['name'])}[/]",
            f"[{palette['streak']}]{activity['currentStreak']} day streak[/]",
            f"[{palette['record']}]{activity['longestStreak']} day record[/]",
        )

    console = Console()
    console.print(streaks_table)
