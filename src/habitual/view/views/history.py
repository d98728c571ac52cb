# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from habitual.model.activity import Activity
from habitual.service.activity import (
    ChartBar,
    get_history_entries,
    resolve_day_value,
)
from habitual.view.theme import Palette
from habitual.view.views.header import header

BAR_WIDTH = 20


def history_view(
    palette: Palette,
    today: str,
    activities: list[Activity],
) -> None:
    """Display every logged day per activity, newest first."""
    header(palette, today, "history")

    console = Console()
    for activity in activities:
        entries = get_history_entries(activity)
        if len(entries) == 0:
            continue

        history_table = Table(
            box=box.SIMPLE,
            title=f"[{palette['name']}]{escape(activity['name'])}[/]",
            title_justify="left",
        )
        history_table.add_column("date")
        history_table.add_column("status")
        history_table.add_column("notes")

        for date, record in entries:
            value = resolve_day_value(activity["type"], record["value"])
            if activity["type"] == "boolean":
                if value:
                    status_str = f"[{palette['done']}]Done[/]"
                else:
                    status_str = f"[{palette['missed']}]Not Done[/]"
            else:
                status_str = str(value)
            history_table.add_row(
                date,
                status_str,
                f"[italic]{escape(record['notes'])}[/]" if record["notes"] else "",
            )

        console.print(history_table)


def render_bar(bar: ChartBar) -> str:
    filled = round(bar["height"] / 100 * BAR_WIDTH)
    return "█" * filled + "░" * (BAR_WIDTH - filled)


def chart_view(
    palette: Palette,
    today: str,
    charts: list[tuple[Activity, list[ChartBar]]],
) -> None:
    """Display a horizontal progress bar per day for each activity."""
    header(palette, today, "chart")

    console = Console()
    for activity, bars in charts:
        chart_table = Table(
            box=box.SIMPLE,
            title=f"[{palette['name']}]{escape(activity['name'])}[/]",
            title_justify="left",
            show_header=False,
        )
        chart_table.add_column("day")
        chart_table.add_column("bar", no_wrap=True)
        chart_table.add_column("value", justify="right")

        for bar in bars:
            chart_table.add_row(
                bar["weekday"],
                f"[{palette['bar']}]{render_bar(bar)}[/]",
                str(bar["value"]),
            )

        console.print(chart_table)
