# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from habitual.error import HabitualError
from habitual.service.activity import get_chart_data
from habitual.session import get_session
from habitual.terminal.custom_typer import AliasedTyperGroup
from habitual.view.views import activity as activity_report
from habitual.view.views import history as history_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("today, t")
def today(ctx: typer.Context) -> None:
    """Show today's log for every activity."""
    session = get_session(ctx)

    try:
        session.activities.ensure_today_for_all()
        activities = session.activities.refresh_streaks()
    except HabitualError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    activity_report.today_view(session.palette, session.today, activities)


@app.command("streaks, s")
def streaks(ctx: typer.Context) -> None:
    """Show current and longest streaks."""
    session = get_session(ctx)

    try:
        activities = session.activities.refresh_streaks()
    except HabitualError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    activity_report.streaks_view(session.palette, session.today, activities)


@app.command("history, h")
def history(ctx: typer.Context) -> None:
    """Show every logged day, newest first."""
    session = get_session(ctx)
    history_report.history_view(
        session.palette, session.today, session.activities.get_all_activities()
    )


@app.command("chart, c")
def chart(
    ctx: typer.Context,
    days: Annotated[
        Optional[int],
        typer.Option("--days", "-d", min=1, help="Number of days to chart"),
    ] = None,
) -> None:
    """Show a bar chart of the last days for every activity."""
    session = get_session(ctx)
    chart_days = days if days is not None else session.config["chart_days"]

    charts = [
        (activity, get_chart_data(activity, session.activities.clock, chart_days))
        for activity in session.activities.get_all_activities()
    ]
    history_report.chart_view(session.palette, session.today, charts)
