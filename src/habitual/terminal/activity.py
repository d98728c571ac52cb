# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from habitual.error import HabitualError, NotFoundError
from habitual.session import get_session
from habitual.terminal.custom_typer import AliasedTyperGroup
from habitual.view.views import activity as activity_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    ctx: typer.Context,
    name: str,
    kind: Annotated[
        str,
        typer.Option("--type", "-t", help="boolean, quantity"),
    ] = "boolean",
    policy: Annotated[
        str,
        typer.Option("--count", "-c", help="count-if-done, count-if-not-done"),
    ] = "count-if-done",
    goal: Annotated[
        Optional[int],
        typer.Option("--goal", "-g", help="Daily target for quantity activities"),
    ] = None,
) -> None:
    """Create a new activity."""
    session = get_session(ctx)

    try:
        activity = session.activities.create(name, kind, policy, goal)
    except HabitualError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    activity_report.single_activity_view(session.palette, session.today, activity)


@app.command("modify, m", no_args_is_help=True)
def modify(
    ctx: typer.Context,
    reference: Annotated[str, typer.Argument(help="Activity name or id")],
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    kind: Annotated[
        Optional[str],
        typer.Option("--type", "-t", help="boolean, quantity"),
    ] = None,
    policy: Annotated[
        Optional[str],
        typer.Option("--count", "-c", help="count-if-done, count-if-not-done"),
    ] = None,
    goal: Annotated[Optional[int], typer.Option("--goal", "-g")] = None,
) -> None:
    """Modify an activity. History and streaks are kept."""
    session = get_session(ctx)

    try:
        current = session.activities.find_activity(reference)
        activity = session.activities.update(
            current["id"],
            name if name is not None else current["name"],
            kind if kind is not None else current["type"],
            policy if policy is not None else current["countType"],
            goal if goal is not None else current["goal"],
        )
    except HabitualError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    activity_report.single_activity_view(session.palette, session.today, activity)


@app.command("delete, d", no_args_is_help=True)
def delete(
    ctx: typer.Context,
    reference: Annotated[str, typer.Argument(help="Activity name or id")],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Delete without asking for confirmation"),
    ] = False,
) -> None:
    """Delete an activity and all of its history."""
    session = get_session(ctx)

    try:
        activity = session.activities.find_activity(reference)
    except NotFoundError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    if not yes:
        typer.confirm(
            f"Delete '{activity['name']}' and all of its history?", abort=True
        )

    try:
        session.activities.delete(activity["id"])
    except HabitualError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    typer.echo(f"Deleted '{activity['name']}'.")


@app.command("list, ls")
def list_activities(ctx: typer.Context) -> None:
    """List all activities."""
    session = get_session(ctx)
    activity_report.activities_view(
        session.palette, session.today, session.activities.get_all_activities()
    )


@app.command("show, s", no_args_is_help=True)
def show(
    ctx: typer.Context,
    reference: Annotated[str, typer.Argument(help="Activity name or id")],
) -> None:
    """Show a single activity with today's log and its streaks."""
    session = get_session(ctx)

    try:
        activity = session.activities.find_activity(reference)
        session.activities.ensure_today(activity["id"])
        session.activities.refresh_streaks()
        activity = session.activities.get_activity(activity["id"])
    except HabitualError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    activity_report.single_activity_view(session.palette, session.today, activity)
