# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from habitual.error import HabitualError, ValidationError
from habitual.service.activity import get_day_value
from habitual.session import get_session
from habitual.terminal.custom_typer import AliasedTyperGroup
from habitual.view.views import activity as activity_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("done, d", no_args_is_help=True)
def done(
    ctx: typer.Context,
    reference: Annotated[str, typer.Argument(help="Activity name or id")],
    notes: Annotated[
        Optional[str],
        typer.Option("--notes", "-n", help="Replace today's notes"),
    ] = None,
) -> None:
    """Toggle today's done state of a boolean activity."""
    session = get_session(ctx)

    try:
        activity = session.activities.find_activity(reference)
        session.activities.toggle_today(activity["id"], notes)
        activity = session.activities.get_activity(activity["id"])
    except HabitualError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    activity_report.today_view(session.palette, session.today, [activity])


@app.command("set, s", no_args_is_help=True)
def set_quantity(
    ctx: typer.Context,
    reference: Annotated[str, typer.Argument(help="Activity name or id")],
    value: Annotated[str, typer.Argument(help="Today's quantity")],
    notes: Annotated[
        Optional[str],
        typer.Option("--notes", "-n", help="Replace today's notes"),
    ] = None,
) -> None:
    """Record today's quantity for a quantity activity."""
    session = get_session(ctx)
    today = session.today

    try:
        activity = session.activities.find_activity(reference)
    except HabitualError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    if activity["type"] != "quantity":
        typer.echo(
            f"Error: '{activity['name']}' is a boolean activity, "
            "use 'habitual log done' instead."
        )
        raise typer.Exit(1)

    existing = activity["history"].get(today)
    existing_value = get_day_value(activity, today)
    if notes is None:
        notes = existing["notes"] if existing is not None else ""

    try:
        session.activities.record_today(activity["id"], value, notes)
        activity = session.activities.get_activity(activity["id"])
    except ValidationError as e:
        typer.echo(f"Error: {e}")
        unchanged = existing_value if existing_value is not None else 0
        typer.echo(f"Today's value for '{activity['name']}' is still {unchanged}.")
        raise typer.Exit(1)
    except HabitualError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    activity_report.today_view(session.palette, today, [activity])


@app.command("note, n", no_args_is_help=True)
def note(
    ctx: typer.Context,
    reference: Annotated[str, typer.Argument(help="Activity name or id")],
    text: Annotated[str, typer.Argument(help="Notes for today")],
) -> None:
    """Save today's notes for an activity."""
    session = get_session(ctx)

    try:
        activity = session.activities.find_activity(reference)
        session.activities.save_notes(activity["id"], text)
        activity = session.activities.get_activity(activity["id"])
    except HabitualError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    activity_report.today_view(session.palette, session.today, [activity])
