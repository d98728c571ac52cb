# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from habitual.error import HabitualError
from habitual.session import get_session


def theme(
    ctx: typer.Context,
    choice: Annotated[
        Optional[str],
        typer.Argument(help="dark, light or toggle; omit to show the current theme"),
    ] = None,
) -> None:
    """Show or change the color theme."""
    session = get_session(ctx)

    try:
        if choice is None:
            current = session.themes.get_theme()
        elif choice == "toggle":
            current = session.themes.toggle_theme()
        else:
            current = session.themes.set_theme(choice)
    except HabitualError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    typer.echo(f"Theme: {current}")
