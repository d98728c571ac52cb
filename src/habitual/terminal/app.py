# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from habitual.session import create_session, get_session
from habitual.terminal import activity, configuration, log, theme, view
from habitual.terminal.custom_typer import OrderedTyperGroup
from habitual.view import state as view_state

app = typer.Typer(
    cls=OrderedTyperGroup,
    help="habitual - Track daily habits and streaks in the CLI",
    no_args_is_help=True,
)
app.add_typer(activity.app, name="activity, a")
app.add_typer(log.app, name="log, l")
app.add_typer(view.app, name="view, v")
app.command(name="theme, th")(theme.theme)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    ctx: typer.Context,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    habitual - Track daily habits and streaks in the CLI

    Global options that apply to all commands.
    """
    # A session may be handed in by an embedding program
    if ctx.obj is None:
        ctx.obj = create_session()

    session = get_session(ctx)
    view_state.set_show_header(session.config["show_header"] and not no_header)


def run() -> None:
    app()
