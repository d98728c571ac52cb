# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from habitual import configuration
from habitual.session import get_session
from habitual.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view(ctx: typer.Context) -> None:
    """Display current configuration settings."""
    config = get_session(ctx).config

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("chart_days", str(config["chart_days"]))
    table.add_row("log_level", config["log_level"])

    console.print(table)


@app.command("set, s", no_args_is_help=True)
def set_config(
    ctx: typer.Context,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory holding the activity store"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Go back to the default data path"),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header"),
    ] = None,
    chart_days: Annotated[Optional[int], typer.Option("--chart-days")] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help=", ".join(configuration.LOG_LEVELS)),
    ] = None,
) -> None:
    """Change configuration settings."""
    repository = get_session(ctx).configuration_repository
    if repository is None:
        typer.echo("Error: configuration is not available in this session.")
        raise typer.Exit(1)

    try:
        repository.update_config(
            data_path=data_path,
            remove_data_path=remove_data_path,
            show_header=show_header,
            chart_days=chart_days,
            log_level=log_level,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)
    repository.flush()

    typer.echo("Configuration updated.")
