# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from habitual.time import date_str_to_display_local_date
from habitual.view.state import get_show_header
from habitual.view.theme import Palette


def header(palette: Palette, today: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with today's date.

    Args:
        palette: Colors for the active theme
        today: Today's date as 'YYYY-MM-DD'
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    title = palette["title"]
    additional = ""
    if sub_header is not None:
        additional = f"[{palette['sub_header']}]{sub_header}[/]"
    date = f"[{palette['date']}]{date_str_to_display_local_date(today)}[/]"

    print(Padding(f"[{title}]habitual[/{title}]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(date, (0, 1)))
