# SPDX-License-Identifier: MIT

from typing import TypedDict

from habitual.repository.theme import Theme


class Palette(TypedDict):
    title: str
    sub_header: str
    date: str
    name: str
    done: str
    missed: str
    streak: str
    record: str
    bar: str
    muted: str


PALETTES: dict[Theme, Palette] = {
    "light": {
        "title": "dark_orange",
        "sub_header": "sandy_brown",
        "date": "blue",
        "name": "bold black",
        "done": "green",
        "missed": "red",
        "streak": "dark_orange3",
        "record": "purple",
        "bar": "green",
        "muted": "grey50",
    },
    "dark": {
        "title": "dark_orange",
        "sub_header": "sandy_brown",
        "date": "plum1",
        "name": "bold white",
        "done": "green3",
        "missed": "indian_red",
        "streak": "yellow",
        "record": "medium_purple1",
        "bar": "spring_green2",
        "muted": "grey62",
    },
}


def get_palette(theme: Theme) -> Palette:
    return PALETTES[theme]
