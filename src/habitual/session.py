# SPDX-License-Identifier: MIT

from typing import Optional, cast

import typer

from habitual import configuration
from habitual.configuration import Configuration
from habitual.initialize import initialize
from habitual.log import setup_logging
from habitual.repository.activity import ActivityRepository
from habitual.repository.configuration import ConfigurationRepository
from habitual.repository.key_value import FileKeyValueStore, KeyValueStore
from habitual.repository.theme import ThemeRepository
from habitual.time import Clock
from habitual.view.theme import Palette, get_palette


class Session:
    """Repositories shared by the commands of one CLI invocation."""

    def __init__(
        self,
        store: KeyValueStore,
        clock: Optional[Clock] = None,
        configuration_repository: Optional[ConfigurationRepository] = None,
    ) -> None:
        self.activities = ActivityRepository(store, clock)
        self.themes = ThemeRepository(store)
        self.configuration_repository = configuration_repository

    @property
    def config(self) -> Configuration:
        if self.configuration_repository is None:
            return configuration.get_default_configuration()
        return self.configuration_repository.get_config()

    @property
    def today(self) -> str:
        return self.activities.clock.today()

    @property
    def palette(self) -> Palette:
        return get_palette(self.themes.get_theme())


def create_session() -> Session:
    """Set up directories, configuration and logging, then open the store."""
    initialize()

    configuration_repository = ConfigurationRepository()
    config = configuration_repository.get_config()
    # Persist any defaults back-filled into an older config file
    configuration_repository.flush()
    setup_logging(config["log_level"])

    store = FileKeyValueStore(configuration.DATA_STORE_PATH)
    return Session(store, configuration_repository=configuration_repository)


def get_session(ctx: typer.Context) -> Session:
    return cast(Session, ctx.find_root().obj)
