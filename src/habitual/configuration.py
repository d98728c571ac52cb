# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "habitual"
CONFIG_DIR_ENV = "HABITUAL_CONFIG_DIR"

# These will be set dynamically by load_config_path_configuration() and
# load_data_path_configuration()
CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"

DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_STORE_PATH: Path = DATA_PATH / "store"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    chart_days: int
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "chart_days": 7,
        "log_level": "WARNING",
    }


def load_config_path_configuration() -> None:
    """
    Resolve the configuration directory.

    HABITUAL_CONFIG_DIR takes precedence over the platform default.
    """
    global CONFIG_PATH, APP_CONFIG_PATH

    config_dir = os.environ.get(CONFIG_DIR_ENV)
    if config_dir:
        CONFIG_PATH = Path(config_dir)
    else:
        CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
    APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after load_config_path_configuration() and before any
    repositories are instantiated.
    """
    global DATA_PATH, DATA_STORE_PATH

    if os.environ.get(CONFIG_DIR_ENV):
        # Keep a relocated profile self-contained
        DATA_PATH = CONFIG_PATH / "data"
    else:
        DATA_PATH = platformdirs.user_data_path(APP_NAME)

    if APP_CONFIG_PATH.is_file():
        config: Optional[Configuration] = load(
            APP_CONFIG_PATH.read_text(), Loader=Loader
        )
        if config is not None and config.get("data_path") is not None:
            DATA_PATH = Path(str(config["data_path"])).expanduser()

    DATA_STORE_PATH = DATA_PATH / "store"
