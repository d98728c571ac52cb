# SPDX-License-Identifier: MIT

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Optional, Protocol

from habitual.error import PersistenceError

logger = logging.getLogger(__name__)

KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStore(Protocol):
    """Durable string key-value storage backing the repositories."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryKeyValueStore:
    """Non-durable store, lives as long as the process."""

    def __init__(self, items: Optional[dict[str, str]] = None) -> None:
        self._items: dict[str, str] = dict(items) if items is not None else {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value


class FileKeyValueStore:
    """
    One file per key inside a directory.

    Writes go to a temporary file that then replaces the target, so a value is
    either fully written or not written at all.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def __path_for_key(self, key: str) -> Path:
        if not KEY_PATTERN.match(key):
            raise ValueError(f"Invalid store key: {key!r}")
        return self.directory / key

    def get_item(self, key: str) -> Optional[str]:
        file_path = self.__path_for_key(key)
        if not file_path.is_file():
            return None
        try:
            return file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Could not read '{key}' from {file_path}: {e}")

    def set_item(self, key: str, value: str) -> None:
        file_path = self.__path_for_key(key)
        temp_name: Optional[str] = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.directory,
                prefix=f".{key}.",
                suffix=".tmp",
                delete=False,
            ) as temp_file:
                temp_name = temp_file.name
                temp_file.write(value)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            os.replace(temp_name, file_path)
        except OSError as e:
            if temp_name is not None and os.path.exists(temp_name):
                os.unlink(temp_name)
            logger.error("Failed to write '%s' to %s: %s", key, file_path, e)
            raise PersistenceError(f"Could not write '{key}' to {file_path}: {e}")
        logger.debug("Wrote '%s' (%d chars) to %s", key, len(value), file_path)
