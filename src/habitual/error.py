# SPDX-License-Identifier: MIT


class HabitualError(Exception):
    """Base class for errors raised by the activity store."""

    pass


class ValidationError(HabitualError):
    """Raised when user input is rejected. Stored state is left unchanged."""

    pass


class NotFoundError(HabitualError):
    """Raised when an operation references an activity that does not exist."""

    pass


class PersistenceError(HabitualError):
    """Raised when the durable store cannot be written."""

    pass
