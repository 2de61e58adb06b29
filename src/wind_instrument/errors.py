"""Error taxonomy for the wind instrument."""

from __future__ import annotations


class WindInstrumentError(Exception):
    """Base class for all wind instrument errors."""


class InvalidBearing(WindInstrumentError, ValueError):
    """Raised when a bearing is non-numeric or non-finite.

    The rejected value is kept on :attr:`value` so callers can report it.
    """

    def __init__(self, value: object, channel: str | None = None) -> None:
        self.value = value
        self.channel = channel
        where = f" for channel {channel!r}" if channel else ""
        super().__init__(f"Invalid bearing{where}: {value!r}")


class MissingData(WindInstrumentError):
    """A required reading is absent; callers keep their previous output."""


class ConfigurationError(WindInstrumentError, ValueError):
    """Raised at construction when no valid geometry could ever be produced."""
