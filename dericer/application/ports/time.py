"""Port for reading the current time."""

from typing import Protocol


class TimePort(Protocol):
    """Port exposing the current timestamp so callers can inject a clock."""

    def now(self) -> str:
        """Return the current time as an ISO-8601 date-time string."""


__all__ = ["TimePort"]
