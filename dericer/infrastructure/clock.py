"""Time adapters satisfying the TimePort protocol."""

from datetime import datetime, timezone

from dericer.application.ports.time import TimePort


class SystemTimePort(TimePort):
    """Wall clock returning UTC ISO-8601 timestamps with milliseconds."""

    def now(self) -> str:
        moment = datetime.now(timezone.utc)
        return moment.isoformat(timespec="milliseconds").replace(
            "+00:00", "Z"
        )


class FixedTimePort(TimePort):
    """Clock returning a fixed timestamp, useful for tests and replays."""

    def __init__(self, timestamp: str) -> None:
        self._timestamp = timestamp

    def set(self, timestamp: str) -> None:
        """Move the clock to another timestamp."""
        self._timestamp = timestamp

    def now(self) -> str:
        return self._timestamp


__all__ = ["SystemTimePort", "FixedTimePort"]
