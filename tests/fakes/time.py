"""Fake Time implementation for testing.

FakeTime returns a fixed instant so timestamps written by commands are
predictable in assertions.
"""

from datetime import UTC, datetime

from gwt.core.time.abc import Time

DEFAULT_FAKE_NOW = datetime(2024, 1, 15, 10, 30, 0, tzinfo=UTC)


class FakeTime(Time):
    """Fake implementation that always reports the same moment.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, now: datetime = DEFAULT_FAKE_NOW) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now
