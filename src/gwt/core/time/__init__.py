"""Clock abstraction so timestamps are deterministic in tests."""

from gwt.core.time.abc import Time
from gwt.core.time.real import RealTime

__all__ = ["RealTime", "Time"]
