"""Exception hierarchy for buildnotice."""

from __future__ import annotations


class BuildNoticeError(Exception):
    """Base class for all buildnotice errors."""


class UnknownRobotError(BuildNoticeError, ValueError):
    """Raised when a robot name does not match any registered platform."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown robot type: {name!r}")


class EventLoadError(BuildNoticeError):
    """Raised when a build event file cannot be read or parsed."""
