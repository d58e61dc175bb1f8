"""Build status enumeration and its display metadata.

Labels and colors live in lookup tables next to the enum so that new
statuses only need a table entry; the renderer reads them through the
``StatusMetadata`` protocol and never branches on a concrete status.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


@runtime_checkable
class StatusMetadata(Protocol):
    """Anything that can describe a build outcome in a notification."""

    @property
    def label(self) -> str:
        """Human-readable status label."""
        ...

    @property
    def color(self) -> str:
        """Color token understood by the robot markup dialects."""
        ...


class BuildStatus(str, Enum):
    """Outcome of a CI build at the moment a notification is sent."""

    START = "start"
    SUCCESS = "success"
    FAILURE = "failure"
    ABORTED = "aborted"
    UNSTABLE = "unstable"
    NOT_BUILT = "not_built"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]

    @property
    def color(self) -> str:
        return _STATUS_COLORS[self]


_STATUS_LABELS: dict[BuildStatus, str] = {
    BuildStatus.START: "开始",
    BuildStatus.SUCCESS: "成功",
    BuildStatus.FAILURE: "失败",
    BuildStatus.ABORTED: "终止",
    BuildStatus.UNSTABLE: "不稳定",
    BuildStatus.NOT_BUILT: "未构建",
}

_STATUS_COLORS: dict[BuildStatus, str] = {
    BuildStatus.START: "blue",
    BuildStatus.SUCCESS: "green",
    BuildStatus.FAILURE: "red",
    BuildStatus.ABORTED: "grey",
    BuildStatus.UNSTABLE: "orange",
    BuildStatus.NOT_BUILT: "grey",
}
