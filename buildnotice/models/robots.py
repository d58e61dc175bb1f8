"""Chat robot platforms and the markup traits the renderer needs.

Each platform is described by two properties only:

requires_leading_tag_block
    Whether the body opens with a colored heading and a ``---`` divider.
    Such dialects also need ``"  \\n"`` between lines to force a break.
status_tag_name
    The inline tag wrapped around colored text, e.g. ``<font ...>``.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

from buildnotice.exceptions import UnknownRobotError


@runtime_checkable
class RobotProfile(Protocol):
    """Protocol for a platform descriptor consumed by the renderer."""

    @property
    def requires_leading_tag_block(self) -> bool:
        ...

    @property
    def status_tag_name(self) -> str:
        ...


class RobotType(str, Enum):
    """Registered chat robot platforms."""

    LARK = "lark"
    DING_TALK = "ding_talk"

    @property
    def requires_leading_tag_block(self) -> bool:
        return _ROBOT_TRAITS[self][0]

    @property
    def status_tag_name(self) -> str:
        return _ROBOT_TRAITS[self][1]

    @classmethod
    def from_name(cls, name: str) -> RobotType:
        """Resolve a robot from a loose, case-insensitive name.

        Accepts the enum value (``"ding_talk"``), the member name
        (``"DING_TALK"``), dashed spellings and the aliases in
        ``_ROBOT_ALIASES``.

        Raises
        ------
        UnknownRobotError
            If *name* matches no registered platform.
        """
        key = name.strip().lower().replace("-", "_")
        key = _ROBOT_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise UnknownRobotError(name) from None


# (requires_leading_tag_block, status_tag_name)
_ROBOT_TRAITS: dict[RobotType, tuple[bool, str]] = {
    RobotType.LARK: (False, "text_tag"),
    RobotType.DING_TALK: (True, "font"),
}

_ROBOT_ALIASES: dict[str, str] = {
    "feishu": "lark",
    "dingtalk": "ding_talk",
    "ding": "ding_talk",
}
