"""buildnotice data models — all Pydantic v2 or enums, all immutable."""

from buildnotice.models.build_event import NOT_STARTED, BuildEvent
from buildnotice.models.message import Button, MsgType, OutboundDraft, OutboundMessage
from buildnotice.models.robots import RobotProfile, RobotType
from buildnotice.models.status import BuildStatus, StatusMetadata

__all__ = [
    # status
    "BuildStatus",
    "StatusMetadata",
    # robots
    "RobotProfile",
    "RobotType",
    # build event
    "NOT_STARTED",
    "BuildEvent",
    # outbound message
    "Button",
    "MsgType",
    "OutboundDraft",
    "OutboundMessage",
]
