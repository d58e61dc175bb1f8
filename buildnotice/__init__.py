"""buildnotice: platform-aware build notifications for chat robots.

Renders a CI build snapshot into the markdown dialect of a chat robot
(Lark/Feishu, DingTalk) and projects it into an outbound card message
ready for a delivery layer.
"""

__version__ = "1.0.0"
__description__ = "Render CI build events into chat-robot notification messages"

from buildnotice.models.build_event import NOT_STARTED, BuildEvent
from buildnotice.models.message import OutboundDraft, OutboundMessage
from buildnotice.models.robots import RobotType
from buildnotice.models.status import BuildStatus
from buildnotice.render.compose import compose_message
from buildnotice.render.draft import to_outbound_draft
from buildnotice.render.markdown import render_markdown

__all__ = [
    "NOT_STARTED",
    "BuildEvent",
    "BuildStatus",
    "OutboundDraft",
    "OutboundMessage",
    "RobotType",
    "compose_message",
    "render_markdown",
    "to_outbound_draft",
    "__version__",
]
