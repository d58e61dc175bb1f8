"""Compose deliverable messages from a build event.

This is the step a delivery integration performs after rendering: the
body for the target robot is merged into the card draft and the
executor is added to the mention list.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from buildnotice.models.build_event import BuildEvent
from buildnotice.models.message import OutboundMessage
from buildnotice.models.robots import RobotProfile
from buildnotice.render.draft import ButtonFactory, create_default_buttons, to_outbound_draft
from buildnotice.render.markdown import render_markdown

logger = logging.getLogger(__name__)


def compose_message(
    event: BuildEvent,
    robot: RobotProfile,
    *,
    at_all: bool = False,
    button_factory: ButtonFactory = create_default_buttons,
) -> OutboundMessage:
    """Render *event* for *robot* and merge it into its outbound draft.

    Blank ``executor_mobile`` / ``executor_open_id`` values are left out
    of the mention lists.
    """
    body = render_markdown(event, robot)
    draft = to_outbound_draft(event, button_factory)
    at_mobiles = [event.executor_mobile] if event.executor_mobile.strip() else []
    at_open_ids = [event.executor_open_id] if event.executor_open_id.strip() else []

    message = draft.with_text(
        body,
        at_all=at_all,
        at_mobiles=at_mobiles,
        at_open_ids=at_open_ids,
    )
    logger.debug(
        "Composed %s message '%s' with %d button(s), %d mention(s)",
        message.kind.value,
        message.title,
        len(message.buttons),
        len(at_mobiles) + len(at_open_ids),
    )
    return message


def render_for_robots(
    event: BuildEvent,
    robots: Iterable[RobotProfile],
) -> dict[RobotProfile, str]:
    """Render *event* once per robot, keyed by robot.

    Duplicate robots are rendered once.
    """
    bodies: dict[RobotProfile, str] = {}
    for robot in robots:
        if robot not in bodies:
            bodies[robot] = render_markdown(event, robot)
    return bodies
