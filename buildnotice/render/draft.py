"""Projection of a build event into an outbound card draft."""

from __future__ import annotations

from collections.abc import Callable

from buildnotice.models.build_event import BuildEvent
from buildnotice.models.message import Button, MsgType, OutboundDraft

ButtonFactory = Callable[[str], tuple[Button, ...]]


def create_default_buttons(job_url: str) -> tuple[Button, ...]:
    """Return the standard link buttons for a job page.

    A blank URL yields no buttons.  Otherwise the card links to the
    job's change list and its console output.
    """
    if not job_url or not job_url.strip():
        return ()
    base = job_url.strip()
    if not base.endswith("/"):
        base += "/"
    return (
        Button(title="更改记录", url=f"{base}changes"),
        Button(title="控制台", url=f"{base}console"),
    )


def to_outbound_draft(
    event: BuildEvent,
    button_factory: ButtonFactory = create_default_buttons,
) -> OutboundDraft:
    """Build the card draft for *event*, independent of any robot.

    The rendered body is merged in later via ``OutboundDraft.with_text``.
    """
    return OutboundDraft(
        kind=MsgType.CARD,
        status_type=event.status_type,
        buttons=tuple(button_factory(event.job_url)),
        title=event.title,
    )
