"""Outbound message models handed to the delivery layer.

``OutboundDraft`` carries the routing metadata known before rendering;
``OutboundMessage`` is the draft merged with a rendered body and the
mention list.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict

from buildnotice.models.status import BuildStatus


class MsgType(str, Enum):
    """Message kinds supported by the robot webhooks."""

    TEXT = "text"
    MARKDOWN = "markdown"
    CARD = "card"


class Button(BaseModel):
    """A link button rendered at the bottom of a card."""

    model_config = ConfigDict(frozen=True)

    title: str
    url: str


class OutboundDraft(BaseModel):
    """Card message routing metadata, awaiting its body text."""

    model_config = ConfigDict(frozen=True)

    kind: MsgType = MsgType.CARD
    status_type: BuildStatus
    buttons: tuple[Button, ...] = ()
    title: str = ""

    def with_text(
        self,
        text: str,
        *,
        at_all: bool = False,
        at_mobiles: Iterable[str] = (),
        at_open_ids: Iterable[str] = (),
    ) -> OutboundMessage:
        """Return a complete message carrying *text* and the mentions."""
        return OutboundMessage(
            kind=self.kind,
            status_type=self.status_type,
            buttons=self.buttons,
            title=self.title,
            text=text,
            at_all=at_all,
            at_mobiles=tuple(at_mobiles),
            at_open_ids=tuple(at_open_ids),
        )


class OutboundMessage(OutboundDraft):
    """A fully populated message ready for dispatch."""

    text: str
    at_all: bool = False
    at_mobiles: tuple[str, ...] = ()
    at_open_ids: tuple[str, ...] = ()
