"""``buildnotice draft EVENT_FILE`` — print the composed outbound message."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from buildnotice.cli.commands._loading import load_event
from buildnotice.config import config
from buildnotice.exceptions import BuildNoticeError
from buildnotice.models.robots import RobotType
from buildnotice.render.compose import compose_message

console = Console()


def draft_cmd(
    event_file: Path = typer.Argument(
        ...,
        help="Path to a JSON build event.",
    ),
    robot: str = typer.Option(
        None,
        "--robot",
        "-r",
        help="Target robot (lark, ding_talk). Defaults to BUILDNOTICE_DEFAULT_ROBOT.",
    ),
    at_all: Optional[bool] = typer.Option(
        None,
        "--at-all/--no-at-all",
        help="Mention everybody. Defaults to BUILDNOTICE_AT_ALL.",
    ),
) -> None:
    """Compose the full outbound card message as JSON."""
    try:
        robot_type = RobotType.from_name(robot or config.default_robot)
        event = load_event(event_file)
    except BuildNoticeError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    message = compose_message(
        event,
        robot_type,
        at_all=config.at_all if at_all is None else at_all,
    )
    console.print_json(message.model_dump_json())
