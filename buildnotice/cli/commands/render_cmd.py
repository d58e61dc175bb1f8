"""``buildnotice render EVENT_FILE`` — print the message body for a robot."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from buildnotice.cli.commands._loading import load_event
from buildnotice.config import config
from buildnotice.exceptions import BuildNoticeError
from buildnotice.models.robots import RobotType
from buildnotice.models.status import BuildStatus
from buildnotice.render.markdown import render_markdown

console = Console()

_BORDER_STYLES: dict[BuildStatus, str] = {
    BuildStatus.START: "cyan",
    BuildStatus.SUCCESS: "green",
    BuildStatus.FAILURE: "bold red",
    BuildStatus.ABORTED: "dim",
    BuildStatus.UNSTABLE: "yellow",
    BuildStatus.NOT_BUILT: "dim",
}


def render_cmd(
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
    raw: bool = typer.Option(
        False,
        "--raw",
        help="Print the body only, without a panel.",
    ),
) -> None:
    """Render a build event into the robot's markdown dialect."""
    try:
        robot_type = RobotType.from_name(robot or config.default_robot)
        event = load_event(event_file)
    except BuildNoticeError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    body = render_markdown(event, robot_type)
    if raw:
        console.print(Text(body), soft_wrap=True)
        return

    console.print(
        Panel(
            Text(body),
            title=f"[bold]{escape(event.title or event.project_name)}[/bold]",
            subtitle=f"[dim]{robot_type.value}[/dim]",
            border_style=_BORDER_STYLES.get(event.status_type, "dim"),
            padding=(1, 2),
        )
    )
