"""Main Typer application — imports and registers all CLI commands.

Entry point: ``buildnotice`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from buildnotice.cli.commands.draft_cmd import draft_cmd
from buildnotice.cli.commands.render_cmd import render_cmd
from buildnotice.config import config
from buildnotice.logging_setup import configure_logging
from buildnotice.models.robots import RobotType

app = typer.Typer(
    name="buildnotice",
    help="buildnotice: render CI build events into chat-robot notifications.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def _main_callback(
    log_level: str = typer.Option(
        None, "--log-level", help="Logging level. Defaults to BUILDNOTICE_LOG_LEVEL."
    ),
) -> None:
    configure_logging(log_level or config.log_level)


# Register subcommands
app.command(name="render", help="Render a build event for a robot.")(render_cmd)
app.command(name="draft", help="Compose the outbound message for a build event.")(draft_cmd)


@app.command(name="robots", help="List registered robot platforms.")
def robots_cmd() -> None:
    """List robot platforms and their markup traits."""
    console = Console()
    table = Table(title="Robot Platforms")
    table.add_column("Name", style="cyan")
    table.add_column("Status Tag", style="green")
    table.add_column("Leading Block", justify="center")

    for robot in RobotType:
        leading = "[green]Yes[/green]" if robot.requires_leading_tag_block else "[dim]No[/dim]"
        table.add_row(robot.value, robot.status_tag_name, leading)

    console.print(table)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
