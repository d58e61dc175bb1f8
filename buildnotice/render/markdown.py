"""Platform-aware markdown body for build notifications.

The body is a fixed sequence of template lines.  A build that has not
started omits the duration line and the commit id; otherwise both are
present.  The platform only changes the inline tag name, the optional
heading block and the line separator.
"""

from __future__ import annotations

import logging

from buildnotice.models.build_event import BuildEvent
from buildnotice.models.robots import RobotProfile
from buildnotice.render.fields import infer_environment, normalize_commit_id

logger = logging.getLogger(__name__)

LF = "\n"
# Two trailing spaces force a hard break in DingTalk markdown
HARD_BREAK = "  " + LF
DIVIDER = "---"


def _colored(tag: str, color: str, text: str) -> str:
    return f"<{tag} color='{color}'>{text}</{tag}>"


def render_lines(event: BuildEvent, robot: RobotProfile) -> list[str]:
    """Return the body lines for *event* on *robot*, before joining.

    The line count depends only on the robot and on whether the build
    has started; an empty ``content`` still yields a (blank) last line.
    """
    tag = robot.status_tag_name
    status = event.status_type
    lines: list[str] = []

    if robot.requires_leading_tag_block:
        lines.append(f"## {_colored(tag, status.color, event.title)}")
        lines.append(DIVIDER)

    environment = infer_environment(event.project_name)
    commit_id = normalize_commit_id(event.git_commit_id)

    lines.append(
        f"工程名称：[{event.project_name}]({event.project_url})"
        f" - [{event.job_name}]({event.job_url})"
    )
    lines.append(f"发布环境：{event.pi_project_name} - {environment}")

    if event.has_started:
        lines.append(f"构建分支：{event.git_branch} [{commit_id}]  ({event.job_action})")
    else:
        lines.append(f"构建分支：{event.git_branch}  ({event.job_action})")

    lines.append(f"当前状态：{_colored(tag, status.color, status.label)}")
    if event.has_started:
        lines.append(f"构建用时：{event.duration}")

    lines.append(f"触发用户：{event.executor_name}")
    lines.append(event.content or "")
    return lines


def render_markdown(event: BuildEvent, robot: RobotProfile) -> str:
    """Render *event* as a message body in *robot*'s markdown dialect.

    The result is a pure function of the event and robot traits:
    rendering the same event twice yields identical text.
    """
    lines = render_lines(event, robot)
    separator = HARD_BREAK if robot.requires_leading_tag_block else LF
    logger.debug(
        "Rendered %d lines for project %s (status=%s, tag=%s)",
        len(lines),
        event.project_name,
        event.status_type.value,
        robot.status_tag_name,
    )
    return separator.join(lines)
