"""BuildEvent — a frozen snapshot of one build's notification metadata.

Constructed once per build-status transition (started, finished) by the
CI integration layer, rendered once per configured robot, then dropped.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from buildnotice.models.status import BuildStatus
from buildnotice.render.fields import infer_environment, normalize_commit_id

# Duration value reported for a build that has not begun yet
NOT_STARTED = "Not started yet"


class BuildEvent(BaseModel):
    """Metadata for a single build notification.

    ``status_type`` and ``project_name`` are required; constructing an
    event without them raises ``pydantic.ValidationError``.  The derived
    ``environment`` and ``short_commit_id`` are computed on access and
    never written back, so one instance can be rendered for several
    robots, concurrently if need be.

    ``executor_mobile`` and ``executor_open_id`` are not rendered; they
    are used for mentions when the outbound message is composed.
    ``description`` is carried but intentionally left out of the body.
    """

    model_config = ConfigDict(frozen=True)

    title: str = ""
    project_name: str
    project_url: str = ""
    job_name: str = ""
    job_url: str = ""
    status_type: BuildStatus
    duration: str = NOT_STARTED
    executor_name: str = ""
    executor_mobile: str = ""
    executor_open_id: str = ""
    content: str | None = None
    description: str = ""
    pi_project_name: str = ""
    git_branch: str = ""
    git_commit_id: str | None = None
    job_action: str = ""

    @property
    def environment(self) -> str:
        """Deployment environment inferred from ``project_name``."""
        return infer_environment(self.project_name)

    @property
    def short_commit_id(self) -> str:
        """Display-safe commit reference (8 chars, or ``"null"``)."""
        return normalize_commit_id(self.git_commit_id)

    @property
    def has_started(self) -> bool:
        return self.duration != NOT_STARTED
