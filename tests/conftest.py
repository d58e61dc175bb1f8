"""Shared test fixtures for buildnotice."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from buildnotice.models.build_event import NOT_STARTED, BuildEvent
from buildnotice.models.status import BuildStatus


@pytest.fixture
def make_build_event() -> Callable[..., BuildEvent]:
    """Factory fixture: build a BuildEvent with sensible defaults."""

    def _factory(**overrides: Any) -> BuildEvent:
        defaults: dict[str, Any] = {
            "title": "app-test_xm-svc #42",
            "project_name": "app-test_xm-svc",
            "project_url": "https://ci.example.com/job/app-test_xm-svc/",
            "job_name": "#42",
            "job_url": "https://ci.example.com/job/app-test_xm-svc/42/",
            "status_type": BuildStatus.SUCCESS,
            "duration": NOT_STARTED,
            "executor_name": "alice",
            "executor_mobile": "13800000000",
            "executor_open_id": "ou_123",
            "content": None,
            "description": "nightly deploy",
            "pi_project_name": "payments",
            "git_branch": "main",
            "git_commit_id": "a1b2c3d4e5f6",
            "job_action": "deploy",
        }
        defaults.update(overrides)
        return BuildEvent(**defaults)

    return _factory


@pytest.fixture
def not_started_event(make_build_event: Callable[..., BuildEvent]) -> BuildEvent:
    """An event for a build that has been queued but not run."""
    return make_build_event()


@pytest.fixture
def finished_event(make_build_event: Callable[..., BuildEvent]) -> BuildEvent:
    """An event for a build that ran for 3m12s."""
    return make_build_event(duration="3m12s")
