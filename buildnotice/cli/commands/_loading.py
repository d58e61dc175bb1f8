"""Shared helpers for CLI commands that read a build event file."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from buildnotice.exceptions import EventLoadError
from buildnotice.models.build_event import BuildEvent


def load_event(path: Path) -> BuildEvent:
    """Read and validate a JSON build event.

    Raises
    ------
    EventLoadError
        If the file is missing, is not JSON, or fails validation.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise EventLoadError(f"Cannot read {path}: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise EventLoadError(f"{path} is not valid JSON: {exc}") from exc

    try:
        return BuildEvent.model_validate(data)
    except ValidationError as exc:
        raise EventLoadError(f"{path} is not a valid build event:\n{exc}") from exc
