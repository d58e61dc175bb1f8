"""Derived display fields for build notifications.

Both helpers are pure functions of their input, so repeated or
concurrent renders of the same event always agree.
"""

from __future__ import annotations

# Ordered (token, environment) pairs: first substring match wins.
# The site-specific test tokens must precede the generic "test".
ENVIRONMENT_RULES: tuple[tuple[str, str], ...] = (
    ("test_fz", "测试环境(福州)"),
    ("test_xm", "测试环境(厦门)"),
    ("test", "测试环境"),
    ("pre", "预发环境"),
    ("prod", "生产环境"),
)

SHORT_COMMIT_LENGTH = 8


def infer_environment(project_name: str) -> str:
    """Classify the deployment environment from a project name.

    Matching is case-sensitive substring containment against
    ``ENVIRONMENT_RULES``.  Returns ``""`` when nothing matches.

    >>> infer_environment("app-test_xm-svc")
    '测试环境(厦门)'
    >>> infer_environment("billing")
    ''
    """
    if project_name is None:
        raise TypeError("project_name must not be None")
    for token, environment in ENVIRONMENT_RULES:
        if token in project_name:
            return environment
    return ""


def normalize_commit_id(commit_id: str | None) -> str:
    """Shorten a commit hash for display.

    ``None`` and ``""`` become the literal ``"null"``; hashes shorter
    than eight characters are returned unchanged.
    """
    if not commit_id:
        return "null"
    return commit_id[:SHORT_COMMIT_LENGTH]
