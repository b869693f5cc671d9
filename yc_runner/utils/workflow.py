"""
GitHub Actions workflow commands.

**Conceptual**: The runner turns specially formatted stdout lines and the
GITHUB_OUTPUT file into collapsible log groups, error annotations, masked
secrets and step outputs. actions-toolkit (a port of @actions/core) handles
the command format and escaping; this module keeps the handful of calls the
action makes in one place so tests can patch `core`.
"""

from contextlib import contextmanager
from typing import Iterator

from actions_toolkit import core


@contextmanager
def group(title: str) -> Iterator[None]:
    """
    Wrap output in a collapsible log group.

    The group is closed even if the body raises, so an error message printed
    afterwards is visible outside the collapsed section.
    """
    core.start_group(title)
    try:
        yield
    finally:
        core.end_group()


def add_mask(secret: str) -> None:
    """Register a secret so the runner replaces it with *** in the log."""
    if secret:
        core.set_secret(secret)


def error(message: str) -> None:
    core.error(message)


def set_output(name: str, value: str) -> None:
    """Publish a step output for later steps (`steps.<id>.outputs.<name>`)."""
    core.set_output(name, value)
