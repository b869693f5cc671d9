"""
Repository identity of the workflow run.

The runner exports GITHUB_REPOSITORY as "owner/repo". The runner registration
downstream needs the two parts separately.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from yc_runner.config.errors import ConfigError


@dataclass(frozen=True)
class GithubRepo:
    """
    Owner and name of the repository the runner is registered with.

    Attributes:
        owner: User or organisation login (e.g. "octo-org").
        repo: Repository name without the owner (e.g. "infra").
    """
    owner: str
    repo: str

    def __post_init__(self):
        """Validate that both parts are present."""
        if not self.owner or not self.repo:
            raise ConfigError(
                f"Repository owner and name must both be non-empty, got: "
                f"owner={self.owner!r}, repo={self.repo!r}"
            )

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "GithubRepo":
        """
        Load the repository from GITHUB_REPOSITORY.

        Args:
            env: Environment mapping (defaults to os.environ).

        Raises:
            ConfigError: If GITHUB_REPOSITORY is unset or not "owner/repo".
        """
        env = os.environ if env is None else env
        value = env.get("GITHUB_REPOSITORY", "")
        if not value:
            raise ConfigError(
                "GITHUB_REPOSITORY is not set. "
                "It is provided by the GitHub runner in the form 'owner/repo'."
            )
        return parse_github_repository(value)


def parse_github_repository(value: str) -> GithubRepo:
    """
    Split "owner/repo" on the first "/".

    Everything after the first slash belongs to the repo part, so
    "a/b/c" gives owner "a" and repo "b/c".

    Raises:
        ConfigError: If there is no "/" or either side is empty.
    """
    owner, sep, repo = value.strip().partition("/")
    if not sep:
        raise ConfigError(f"Expected repository in the form 'owner/repo', got: {value!r}")
    return GithubRepo(owner=owner, repo=repo)
