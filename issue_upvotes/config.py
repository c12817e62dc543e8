"""Configuration constants and runtime settings for Issue Upvotes."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

# GitHub REST API
GITHUB_API_BASE = "https://api.github.com"
GITHUB_ACCEPT = "application/vnd.github+json"
USER_AGENT = "issue-upvotes"
REQUEST_TIMEOUT_S = 30.0
PER_PAGE = 100  # single page, the API maximum

# Authentication
TOKEN_ENV_VAR = "GITHUB_TOKEN"

# Target repository
DEFAULT_OWNER = "facebook"
DEFAULT_REPOSITORY = "react"

# Statuses GitHub uses to signal an exhausted rate limit
RATE_LIMIT_STATUSES = (403, 429)
RATE_LIMIT_RESET_HEADER = "x-ratelimit-reset"

# Reaction contents that move the score
UPVOTE = "+1"
DOWNVOTE = "-1"


def load_env_file(path: str | Path | None = None) -> bool:
    """Load a local ``.env`` file; a missing file is not an error.

    Variables already present in the environment are left untouched.
    """
    if path is None:
        path = find_dotenv(usecwd=True)
    if not path or not Path(path).exists():
        return False
    return load_dotenv(dotenv_path=path, override=False)


@dataclass(frozen=True)
class Settings:
    token: str | None
    owner: str = DEFAULT_OWNER
    repository: str = DEFAULT_REPOSITORY
    base_url: str = GITHUB_API_BASE
    user_agent: str = USER_AGENT
    timeout_s: float = REQUEST_TIMEOUT_S

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repository}"

    @classmethod
    def from_env(
        cls,
        *,
        owner: str = DEFAULT_OWNER,
        repository: str = DEFAULT_REPOSITORY,
    ) -> "Settings":
        token = os.environ.get(TOKEN_ENV_VAR) or None
        return cls(token=token, owner=owner, repository=repository)
