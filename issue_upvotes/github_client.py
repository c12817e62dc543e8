"""Thin GitHub REST client: authenticated GETs over a shared session."""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from .config import (
    GITHUB_ACCEPT,
    GITHUB_API_BASE,
    RATE_LIMIT_RESET_HEADER,
    REQUEST_TIMEOUT_S,
    TOKEN_ENV_VAR,
    USER_AGENT,
    Settings,
)

logger = logging.getLogger(__name__)


class GitHubApiError(RuntimeError):
    pass


class MissingTokenError(GitHubApiError):
    pass


class GitHubTransportError(GitHubApiError):
    pass


class ResponseDecodeError(GitHubApiError):
    pass


def issues_url(owner: str, repository: str) -> str:
    return f"/repos/{owner}/{repository}/issues"


def reactions_url(owner: str, repository: str, issue_number: int) -> str:
    return f"/repos/{owner}/{repository}/issues/{issue_number}/reactions"


def rate_limit_reset(response: requests.Response) -> Optional[int]:
    """Epoch second at which the rate limit resets, or None if unknown."""
    raw = response.headers.get(RATE_LIMIT_RESET_HEADER)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


class GitHubClient:
    """Issues GET requests against the GitHub REST API."""

    def __init__(
        self,
        token: Optional[str],
        *,
        base_url: str = GITHUB_API_BASE,
        user_agent: str = USER_AGENT,
        timeout_s: float = REQUEST_TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ):
        if not token:
            raise MissingTokenError(
                f"Missing {TOKEN_ENV_VAR}! Make sure you have configured it."
            )
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout_s = timeout_s
        self.session = session or requests.Session()
        self.session.headers.update(self.headers())

    @classmethod
    def from_settings(cls, settings: Settings, *, session: Optional[requests.Session] = None) -> "GitHubClient":
        return cls(
            settings.token,
            base_url=settings.base_url,
            user_agent=settings.user_agent,
            timeout_s=settings.timeout_s,
            session=session,
        )

    @classmethod
    def from_env(cls, *, session: Optional[requests.Session] = None) -> "GitHubClient":
        return cls.from_settings(Settings.from_env(), session=session)

    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "User-Agent": self.user_agent,
            "Accept": GITHUB_ACCEPT,
        }

    def get(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> requests.Response:
        """GET an endpoint path or absolute URL.

        Non-2xx responses are returned as-is; only transport failures raise.
        """
        url = f"{self.base_url}{endpoint}" if endpoint.startswith("/") else endpoint
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self.session.get(url, params=params, timeout=self.timeout_s)
        except requests.exceptions.RequestException as e:
            raise GitHubTransportError(f"Request to {url} failed: {e}") from e
        logger.debug("GET %s -> %d", url, response.status_code)
        return response

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
