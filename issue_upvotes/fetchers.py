"""Issue and reaction fetchers.

Both fetchers return a ``FetchResult`` instead of printing or exiting, so the
caller decides how loudly a failure is reported. Only an undecodable body
raises (``ResponseDecodeError``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

import requests

from .config import PER_PAGE, RATE_LIMIT_STATUSES
from .github_client import (
    GitHubClient,
    GitHubTransportError,
    ResponseDecodeError,
    issues_url,
    rate_limit_reset,
    reactions_url,
)
from .types import Issue, Reaction

logger = logging.getLogger(__name__)


class FetchStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchResult:
    status: FetchStatus
    items: list = field(default_factory=list)
    status_code: Optional[int] = None
    error: Optional[str] = None
    rate_limit_reset: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status is not FetchStatus.FAILED

    @property
    def rate_limited(self) -> bool:
        return self.status_code in RATE_LIMIT_STATUSES

    @classmethod
    def success(cls, items: list, status_code: int) -> "FetchResult":
        status = FetchStatus.OK if items else FetchStatus.EMPTY
        return cls(status=status, items=items, status_code=status_code)


def _failure(response: Optional[requests.Response], error: Optional[str] = None) -> FetchResult:
    if response is None:
        return FetchResult(status=FetchStatus.FAILED, error=error)
    reset = rate_limit_reset(response) if response.status_code in RATE_LIMIT_STATUSES else None
    return FetchResult(
        status=FetchStatus.FAILED,
        status_code=response.status_code,
        error=error or f"HTTP {response.status_code}",
        rate_limit_reset=reset,
    )


def _decode_list(response: requests.Response, parse: Callable[[dict[str, Any]], Any]) -> list:
    try:
        payload = response.json()
    except ValueError as e:
        raise ResponseDecodeError(f"Invalid JSON from {response.url}: {e}") from e
    if not isinstance(payload, list):
        raise ResponseDecodeError(
            f"Expected a JSON array from {response.url}, got {type(payload).__name__}"
        )
    for item in payload:
        if not isinstance(item, dict):
            raise ResponseDecodeError(
                f"Expected JSON objects from {response.url}, got {type(item).__name__}"
            )
    try:
        return [parse(item) for item in payload]
    except (KeyError, TypeError, ValueError) as e:
        raise ResponseDecodeError(f"Unexpected item shape from {response.url}: {e!r}") from e


def _get(client: GitHubClient, endpoint: str, params: Optional[dict[str, Any]] = None):
    """Return (response, None) on HTTP 200, else (None, failure result)."""
    try:
        response = client.get(endpoint, params=params)
    except GitHubTransportError as e:
        return None, _failure(None, str(e))
    if response.status_code != 200:
        return None, _failure(response)
    return response, None


def fetch_issues(client: GitHubClient, owner: str, repository: str) -> FetchResult:
    """Fetch the open issues of a repository, pull requests excluded."""
    params = {"state": "open", "per_page": PER_PAGE}
    response, failure = _get(client, issues_url(owner, repository), params=params)
    if failure is not None:
        logger.debug("Issue fetch for %s/%s failed: %s", owner, repository, failure.error)
        return failure

    issues = [issue for issue in _decode_list(response, Issue.from_api) if not issue.is_pull_request]
    return FetchResult.success(issues, response.status_code)


def fetch_reactions(client: GitHubClient, owner: str, repository: str, issue_number: int) -> FetchResult:
    response, failure = _get(client, reactions_url(owner, repository, issue_number))
    if failure is not None:
        logger.debug("Reaction fetch for issue #%d failed: %s", issue_number, failure.error)
        return failure
    return FetchResult.success(_decode_list(response, Reaction.from_api), response.status_code)
