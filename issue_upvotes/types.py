from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Issue:
    number: int
    title: str
    is_pull_request: bool = False

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "Issue":
        # The issues endpoint lists pull requests too; they carry a "pull_request" object.
        return cls(
            number=int(item["number"]),
            title=item.get("title") or "",
            is_pull_request=item.get("pull_request") is not None,
        )


@dataclass(frozen=True)
class Reaction:
    content: str

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "Reaction":
        return cls(content=item.get("content") or "")


@dataclass(frozen=True)
class ScoreEntry:
    issue_number: int
    score: int
