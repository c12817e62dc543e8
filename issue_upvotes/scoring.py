from __future__ import annotations

from typing import Iterable

from .config import DOWNVOTE, UPVOTE
from .types import Issue, Reaction, ScoreEntry


def reaction_delta(content: str) -> int:
    if content == UPVOTE:
        return 1
    if content == DOWNVOTE:
        return -1
    return 0


def aggregate_scores(pairs: Iterable[tuple[Issue, Iterable[Reaction]]]) -> dict[int, int]:
    """
    Net score per issue number from (issue, reactions) pairs.

    Only issues with a non-zero net score end up in the mapping: an entry is
    dropped again as soon as its running total returns to zero.
    """
    scores: dict[int, int] = {}
    for issue, reactions in pairs:
        for reaction in reactions:
            delta = reaction_delta(reaction.content)
            if not delta:
                continue
            total = scores.get(issue.number, 0) + delta
            if total:
                scores[issue.number] = total
            else:
                scores.pop(issue.number, None)
    return scores


def rank_scores(scores: dict[int, int]) -> list[ScoreEntry]:
    """Highest score first; equal scores fall back to the lower issue number."""
    ordered = sorted(scores.items(), key=lambda item: (-item[1], item[0]))
    return [ScoreEntry(issue_number=number, score=score) for number, score in ordered]
