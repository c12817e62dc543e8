"""Console and JSON output for ranked issues."""

from __future__ import annotations

import json
import time
from datetime import timedelta
from pathlib import Path
from typing import Optional

from rich.console import Console

from .types import ScoreEntry

console = Console()

RATE_LIMIT_FALLBACK = "Please try again later in sometime!"


def format_rank_line(rank: int, entry: ScoreEntry) -> str:
    return f"#{rank} – Issue #{entry.issue_number} with {entry.score} upvotes!"


def format_wait(seconds: float) -> str:
    return str(timedelta(seconds=max(0, int(seconds))))


def format_rate_limit_hint(reset_epoch: Optional[int], now: Optional[float] = None) -> str:
    if reset_epoch is None:
        return RATE_LIMIT_FALLBACK
    now = time.time() if now is None else now
    return f"Please try again later after {format_wait(reset_epoch - now)}!"


def print_line(text: str = "", *, out: Console | None = None) -> None:
    """Print plain text; no markup, highlighting or line wrapping."""
    (out if out is not None else console).print(
        text, markup=False, highlight=False, emoji=False, soft_wrap=True
    )


def print_report(entries: list[ScoreEntry], *, out: Console | None = None) -> None:
    print_line(out=out)
    for rank, entry in enumerate(entries, start=1):
        print_line(format_rank_line(rank, entry), out=out)


def write_json(path: str | Path, entries: list[ScoreEntry]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    rows = [
        {"rank": rank, "issue_number": entry.issue_number, "score": entry.score}
        for rank, entry in enumerate(entries, start=1)
    ]
    p.write_text(json.dumps(rows, indent=2) + "\n", encoding="utf-8")
