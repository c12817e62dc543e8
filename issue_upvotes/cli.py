#!/usr/bin/env python3
"""Issue Upvotes CLI - rank open GitHub issues by net +1/-1 reactions."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from rich.console import Console

from .config import DEFAULT_OWNER, DEFAULT_REPOSITORY, Settings, load_env_file
from .fetchers import FetchResult, fetch_issues, fetch_reactions
from .github_client import GitHubApiError, GitHubClient
from .report import console, format_rate_limit_hint, print_line, print_report, write_json
from .scoring import aggregate_scores, rank_scores
from .types import ScoreEntry

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rank the open issues of a GitHub repository by net upvotes (+1 minus -1 reactions)."
    )
    parser.add_argument(
        "--owner", default=DEFAULT_OWNER,
        help=f"Repository owner (default: {DEFAULT_OWNER})",
    )
    parser.add_argument(
        "--repo", default=DEFAULT_REPOSITORY,
        help=f"Repository name (default: {DEFAULT_REPOSITORY})",
    )
    parser.add_argument(
        "--json-out", default=None,
        help="Optional output path to write the ranking as JSON.",
    )
    parser.add_argument(
        "--env-file", default=None,
        help="Path to a .env file (default: search for .env from the working directory).",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=False,
        help="Enable debug logging.",
    )
    return parser


def _report_issue_failure(result: FetchResult, out: Console) -> None:
    if result.status_code is None:
        print_line(f"Request failed: {result.error}", out=out)
        return
    print_line(f"Exited with HTTP status code: {result.status_code}", out=out)
    if result.rate_limited:
        print_line(format_rate_limit_hint(result.rate_limit_reset), out=out)


def run(settings: Settings, client: GitHubClient, *, out: Console | None = None) -> Optional[list[ScoreEntry]]:
    """Fetch, score and print. Returns None when the issue list could not be fetched."""
    out = out if out is not None else console
    logger.debug("Ranking open issues of %s", settings.full_name)

    issues_result = fetch_issues(client, settings.owner, settings.repository)
    if not issues_result.ok:
        _report_issue_failure(issues_result, out)
        return None

    issues = issues_result.items
    print_line(f"Fetched {len(issues)} issues!", out=out)

    def _with_reactions():
        for issue in issues:
            print_line(f"Gathering reactions for issue: {issue.number}", out=out)
            result = fetch_reactions(client, settings.owner, settings.repository, issue.number)
            if not result.ok:
                logger.debug("Counting issue #%d as having no reactions", issue.number)
            yield issue, result.items

    entries = rank_scores(aggregate_scores(_with_reactions()))
    print_report(entries, out=out)
    return entries


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    try:
        return _main_inner(argv)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled.[/yellow]")
        return 130


def _main_inner(argv: Sequence[str] | None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    load_env_file(args.env_file)
    settings = Settings.from_env(owner=args.owner, repository=args.repo)

    try:
        client = GitHubClient.from_settings(settings)
    except GitHubApiError as error:
        print_line(f"Error: {error}")
        return 1

    try:
        with client:
            entries = run(settings, client)
    except GitHubApiError as error:
        print_line(f"Error: {error}")
        return 1

    if entries is None:
        return 1

    if args.json_out:
        write_json(args.json_out, entries)
        console.print(f"\n[green]Saved to {args.json_out}[/green]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
