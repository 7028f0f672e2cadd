# =============================================================================
# metasearch/cli/search.py — CLI Search Command
# =============================================================================
#
# Runs one query against one or more upstream engines from the command line
# and prints each engine's results separately (no cross-engine merging).
#
# Typical usage:
#   python -m metasearch.cli.search "rust async runtime"
#   python -m metasearch.cli.search "rust async" --engine qwant --page 2
#   python -m metasearch.cli.search "rust async" --json
#
# Exit status is 1 when the configuration is invalid or every engine failed
# with a real error; an engine reporting "no results" does not count as a
# failure.
# =============================================================================

"""Standalone CLI for querying the configured search engines.

Usage::

    python -m metasearch.cli.search QUERY [--engine NAME]... [--page N]
                                          [--safe-search N] [--json]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from pydantic import ValidationError

from metasearch.config.settings import Settings, get_settings
from metasearch.engines import available_engines
from metasearch.main import EngineOutcome, build_engines, build_http_client, run_engines
from metasearch.utils.errors import MetasearchError
from metasearch.utils.logging import configure_logging


def _format_text_output(outcomes: list[EngineOutcome]) -> str:
    lines: list[str] = []
    for outcome in outcomes:
        lines.append(f"== {outcome.engine} ==")
        if outcome.error is not None:
            lines.append(f"  ({outcome.error.kind.value}) {outcome.error}")
        for position, result in enumerate(outcome.results.values(), start=1):
            lines.append(f"{position:>3}. {result.title}")
            lines.append(f"     {result.url}")
            if result.description:
                lines.append(f"     {result.description}")
        lines.append("")
    return "\n".join(lines)


def _format_json_output(outcomes: list[EngineOutcome]) -> str:
    payload = [
        {
            "engine": outcome.engine,
            "error": (
                {"kind": outcome.error.kind.value, "message": str(outcome.error)}
                if outcome.error is not None
                else None
            ),
            "results": [
                {
                    "title": result.title,
                    "url": result.url,
                    "description": result.description,
                    "engines": sorted(result.engines),
                }
                for result in outcome.results.values()
            ],
        }
        for outcome in outcomes
    ]
    return json.dumps(payload, indent=2, ensure_ascii=False)


async def _run(args: argparse.Namespace, app_settings: Settings) -> int:
    engines = build_engines(app_settings)
    async with build_http_client(app_settings) as client:
        outcomes = await run_engines(
            engines,
            args.query,
            args.page,
            app_settings.user_agent,
            client,
            args.safe_search if args.safe_search is not None else app_settings.safe_search,
        )

    output = _format_json_output(outcomes) if args.json_output else _format_text_output(outcomes)
    print(output)

    if outcomes and all(outcome.failed for outcome in outcomes):
        return 1
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metasearch",
        description="Query upstream search engines and print normalized results.",
    )
    parser.add_argument("query", help="Search query")
    parser.add_argument(
        "--engine", "-e",
        action="append",
        dest="engines",
        choices=available_engines(),
        help="Engine to query (repeatable; defaults to the ENGINES setting)",
    )
    parser.add_argument("--page", "-p", type=int, default=1, help="Result page (default: 1)")
    parser.add_argument(
        "--safe-search",
        type=int,
        choices=range(0, 5),
        default=None,
        help="Safe-search level 0-4 (defaults to the SAFE_SEARCH setting)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Print machine-readable JSON",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point; returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.page < 0:
        parser.error("--page must be zero or positive")

    try:
        app_settings = get_settings()
    except ValidationError as exc:
        print(f"error: invalid configuration\n{exc}", file=sys.stderr)
        return 1
    if args.engines:
        app_settings = app_settings.model_copy(update={"engines": args.engines})

    configure_logging(
        log_level="WARNING" if args.json_output else app_settings.log_level,
        json_output=app_settings.app_env == "production",
    )

    try:
        return asyncio.run(_run(args, app_settings))
    except MetasearchError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
