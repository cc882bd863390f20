# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""boorutags CLI."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

from ..config import RESULT_LIMIT, HttpSettings, load_http_settings
from ..errors import GENERIC_FETCH_ERROR, UnknownSourceError
from ..http import create_default_http_client
from ..log import setup_logging
from ..relevance import RelevanceEngine
from ..session import TagSession
from ..sources import DEFAULT_SOURCE, DEFAULT_SOURCES, get_source

NO_RESULTS_MESSAGE = "No related tags found"


def _result_limit(value: str) -> int:
    limit = int(value)
    if not 1 <= limit <= RESULT_LIMIT:
        raise argparse.ArgumentTypeError(f"must be between 1 and {RESULT_LIMIT}")
    return limit


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Suggest tags that co-occur with a tag set on an image board")
    parser.add_argument(
        "tags",
        nargs="*",
        help="Tags to start from; each argument may hold several comma-separated tags",
    )
    parser.add_argument(
        "--source",
        default=DEFAULT_SOURCE.name,
        help=f"Image board to query by name or URL (default: {DEFAULT_SOURCE.name})",
    )
    parser.add_argument(
        "--limit",
        type=_result_limit,
        default=RESULT_LIMIT,
        help=f"Maximum number of related tags to print (default: {RESULT_LIMIT})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of human-friendly summary",
    )
    parser.add_argument(
        "--list-sources",
        action="store_true",
        help="List the configured image boards and exit",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: BOORUTAGS_LOG_LEVEL or WARNING)")
    return parser


def _print_json(data: dict[str, Any] | list[Any]) -> None:
    json.dump(data, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _list_sources(as_json: bool) -> None:
    if as_json:
        _print_json([source.to_dict() for source in DEFAULT_SOURCES])
        return
    for source in DEFAULT_SOURCES:
        print(f"{source.name}\t{source.base_url}\tfilter {source.filter_id}")


def _report(session: TagSession, result: list[str] | None) -> dict[str, Any]:
    return {
        "source": session.source.name,
        "tags": session.tags.snapshot(),
        "related": result,
        "export": session.export_text(),
        "error": str(session.last_error) if session.last_error else None,
    }


def _pretty_print(report: dict[str, Any]) -> None:
    related = report.get("related")
    print(f"[boorutags] Source: {report.get('source')}")
    if report.get("error"):
        return
    if related:
        print("Related tags:")
        for tag in related:
            print(f"  {tag}")
    else:
        print(NO_RESULTS_MESSAGE)
    print(f"Tags: {report.get('export') or '-'}")


async def _run(args: argparse.Namespace, settings: HttpSettings) -> dict[str, Any]:
    engine = RelevanceEngine(create_default_http_client(settings), limit=args.limit)
    async with TagSession(engine, source=get_source(args.source)) as session:
        for raw in args.tags:
            session.add_from_input(raw)
        result = await session.load_related()
        return _report(session, result)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.list_sources:
        _list_sources(args.json)
        return 0

    try:
        get_source(args.source)
    except UnknownSourceError as exc:
        parser.error(str(exc))

    settings: HttpSettings = load_http_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False

    report = asyncio.run(_run(args, settings))

    if args.json:
        _print_json(report)
    else:
        _pretty_print(report)

    if report["error"]:
        print(f"{GENERIC_FETCH_ERROR}: {report['error']}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
