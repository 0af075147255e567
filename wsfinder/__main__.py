"""
Command line entry point: ``python -m wsfinder QUERY [--dir DIR ...]``.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys

from wsfinder.searcher import WorkspaceSearcher
from wsfinder.services import ConfigError
from wsfinder.types import SearchConfig


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wsfinder",
        description="Find workspace directories by fuzzy and pinyin-aware name matching.",
    )
    parser.add_argument("query", nargs="?", default="", help="Search text; empty lists every workspace.")
    parser.add_argument(
        "--dir",
        dest="directories",
        action="append",
        default=[],
        metavar="DIR",
        help="Search root (repeatable). Defaults to the roots in the settings file.",
    )
    parser.add_argument("--config", help="Settings file holding 'searchDirectories'.")
    parser.add_argument("--limit", type=int, help="Number of fuzzy fallback results (default 5).")
    parser.add_argument("--explain", action="store_true", help="Show the matching phase and fuzzy scores.")
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of one name per line.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = SearchConfig.create_default()
        if args.config:
            config = config.with_config_path(args.config)
        if args.limit is not None:
            config = config.with_fallback_limit(args.limit)
    except ValueError as e:
        parser.error(str(e))

    searcher = WorkspaceSearcher(config)
    try:
        directories = args.directories or searcher.configured_directories()
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    outcome = searcher.search_workspaces_with_details(args.query, directories)

    if args.json:
        payload: dict = {"results": list(outcome.names)}
        if args.explain:
            payload["phase"] = outcome.phase
            payload["scores"] = [
                {
                    "name": s.name,
                    "substring": s.substring,
                    "subsequence": s.subsequence,
                    "edit_distance": s.edit_distance,
                }
                for s in outcome.scores
            ]
        print(json.dumps(payload, ensure_ascii=False))
        return 0

    if args.explain:
        print(f"# phase: {outcome.phase}")
    scores = {s.name: s for s in outcome.scores}
    for name in outcome.names:
        if args.explain and name in scores:
            s = scores[name]
            print(f"{name}\tsubstring={s.substring} subsequence={s.subsequence} edit={s.edit_distance}")
        else:
            print(name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
