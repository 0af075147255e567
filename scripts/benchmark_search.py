#!/usr/bin/env python3
"""
Benchmark runner for wsfinder's matching engine.

Builds a deterministic candidate list of mixed Latin and Han directory names,
then times repeated searches (containment hits and fuzzy fallbacks) and reports
mean/median/CV across runs, with an optional minimum median throughput gate.
"""

from __future__ import annotations

import argparse
import gc
import random
import statistics
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from wsfinder import WorkspaceSearcher

LATIN_PARTS = ["api", "web", "core", "data", "tools", "client", "server", "notes", "infra", "docs"]
HAN_PARTS = ["项目", "管理", "工作", "记录", "长城", "银行", "音乐", "重庆", "数据", "文档"]
QUERIES = ["", "api", "xmgl", "zhangcheng", "cq", "webclnt", "shuju", "zzzz"]


def _build_candidates(count: int, seed: int) -> list[str]:
    rng = random.Random(seed)
    names = []
    for i in range(count):
        if rng.random() < 0.5:
            names.append(f"{rng.choice(LATIN_PARTS)}-{rng.choice(LATIN_PARTS)}-{i}")
        else:
            names.append(f"{rng.choice(HAN_PARTS)}{rng.choice(HAN_PARTS)}{i}")
    return names


def _run_once(searcher: WorkspaceSearcher, candidates: list[str], rounds: int) -> dict[str, float]:
    gc.collect()
    gc_enabled = gc.isenabled()
    if gc_enabled:
        gc.disable()

    try:
        start = time.perf_counter()
        for _ in range(rounds):
            for query in QUERIES:
                searcher.matcher.search(query, candidates)
        end = time.perf_counter()
    finally:
        if gc_enabled:
            gc.enable()

    elapsed = end - start
    searches = rounds * len(QUERIES)
    return {
        "elapsed_seconds": elapsed,
        "searches_per_second": searches / elapsed if elapsed > 0 else 0.0,
    }


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Matching engine benchmark with median gate.")
    parser.add_argument("--runs", type=int, default=5, help="Number of timed runs.")
    parser.add_argument("--candidates", type=int, default=500, help="Number of candidate names.")
    parser.add_argument("--rounds", type=int, default=3, help="Passes over the query list per run.")
    parser.add_argument("--seed", type=int, default=42, help="Seed for candidate generation.")
    parser.add_argument(
        "--min-median-searches-per-sec",
        type=float,
        default=0.0,
        help="Optional gate: fail (exit 1) when median searches/sec is below this value.",
    )
    return parser


def main() -> int:
    args = _build_arg_parser().parse_args()

    if args.runs < 1:
        message = "--runs must be >= 1"
        raise ValueError(message)

    searcher = WorkspaceSearcher()
    candidates = _build_candidates(args.candidates, args.seed)

    print("=" * 72)
    print("WSFINDER SEARCH BENCHMARK")
    print("=" * 72)
    print(f"runs={args.runs} candidates={args.candidates} rounds={args.rounds} queries={len(QUERIES)}")
    print()

    # Warm the character reading memo so runs measure matching only
    searcher.matcher.search("warmup", candidates)

    payloads = []
    for run_idx in range(1, args.runs + 1):
        payload = _run_once(searcher, candidates, args.rounds)
        payloads.append(payload)
        print(
            f"run {run_idx}: "
            f"{payload['elapsed_seconds']:.6f}s | "
            f"{payload['searches_per_second']:.1f} searches/sec",
        )

    rates = [p["searches_per_second"] for p in payloads]
    median_rate = statistics.median(rates)
    mean_rate = statistics.mean(rates)
    stdev_rate = statistics.stdev(rates) if len(rates) > 1 else 0.0
    cv_rate = (stdev_rate / mean_rate * 100.0) if mean_rate else 0.0

    print()
    print("Summary")
    print("-" * 72)
    print(f"rate_mean_searches_per_second={mean_rate:.2f}")
    print(f"rate_median_searches_per_second={median_rate:.2f}")
    print(f"rate_cv_percent={cv_rate:.2f}")
    print()

    if args.min_median_searches_per_sec > 0 and median_rate < args.min_median_searches_per_sec:
        print(
            "GATE=FAIL "
            f"(median {median_rate:.2f} < required {args.min_median_searches_per_sec:.2f})",
        )
        return 1

    print("GATE=PASS")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
