#!/usr/bin/env python3
"""Benchmark script for globre performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

GLOBS = ("*.py", "src/*/test_?.py", "[!.]*.txt", r"docs/\*draft\*.md", "a.b+c$d^e")


def benchmark_import_time() -> float:
    """Measure import time of globre package."""
    start = time.perf_counter()
    import globre  # noqa: F401

    return time.perf_counter() - start


def benchmark_translate() -> float:
    """Measure glob to regex translation."""
    from globre import translate_glob_to_regex

    start = time.perf_counter()
    for _ in range(10000):
        for glob in GLOBS:
            translate_glob_to_regex(glob)
    return time.perf_counter() - start


def benchmark_match() -> float:
    """Measure matching with precompiled globs."""
    from globre import compile_glob, matches_any

    patterns = tuple(compile_glob(g) for g in GLOBS)
    paths = [f"src/pkg{i}/test_{i % 10}.py" for i in range(1000)]

    start = time.perf_counter()
    for _ in range(10):
        for path in paths:
            matches_any(path, patterns)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run globre benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = [
        {"name": "Import Time", "unit": "seconds", "value": benchmark_import_time()},
        {"name": "Translate (10k x 5 globs)", "unit": "seconds", "value": benchmark_translate()},
        {"name": "Match (10 x 1k paths)", "unit": "seconds", "value": benchmark_match()},
    ]

    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
