#!/usr/bin/env python3
"""
Compositional Pattern Benchmark Runner
Runs the benchmark script and prints a relative throughput summary.
"""

import subprocess
import re
import sys
from pathlib import Path

BENCHMARK_MODULE = "compose_bench.compositional_pattern"

# "Closure x 14,371 ops/sec ±1.68% (89 runs sampled)"
CYCLE_RE = re.compile(
    r'^(?P<name>.+?) x (?P<hz>[\d,]+(?:\.\d+)?) ops/sec '
    r'±(?P<rme>[\d.]+)% \((?P<runs>\d+) runs? sampled\)\s*$',
    re.MULTILINE,
)
FASTEST_RE = re.compile(r'^Fastest is (?P<name>.+?)\s*$', re.MULTILINE)


def get_project_dir():
    return Path(__file__).parent.parent.absolute()


def parse_results(output):
    """Parse cycle lines into {name: {"hz", "rme", "runs"}} plus the fastest name."""
    results = {}
    for match in CYCLE_RE.finditer(output):
        results[match.group("name")] = {
            "hz": float(match.group("hz").replace(",", "")),
            "rme": float(match.group("rme")),
            "runs": int(match.group("runs")),
        }
    fastest = FASTEST_RE.search(output)
    return results, fastest.group("name") if fastest else None


def run_benchmark(cmd, cwd):
    """Run the benchmark and return its raw output, or None on failure."""
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            cwd=cwd,
            timeout=120,
        )
        output = result.stdout + result.stderr
        if result.returncode != 0:
            print(f"  Error: exited with status {result.returncode}")
            print(output.rstrip())
            return None
        return output or None
    except subprocess.TimeoutExpired:
        return None
    except Exception as e:
        print(f"  Error: {e}")
        return None


def generate_ascii_chart(results):
    """Bar per strategy, scaled to the fastest one."""
    print("\n" + "=" * 60)
    print("              THROUGHPUT (ASCII Chart)")
    print("=" * 60 + "\n")

    if not results:
        print("No results to display.")
        return

    max_hz = max(r["hz"] for r in results.values())
    bar_width = 40

    for name, r in results.items():
        bar_len = int((r["hz"] / max_hz) * bar_width) if max_hz > 0 else 0
        print(f"{name}:")
        print(f"  |{'█' * bar_len}{' ' * (bar_width - bar_len)}| {r['hz']:,.0f} ops/sec")
    print()


def print_summary(results, fastest=None):
    """Print summary table, throughput relative to the fastest strategy."""
    print("\n" + "=" * 60)
    print("                     SUMMARY TABLE")
    print("=" * 60)
    print(f"{'Strategy':<40} {'ops/sec':>10} {'±%':>6} {'Rel':>6}")
    print("-" * 60)

    max_hz = max((r["hz"] for r in results.values()), default=0)

    for name, r in results.items():
        relative = r["hz"] / max_hz if max_hz > 0 else 0
        print(f"{name[:40]:<40} {r['hz']:>10,.0f} {r['rme']:>6.2f} {relative:>5.2f}x")

    print("-" * 60)
    if fastest:
        print(f"Fastest: {fastest}")
    print("=" * 60)


def main():
    project_dir = get_project_dir()

    print("=" * 60)
    print("        COMPOSITIONAL PATTERN: CLOSURES VS CLASSES")
    print("=" * 60)
    print()
    print("Running...", flush=True)

    output = run_benchmark([sys.executable, "-m", BENCHMARK_MODULE], project_dir)
    if output is None:
        print("FAILED")
        return 1

    results, fastest = parse_results(output)
    if not results:
        print("FAILED")
        print(output)
        return 1

    print(output.rstrip())
    print_summary(results, fastest)
    generate_ascii_chart(results)
    return 0


if __name__ == "__main__":
    sys.exit(main())
