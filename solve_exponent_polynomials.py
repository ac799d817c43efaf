#!/usr/bin/env python3
"""
Search for small coefficients a_1..a_{i-1} with

    a_1*1^n + a_2*2^n + ... + a_{i-1}*(i-1)^n == i^n

for every exponent n in 2..N, using repeated randomized greedy passes and
keeping the solution with the smallest coefficient sum.

Prints one line per exponent: "n; a_{i-1},...,a_2,a_1" (0 for unused bases).

Usage examples:
  python solve_exponent_polynomials.py 10 6 100
  python solve_exponent_polynomials.py 25 25 1000 --seed 7 --outfile solutions.csv
  python solve_exponent_polynomials.py 40 30 50 --arbitrary-precision
"""

from __future__ import annotations
import argparse
import csv
import logging
import random
from typing import List, Optional

from best_results import BestResults, sum_coefficients
from decomposer import CoefficientMap, DecompositionError
from search import ResultsByExponent, solve_range
from widepow import WIDTH_BITS, WideOverflowError


def parse_int_at_least(minimum: int):
    def parse(s: str) -> int:
        try:
            value = int(s)
        except ValueError:
            raise argparse.ArgumentTypeError(f"expected an integer, got {s!r}")
        if value < minimum:
            raise argparse.ArgumentTypeError(f"must be >= {minimum}, got {value}")
        return value
    return parse


# ---------- Report ----------

def coefficient_row(result: CoefficientMap, i: int) -> List[int]:
    """Coefficients for bases i-1 down to 1, with 0 for absent bases."""
    return [result.get(x, 0) for x in range(i - 1, 0, -1)]


def render_solution_line(n: int, result: CoefficientMap, i: int) -> str:
    return f"{n}; " + ",".join(str(c) for c in coefficient_row(result, i))


def render_report(results: ResultsByExponent, i: int) -> List[str]:
    return ["Solutions"] + [render_solution_line(n, results[n], i) for n in sorted(results)]


def save_csv(results: ResultsByExponent, i: int, path: str) -> None:
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["n"] + [f"a_{x}" for x in range(i - 1, 0, -1)] + ["coefficient_sum"])
        for n in sorted(results):
            writer.writerow([n] + coefficient_row(results[n], i) + [sum_coefficients(results[n])])


# ---------- Main ----------

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Randomized greedy search for a_1*1^n + ... + a_{i-1}*(i-1)^n == i^n.")
    ap.add_argument("i", type=parse_int_at_least(2), help="Base; coefficients cover bases 1..i-1.")
    ap.add_argument("n", type=parse_int_at_least(2), help="Largest exponent; solves every n in 2..N.")
    ap.add_argument("tries", type=parse_int_at_least(0),
                    help="Random greedy passes per exponent on top of the cached or first pass.")
    ap.add_argument("--seed", type=int, default=None, help="Seed the shuffles for a reproducible run.")
    ap.add_argument("--no-write-back", dest="write_back", action="store_false", default=True,
                    help="Do not store improved results in the per-run cache.")
    width = ap.add_mutually_exclusive_group()
    width.add_argument("--width", type=parse_int_at_least(1), default=WIDTH_BITS,
                       help=f"Unsigned integer width in bits; overflow aborts (default: {WIDTH_BITS}).")
    width.add_argument("--arbitrary-precision", dest="width", action="store_const", const=None,
                       help="Lift the width limit.")
    ap.add_argument("--outfile", type=str, default=None, help="Also write the solutions to this CSV.")
    ap.add_argument("-v", "--verbose", action="store_true", default=False,
                    help="Log every improving trial.")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    rng = random.Random(args.seed)
    try:
        results = solve_range(args.i, args.n, args.tries, cache=BestResults(), rng=rng,
                              write_back=args.write_back, width=args.width)
    except (WideOverflowError, DecompositionError) as e:
        ap.exit(1, f"{ap.prog}: error: {e}\n")

    for line in render_report(results, args.i):
        print(line)
    if args.outfile:
        save_csv(results, args.i, args.outfile)
        print(f"Results saved to: {args.outfile}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
