"""
Study 01: Swap Counts

Run: python -m alternating_disks.studies.01_swap_counts.observe

Sort the alternating row for n = 1..max_n with both algorithms
and compare swaps and passes.
"""

import argparse
import logging
from typing import Dict, List

import numpy as np

from alternating_disks.core.row import Row
from alternating_disks.algorithms.sorting import SortConfig, sort_lawnmower, sort_left_to_right


def run_study(max_n: int = 10, show_history: bool = False) -> List[Dict[str, int]]:
    """
    Sort the canonical row for every n up to max_n.

    Returns one record per n with swap and pass counts for each algorithm.
    """
    print("=" * 60)
    print("Study 01: Swap Counts")
    print("=" * 60)

    config = SortConfig(record_history=show_history)
    records: List[Dict[str, int]] = []

    print(f"\n{'n':>4} {'swaps L2R':>10} {'swaps LM':>10} {'passes L2R':>11} {'passes LM':>10}")
    print("-" * 60)

    for n in range(1, max_n + 1):
        row = Row(n)
        left = sort_left_to_right(row, config)
        lawn = sort_lawnmower(row, config)

        records.append({
            "n": n,
            "left_to_right_swaps": left.swap_count,
            "lawnmower_swaps": lawn.swap_count,
            "left_to_right_passes": left.pass_count,
            "lawnmower_passes": lawn.pass_count,
        })

        print(f"{n:>4} {left.swap_count:>10} {lawn.swap_count:>10} "
              f"{left.pass_count:>11} {lawn.pass_count:>10}")

        if show_history:
            print(f"       start: {row.render()}")
            for i, rendered in enumerate(lawn.history, start=1):
                print(f"       lawnmower pass {i}: {rendered}")

    # Analysis
    print("\n" + "=" * 60)
    print("Observations")
    print("=" * 60)

    left_swaps = np.array([r["left_to_right_swaps"] for r in records])
    lawn_swaps = np.array([r["lawnmower_swaps"] for r in records])
    ns = np.array([r["n"] for r in records])

    print(f"\nSwap counts agree for every n: {bool(np.array_equal(left_swaps, lawn_swaps))}")
    print(f"Swaps match n(n+1)/2: {bool(np.array_equal(left_swaps, ns * (ns + 1) // 2))}")

    left_passes = sum(r["left_to_right_passes"] for r in records)
    lawn_passes = sum(r["lawnmower_passes"] for r in records)
    print(f"Total passes: left-to-right={left_passes}, lawnmower={lawn_passes}")

    return records


def main():
    parser = argparse.ArgumentParser(description="Swap Count Study")
    parser.add_argument("--max-n", type=int, default=10, help="Largest n to sort")
    parser.add_argument("--history", action="store_true", help="Print the row after every lawnmower pass")
    parser.add_argument("--verbose", action="store_true", help="Log every pass")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    run_study(max_n=args.max_n, show_history=args.history)


if __name__ == "__main__":
    main()
