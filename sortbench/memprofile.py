"""Memory profile of merge sort on its worst-case input."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from typing import Optional, TextIO

from sortbench.generators import merge_sort_worst_case
from sortbench.memory import MemInfo, show_mem_usage
from sortbench.sorting import merge_sort

RULE = "=" * 58
DEFAULT_SIZES = (500, 1000, 2000, 3000, 4000, 5000, 10000, 20000, 50000)
DEFAULT_REPEAT = 50


def merge_sort_memory_test(
    n: int, repeat: int, out: Optional[TextIO] = None
) -> Optional[int]:
    """Profile merge sort on ``n`` items; return the average time in ms, None if n is 0."""
    if repeat < 1:
        raise ValueError(f"repeat must be at least 1, got {repeat}")
    out = out if out is not None else sys.stdout
    data = merge_sort_worst_case(n)
    if n == 0:
        print("Skipping merge sort test for n=0", file=out)
        return None
    print(f"==============Merge Sort n={n:<4d} (worst case) Test=========", file=out)

    before_loop = show_mem_usage("Before Repeat Loop", out)
    after_first_copy = MemInfo()
    total_ms = 0
    for iteration in range(repeat):
        working = list(data)
        if iteration == 0:
            after_first_copy = show_mem_usage(
                "Inside Loop: After Input Copy (1st iter)", out
            )
        start = time.perf_counter_ns()
        merge_sort(working, 0, len(working) - 1)
        total_ms += (time.perf_counter_ns() - start) // 1_000_000
    after_loop = show_mem_usage("After Repeat Loop Completed", out)

    average = total_ms // repeat
    loop_growth = after_loop.increase_over(before_loop)
    copy_growth = after_first_copy.increase_over(before_loop)
    print(
        f"============Summary for n={n:<4d}, repeat={repeat:<4d}============", file=out
    )
    print(f"Time taken (average): {average} ms", file=out)
    print("\nMemory Increase Analysis (relative to 'Before Repeat Loop'):", file=out)
    print(
        "  Working Set Increase (After Loop vs Before Loop): "
        f"{loop_growth.working_set_size // 1024} KB",
        file=out,
    )
    print(
        "  Peak Working Set Increase (After Loop vs Before Loop): "
        f"{loop_growth.peak_working_set_size // 1024} KB",
        file=out,
    )
    print(
        "  (This Peak increase *roughly* indicates max memory surge during sort, "
        "including temporary space)",
        file=out,
    )
    print(
        "  Working Set Increase (After Input Copy, 1st iter vs Before Loop): "
        f"{copy_growth.working_set_size // 1024} KB",
        file=out,
    )
    print(
        "  (This reflects the O(N) space for the input vector 't' in one iteration)",
        file=out,
    )
    print(RULE, file=out)
    return average


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Profile merge sort memory for each input size."""
    parser = argparse.ArgumentParser(description="Profile merge sort memory use.")
    parser.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES))
    parser.add_argument("--repeat", type=int, default=DEFAULT_REPEAT)
    args = parser.parse_args(argv)

    print("--- Initial Program Baseline Measurement ---")
    show_mem_usage("Initial Program Baseline")
    print("------------------------------------------")
    for n in args.sizes:
        merge_sort_memory_test(n, args.repeat)
    print("\n--- Before Program Exit Measurement ---")
    show_mem_usage("Before Program Exit")
    print("-------------------------------------")
    return 0


if __name__ == "__main__":
    sys.exit(main())