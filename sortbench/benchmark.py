"""Timing and memory benchmark of the sorting algorithms."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Sequence
from typing import Optional, TextIO

from sortbench.generators import (
    insertion_sort_worst_case,
    merge_sort_worst_case,
    random_permutation,
)
from sortbench.memory import show_mem_usage
from sortbench.sorting import (
    composite_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
)

RULE = "=" * 58
DEFAULT_SIZES = (500, 1000, 2000, 3000, 4000, 5000)
DEFAULT_REPEAT = 2000

Sorter = Callable[[list], None]


def _elapsed_ms(sort: Sorter, data: list) -> int:
    start = time.perf_counter_ns()
    sort(data)
    return (time.perf_counter_ns() - start) // 1_000_000


def _check_repeat(repeat: int) -> None:
    if repeat < 1:
        raise ValueError(f"repeat must be at least 1, got {repeat}")


def _memory_growth_kb(name: str, out: TextIO, before) -> int:
    print(f"after {name} (worst case) memory info: ", file=out)
    after = show_mem_usage(out=out)
    return after.increase_over(before).working_set_size // 1024


def _average_on_worst_case(
    name: str, heading: str, data: list, repeat: int, sort: Sorter, out: TextIO
) -> Optional[int]:
    if not data:
        print(f"Skipping {name} test for n=0", file=out)
        return None
    print(heading, file=out)
    print(f"before {name} (worst case) memory info: ", file=out)
    before = show_mem_usage(out=out)
    total = sum(_elapsed_ms(sort, list(data)) for _ in range(repeat))
    growth = _memory_growth_kb(name, out, before)
    average = total // repeat
    print(
        f"{name} (worst case) average using: {average}ms, memory usage: {growth}KB",
        file=out,
    )
    print(RULE, file=out)
    return average


def _longest_on_random(
    name: str, heading: str, n: int, repeat: int, sort: Sorter, out: TextIO
) -> Optional[int]:
    if n == 0:
        print(f"Skipping {name} test for n=0", file=out)
        return None
    print(heading, file=out)
    print(f"before {name} (worst case) memory info: ", file=out)
    before = show_mem_usage(out=out)
    longest = max(
        (_elapsed_ms(sort, random_permutation(n)) for _ in range(repeat)), default=0
    )
    growth = _memory_growth_kb(name, out, before)
    print(
        f"{name} (longest random case) using: {longest}ms, memory usage: {growth}KB",
        file=out,
    )
    print(RULE, file=out)
    return longest


def insertion_sort_test(n: int, repeat: int, out: Optional[TextIO] = None) -> Optional[int]:
    """Average insertion-sort time in ms over descending input; None when n is 0."""
    _check_repeat(repeat)
    return _average_on_worst_case(
        "insertion sort",
        f"============Insertion Sort n={n:<4d} (worst case) Test=======",
        insertion_sort_worst_case(n),
        repeat,
        lambda data: insertion_sort(data, 0, len(data) - 1),
        out if out is not None else sys.stdout,
    )


def merge_sort_test(n: int, repeat: int, out: Optional[TextIO] = None) -> Optional[int]:
    """Average merge-sort time in ms over its worst-case input; None when n is 0."""
    _check_repeat(repeat)
    return _average_on_worst_case(
        "merge sort",
        f"==============Merge Sort n={n:<4d} (worst case) Test=========",
        merge_sort_worst_case(n),
        repeat,
        lambda data: merge_sort(data, 0, len(data) - 1),
        out if out is not None else sys.stdout,
    )


def quick_sort_test(n: int, repeat: int, out: Optional[TextIO] = None) -> Optional[int]:
    """Longest quicksort time in ms over random permutations; None when n is 0."""
    return _longest_on_random(
        "quick sort",
        f"==============Quick Sort n={n:<4d} (worst case) Test=========",
        n,
        repeat,
        lambda data: quick_sort(data, 0, len(data) - 1),
        out if out is not None else sys.stdout,
    )


def heap_sort_test(n: int, repeat: int, out: Optional[TextIO] = None) -> Optional[int]:
    """Longest heapsort time in ms over random permutations; None when n is 0."""
    return _longest_on_random(
        "heap sort",
        f"===============Heap Sort n={n:<4d} (worst case) Test=========",
        n,
        repeat,
        heap_sort,
        out if out is not None else sys.stdout,
    )


def composite_sort_test(n: int, repeat: int, out: Optional[TextIO] = None) -> Optional[int]:
    """Longest composite-sort time in ms over random permutations; None when n is 0."""
    return _longest_on_random(
        "composite sort",
        f"===========Composite Sort n={n:<4d} (worst case) Test========",
        n,
        repeat,
        composite_sort,
        out if out is not None else sys.stdout,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run every sort benchmark for each input size."""
    parser = argparse.ArgumentParser(description="Benchmark the sorting algorithms.")
    parser.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES))
    parser.add_argument("--repeat", type=int, default=DEFAULT_REPEAT)
    args = parser.parse_args(argv)
    for n in args.sizes:
        insertion_sort_test(n, args.repeat)
        merge_sort_test(n, args.repeat)
        quick_sort_test(n, args.repeat)
        heap_sort_test(n, args.repeat)
        composite_sort_test(n, args.repeat)
    show_mem_usage()
    return 0


if __name__ == "__main__":
    sys.exit(main())