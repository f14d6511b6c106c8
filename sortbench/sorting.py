"""In-place comparison sorts over inclusive index ranges of mutable sequences."""

from __future__ import annotations

import heapq
from collections.abc import MutableSequence
from typing import Any, Optional

DEFAULT_INSERTION_THRESHOLD = 32


def _resolve_bounds(
    items: MutableSequence[Any], left: int, right: Optional[int]
) -> tuple[int, int]:
    """Fill in a missing right bound and reject ranges outside the sequence."""
    if right is None:
        right = len(items) - 1
    if left < right and (left < 0 or right >= len(items)):
        raise IndexError(
            f"range [{left}, {right}] is outside a sequence of length {len(items)}"
        )
    return left, right


def insertion_sort(
    items: MutableSequence[Any], left: int = 0, right: Optional[int] = None
) -> None:
    """Sort ``items[left:right + 1]`` in place by insertion."""
    left, right = _resolve_bounds(items, left, right)
    for i in range(left + 1, right + 1):
        key = items[i]
        j = i - 1
        while j >= left and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def merge(items: MutableSequence[Any], left: int, mid: int, right: int) -> None:
    """Merge the sorted runs ``[left, mid]`` and ``[mid + 1, right]`` in place.

    On ties the element from the left run comes first.
    """
    if left < 0 or right >= len(items) or not left <= mid <= right:
        raise IndexError(
            f"invalid merge bounds ({left}, {mid}, {right}) "
            f"for a sequence of length {len(items)}"
        )
    left_run = list(items[left : mid + 1])
    right_run = list(items[mid + 1 : right + 1])
    items[left : right + 1] = list(heapq.merge(left_run, right_run))


def merge_sort(
    items: MutableSequence[Any], left: int = 0, right: Optional[int] = None
) -> None:
    """Sort ``items[left:right + 1]`` in place with top-down merge sort."""
    left, right = _resolve_bounds(items, left, right)
    if left < right:
        mid = left + (right - left) // 2
        merge_sort(items, left, mid)
        merge_sort(items, mid + 1, right)
        merge(items, left, mid, right)


def partition(items: MutableSequence[Any], left: int, right: int) -> int:
    """Partition around ``items[right]`` (Lomuto scheme); return the pivot's index."""
    if left < 0 or right >= len(items) or left > right:
        raise IndexError(
            f"invalid partition bounds ({left}, {right}) "
            f"for a sequence of length {len(items)}"
        )
    pivot = items[right]
    store = left
    for j in range(left, right):
        if items[j] < pivot:
            items[store], items[j] = items[j], items[store]
            store += 1
    items[store], items[right] = items[right], items[store]
    return store


def quick_sort(
    items: MutableSequence[Any], left: int = 0, right: Optional[int] = None
) -> None:
    """Sort ``items[left:right + 1]`` in place with quicksort, last element as pivot."""
    left, right = _resolve_bounds(items, left, right)
    pending = [(left, right)]
    while pending:
        lo, hi = pending.pop()
        while lo < hi:
            pivot_index = partition(items, lo, hi)
            # Defer the larger side so the pending stack stays logarithmic.
            if pivot_index - lo < hi - pivot_index:
                pending.append((pivot_index + 1, hi))
                hi = pivot_index - 1
            else:
                pending.append((lo, pivot_index - 1))
                lo = pivot_index + 1


def heapify(items: MutableSequence[Any], size: int, root: int) -> None:
    """Sift ``items[root]`` down within the max-heap made of the first ``size`` items."""
    if size > len(items):
        raise IndexError(f"heap size {size} exceeds sequence length {len(items)}")
    while True:
        largest = root
        left_child = 2 * root + 1
        right_child = 2 * root + 2
        if left_child < size and items[left_child] > items[largest]:
            largest = left_child
        if right_child < size and items[right_child] > items[largest]:
            largest = right_child
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(items: MutableSequence[Any]) -> None:
    """Sort the whole sequence in place with heapsort."""
    size = len(items)
    for root in reversed(range(size // 2)):
        heapify(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)


def _hybrid_merge_sort(
    items: MutableSequence[Any], left: int, right: int, threshold: int
) -> None:
    if left >= right:
        return
    if right - left + 1 <= threshold:
        insertion_sort(items, left, right)
        return
    mid = left + (right - left) // 2
    _hybrid_merge_sort(items, left, mid, threshold)
    _hybrid_merge_sort(items, mid + 1, right, threshold)
    if items[mid] <= items[mid + 1]:
        return
    merge(items, left, mid, right)


def composite_sort(
    items: MutableSequence[Any], threshold: int = DEFAULT_INSERTION_THRESHOLD
) -> None:
    """Sort in place with merge sort that switches to insertion sort on short runs."""
    if not items:
        return
    _hybrid_merge_sort(items, 0, len(items) - 1, threshold)