# sortbench

sortbench times classic sorting algorithms and records the process's memory
use before and after each run.

## Algorithms

All of them live in `sortbench.sorting`. Each one sorts a mutable sequence in
place and returns `None`.

- `insertion_sort(items, left=0, right=None)`
- `merge_sort(items, left=0, right=None)`, built on `merge(items, left, mid, right)`.
  `merge` keeps ties stable, so the left run's element comes first.
- `quick_sort(items, left=0, right=None)` takes the last element of each range
  as the pivot and uses the Lomuto `partition(items, left, right)`. `partition`
  returns the pivot's final index.
- `heap_sort(items)` sorts the whole sequence. It is built on
  `heapify(items, size, root)`, which sifts `items[root]` down inside the
  max-heap made of the first `size` items.
- `composite_sort(items, threshold=32)` is a merge sort that hands ranges of at
  most `threshold` elements to insertion sort. It skips the merge step when the
  two halves are already in order.

`left` and `right` are inclusive bounds. When `right` is left out, the range
runs to the end of the sequence. If a non-empty range falls outside the
sequence, you get `IndexError`. `merge`, `partition` and `heapify` raise the
same error for bounds that are invalid.

```python
from sortbench.sorting import merge_sort, composite_sort, quick_sort

data = [5, 3, 9, 1]
merge_sort(data, 0, len(data) - 1)
assert data == [1, 3, 5, 9]

data = [4, 2, 8, 6]
composite_sort(data, 32)
assert data == [2, 4, 6, 8]

data = [7, 1, 4]
quick_sort(data)
assert data == [1, 4, 7]
```

## Input generators

These are in `sortbench.generators`. Each one returns a new list.

- `insertion_sort_worst_case(n)` returns `n-1, n-2, ..., 0`.
- `merge_sort_worst_case(n)` returns an arrangement of `1..n` that forces the
  most comparisons in merge sort.
- `random_permutation(n, rng=None)` returns `0..n-1` shuffled with the given
  `random.Random`. Without one, it uses a freshly seeded generator.

`n` must be between 0 and 65535. Any other value raises `ValueError`.

## Memory reporting

`sortbench.memory` reads the current process's counters through psutil. It
returns them as a frozen `MemInfo` dataclass whose fields are in bytes:

- `working_set_size` is the resident set size.
- `peak_working_set_size` is the peak working set where the platform reports
  one. Otherwise it is the process's maximum resident size, and it is never
  below the current value.
- `pagefile_usage` is the pagefile usage where the platform reports it.
  Otherwise it is the virtual memory size.

The functions:

- `current_mem_info()` takes a reading. It raises `psutil.Error` if the process
  cannot be measured.
- `format_mem_usage(info, stage=None)` renders a reading as a framed report
  block in KB. The block is labelled with `stage` when you give one.
- `show_mem_usage(stage=None, out=None)` takes a reading, writes the report
  block to `out` (standard output by default) and returns the reading. If the
  measurement fails, it writes an error to standard error and returns an
  all-zero `MemInfo`.
- `MemInfo.increase_over(other)` returns the growth of each counter since
  `other`. A counter that has shrunk shows as zero.

## Command line

`sortbench` runs the full benchmark:

```
sortbench [--sizes N [N ...]] [--repeat R]
```

It runs five tests at each size:

- insertion sort on descending input, reported as the average time
- merge sort on its worst-case input, reported as the average time
- quick sort on random permutations, reported as the longest time
- heap sort on random permutations, reported as the longest time
- composite sort on random permutations, reported as the longest time

Each test also reports the working-set growth across its runs. The defaults
are sizes 500, 1000, 2000, 3000, 4000 and 5000, with 2000 repetitions.

`sortbench-memprofile` profiles merge sort on its worst-case input:

```
sortbench-memprofile [--sizes N [N ...]] [--repeat R]
```

For each size it reports memory at three points: before the repeat loop,
after the first input copy and after the loop. It then gives a summary of the
average time and of the working-set and peak working-set growth. The defaults
are sizes 500 to 50000 (500, 1000, 2000, 3000, 4000, 5000, 10000, 20000,
50000), with 50 repetitions. Because the generators accept at most 65535
items, a larger size raises `ValueError`.

Both commands write their report to standard output. Times are in whole
milliseconds.

You can also call the individual benchmarks from Python. Each one takes `n`,
the number of repetitions and an optional output stream (standard output by
default). Each returns the reported time in milliseconds, or `None` when
`n` is 0.

The benchmarks in `sortbench.benchmark` are `insertion_sort_test`,
`merge_sort_test`, `quick_sort_test`, `heap_sort_test` and
`composite_sort_test`. The profile in `sortbench.memprofile` is
`merge_sort_memory_test`. `insertion_sort_test`, `merge_sort_test` and
`merge_sort_memory_test` raise `ValueError` when the repetition count is below
1.

```python
import sys
from sortbench.benchmark import merge_sort_test
from sortbench.memprofile import merge_sort_memory_test

merge_sort_test(1000, 10, sys.stdout)
merge_sort_memory_test(1000, 5, sys.stdout)
```

## Tests

```
pip install -e .[test]
pytest
```