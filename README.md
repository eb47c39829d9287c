# ossim

Small, readable simulations of the algorithms found in an operating-systems
course. Each one takes plain Python values and returns a result you can
inspect or print.

## What is inside

- `ossim.scheduling` — CPU scheduling over `Job(pid, arrival, burst,
  priority=0)` records: `fcfs`, `sjf`, `srtf`, `priority_preemptive` and
  `round_robin(jobs, quantum)`. Each returns a `Schedule` of `JobResult`
  entries (completion, turnaround and waiting times) with
  `average_waiting()` and `average_turnaround()`; `format_table` renders
  it. A lower priority value means a more urgent job.
- `ossim.paging` — page replacement: `fifo`, `lru`, `lfu` and
  `lfu_resident`, each called as `(pages, frame_count)` and returning a
  `PagingTrace` of per-reference steps with `faults`, `hits` and
  `final_frames`. `lfu` counts references over the whole history;
  `lfu_resident` counts only uses since a page was loaded into its frame.
  `format_trace` prints the frame contents after every reference and the
  fault total.
- `ossim.fixed_partition` — `first_fit`, `best_fit` and `worst_fit` over
  fixed memory blocks, giving a `PartitionResult` (zero-based block index
  per process, or `None`, and the remaining block sizes); `format_result`
  shows which block each process landed in and what space is left.
- `ossim.linked_alloc` — a `MemoryList` of `Block`s that splits a block as
  it hands it out, using a `Strategy` (`FIRST_FIT`, `BEST_FIT`,
  `WORST_FIT`). `allocate` returns a block number or `None`;
  `allocate_all` returns `Allocation` records; `free_blocks` lists what is
  left. `format_allocations` and `format_free_blocks` print them.
- `ossim.banker` — `BankerSystem(maximum, allocation, available)` for
  deadlock avoidance, with `is_safe()`, `safe_sequence()` and `render()`
  for the allocation, max, need and available tables.
- `ossim.buffer` — a thread-safe `BoundedBuffer` with `put` and `get`, and
  `produce_consume(items, capacity, delay, emit)`, which passes items from
  a producer thread to a consumer thread and returns what was consumed.
- `ossim.processes` — `list_directory(path)` runs `ls -l` in a child
  process and returns its output; `child_greeting()` starts a child
  process and collects its greeting and PID; `shared_memory_roundtrip(text)`
  writes text into a new shared memory segment, reads it back and removes
  the segment.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using it from Python

```python
from ossim.fixed_partition import first_fit, format_result
from ossim.paging import fifo, format_trace
from ossim.scheduling import Job, format_table, round_robin

print(format_result(first_fit([100, 500, 200, 300, 600], [212, 417, 112, 426])))
print(format_trace(fifo([7, 0, 1, 2, 0, 3, 0, 4], 3)))

jobs = [Job(1, 0, 5), Job(2, 1, 3), Job(3, 2, 1)]
print(format_table(round_robin(jobs, quantum=2)))
```

The fixed-partition functions leave the lists you pass in untouched; the
remaining block sizes are part of the result.

## Command line

Installing the package provides an `ossim` command with two interactive
simulators. Both read whitespace-separated integers from standard input,
printing a prompt before each value.

```
ossim paging
```

asks for the number of frames, the number of pages and the reference
string, then offers a menu: 1 FIFO, 2 LRU, 3 LFU, 4 Exit.

```
ossim memory
```

asks for the block sizes, the process sizes and a strategy (1 First Fit,
2 Best Fit, 3 Worst Fit), then prints where each process was placed and
the free blocks left.

On malformed or missing input the command prints an error and exits with
status 1.

## What it does not do

The command covers only page replacement and splittable memory allocation.
CPU scheduling, fixed partitions, the banker's algorithm, the
producer/consumer buffer and the process demonstrations are available from
Python only, and `lfu_resident` is not offered in the paging menu.
`list_directory` needs an `ls` program on the system.