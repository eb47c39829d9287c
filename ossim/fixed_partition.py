"""Fixed-partition memory allocation: first, best and worst fit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence


@dataclass(frozen=True)
class PartitionResult:
    """Outcome of placing processes into fixed memory blocks.

    ``allocations`` holds, per process, the zero-based index of the block it
    was placed in, or None when no block could hold it.
    """

    process_sizes: tuple[int, ...]
    allocations: tuple[Optional[int], ...]
    remaining: tuple[int, ...]

    @property
    def unallocated(self) -> tuple[int, ...]:
        """Zero-based indices of processes that found no block."""
        return tuple(i for i, block in enumerate(self.allocations) if block is None)


_Chooser = Callable[[list[int], list[int]], int]


def _allocate(blocks: Iterable[int], processes: Iterable[int], choose: _Chooser) -> PartitionResult:
    remaining = [int(size) for size in blocks]
    sizes = tuple(int(size) for size in processes)
    allocations: list[Optional[int]] = []
    for size in sizes:
        candidates = [j for j, free in enumerate(remaining) if free >= size]
        if not candidates:
            allocations.append(None)
            continue
        chosen = choose(candidates, remaining)
        remaining[chosen] -= size
        allocations.append(chosen)
    return PartitionResult(sizes, tuple(allocations), tuple(remaining))


def first_fit(blocks: Sequence[int], processes: Sequence[int]) -> PartitionResult:
    """Place each process in the first block large enough for it."""
    return _allocate(blocks, processes, lambda candidates, remaining: candidates[0])


def best_fit(blocks: Sequence[int], processes: Sequence[int]) -> PartitionResult:
    """Place each process in the smallest block large enough; ties go to the earliest."""
    return _allocate(
        blocks, processes, lambda candidates, remaining: min(candidates, key=remaining.__getitem__)
    )


def worst_fit(blocks: Sequence[int], processes: Sequence[int]) -> PartitionResult:
    """Place each process in the largest block; ties go to the earliest."""
    return _allocate(
        blocks, processes, lambda candidates, remaining: max(candidates, key=remaining.__getitem__)
    )


def format_result(result: PartitionResult) -> str:
    """Format the allocation table and the remaining free block sizes."""
    lines = ["", "Process No.\tProcess Size\tBlock no."]
    for number, (size, block) in enumerate(zip(result.process_sizes, result.allocations), start=1):
        placed = "Not Allocated" if block is None else str(block + 1)
        lines.append(f" {number}\t\t{size}\t\t{placed}")
    lines.append("")
    lines.append("Free Blocks")
    lines.append(" -> ".join(str(free) for free in result.remaining))
    return "\n".join(lines) + "\n"