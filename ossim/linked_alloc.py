"""Variable-partition memory allocation over a list of splittable blocks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Optional, Union


class Strategy(IntEnum):
    """How a free block is chosen for a request."""

    FIRST_FIT = 1
    BEST_FIT = 2
    WORST_FIT = 3


@dataclass
class Block:
    """A contiguous region of memory, identified by its block number."""

    number: int
    size: int
    is_free: bool = True


@dataclass(frozen=True)
class Allocation:
    """Where one process ended up; ``block_number`` is None if it found no room."""

    process_number: int
    size: int
    block_number: Optional[int]

    @property
    def allocated(self) -> bool:
        return self.block_number is not None


class MemoryList:
    """An ordered list of memory blocks that are split as they are handed out.

    Blocks are numbered from 1 in the order they are created; the leftover
    of a split block takes the next free number and sits right after it.
    """

    def __init__(self, sizes: Iterable[int] = ()) -> None:
        self._blocks: list[Block] = []
        self._next_number = 1
        for size in sizes:
            self.add_block(size)

    def _new_block(self, size: int) -> Block:
        block = Block(self._next_number, int(size))
        self._next_number += 1
        return block

    def add_block(self, size: int) -> Block:
        """Append a free block of the given size and return it."""
        if size < 0:
            raise ValueError("block size cannot be negative")
        block = self._new_block(size)
        self._blocks.append(block)
        return block

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def _choose(self, size: int, strategy: Strategy) -> Optional[Block]:
        candidates = [b for b in self._blocks if b.is_free and b.size >= size]
        if not candidates:
            return None
        if strategy is Strategy.FIRST_FIT:
            return candidates[0]
        if strategy is Strategy.BEST_FIT:
            return min(candidates, key=lambda b: b.size)
        return max(candidates, key=lambda b: b.size)

    def allocate(self, size: int, strategy: Union[Strategy, int]) -> Optional[int]:
        """Hand out a block for a request; return its number, or None if none fits."""
        strategy = Strategy(strategy)
        if size < 0:
            raise ValueError("request size cannot be negative")
        chosen = self._choose(size, strategy)
        if chosen is None:
            return None
        if chosen.size > size:
            leftover = self._new_block(chosen.size - size)
            self._blocks.insert(self._blocks.index(chosen) + 1, leftover)
            chosen.size = size
        chosen.is_free = False
        return chosen.number

    def allocate_all(
        self, sizes: Iterable[int], strategy: Union[Strategy, int]
    ) -> list[Allocation]:
        """Allocate each request in turn; processes are numbered from 1."""
        strategy = Strategy(strategy)
        return [
            Allocation(number, int(size), self.allocate(size, strategy))
            for number, size in enumerate(sizes, start=1)
        ]

    def free_blocks(self) -> list[Block]:
        """The blocks still free, in list order."""
        return [block for block in self._blocks if block.is_free]


def format_allocations(allocations: Iterable[Allocation]) -> str:
    """Format where each process was placed."""
    lines = ["", "Process Allocation:"]
    for allocation in allocations:
        placed = (
            f"Block {allocation.block_number}" if allocation.allocated else "Not Allocated"
        )
        lines.append(f"Process {allocation.process_number} Size {allocation.size} -> {placed}")
    return "\n".join(lines) + "\n"


def format_free_blocks(memory: MemoryList) -> str:
    """Format the blocks that remain free."""
    lines = ["", "Free Blocks:"]
    lines.extend(f"Block {b.number} Size {b.size}" for b in memory.free_blocks())
    return "\n".join(lines) + "\n"