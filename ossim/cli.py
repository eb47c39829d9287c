"""Command-line front end for the paging and memory allocation simulators."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Optional, Sequence, TextIO

from ossim.linked_alloc import Allocation, MemoryList, Strategy
from ossim.paging import fifo, format_trace, lfu, lru


class _InputError(Exception):
    """Raised when the input runs out or holds something other than an integer."""


class _Reader:
    """Reads whitespace-separated integers, printing a prompt before each."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens = self._split(stream)

    @staticmethod
    def _split(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def integer(self, prompt: str = "") -> int:
        if prompt:
            print(prompt, end="", flush=True)
        try:
            token = next(self._tokens)
        except StopIteration:
            raise _InputError("unexpected end of input") from None
        try:
            return int(token)
        except ValueError:
            raise _InputError(f"expected an integer, got {token!r}") from None

    def count(self, prompt: str) -> int:
        value = self.integer(prompt)
        if value < 0:
            raise _InputError(f"a count cannot be negative: {value}")
        return value


_PAGING_MENU = "\nMenu:\n1. FIFO\n2. LRU\n3. LFU\n4. Exit\nEnter your choice: "
_PAGING_ALGORITHMS = {1: fifo, 2: lru, 3: lfu}


def _run_paging(reader: _Reader) -> None:
    frame_count = reader.integer("Enter number of frames: ")
    page_count = reader.count("Enter number of pages: ")
    print("Enter page reference string (space-separated):")
    pages = [reader.integer() for _ in range(page_count)]

    while True:
        choice = reader.integer(_PAGING_MENU)
        if choice == 4:
            print("Exiting...")
            return
        algorithm = _PAGING_ALGORITHMS.get(choice)
        if algorithm is None:
            print("Invalid choice! Try again.")
            continue
        print(format_trace(algorithm(pages, frame_count)), end="")


def _run_memory(reader: _Reader) -> None:
    block_count = reader.count("Enter number of memory blocks: ")
    block_sizes = [
        reader.integer(f"Enter size of block {number}: ")
        for number in range(1, block_count + 1)
    ]
    memory = MemoryList(block_sizes)

    process_count = reader.count("\nEnter number of processes: ")
    process_sizes = [
        reader.integer(f"Enter size of Process {number}: ")
        for number in range(1, process_count + 1)
    ]

    choice = reader.integer(
        "\nChoose Allocation Strategy:\n1. First Fit\n2. Best Fit\n3. Worst Fit\nEnter option: "
    )
    print()

    if choice in set(Strategy):
        allocations = memory.allocate_all(process_sizes, Strategy(choice))
    else:
        # An unknown strategy finds no block for anyone.
        allocations = [
            Allocation(number, size, None) for number, size in enumerate(process_sizes, start=1)
        ]

    for allocation in allocations:
        placed = (
            f"Allocated in Block {allocation.block_number}"
            if allocation.allocated
            else "Not Allocated"
        )
        print(f"Process {allocation.process_number} -> Size: {allocation.size} -> {placed}")

    print("\nFree Blocks:")
    for block in memory.free_blocks():
        print(f"Block {block.number} -> Size: {block.size}")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ossim", description="Interactive operating-system algorithm simulators."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("paging", help="compare page replacement algorithms")
    commands.add_parser("memory", help="allocate processes into splittable memory blocks")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen simulator on integers read from standard input."""
    args = _parser().parse_args(argv)
    reader = _Reader(sys.stdin)
    runner = _run_paging if args.command == "paging" else _run_memory
    try:
        runner(reader)
    except (_InputError, ValueError) as error:
        print(file=sys.stdout)
        print(f"ossim: error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())