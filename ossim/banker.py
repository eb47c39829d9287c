"""Banker's algorithm for deadlock avoidance."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence


def _as_matrix(rows: Sequence[Sequence[int]]) -> tuple[tuple[int, ...], ...]:
    return tuple(tuple(int(value) for value in row) for row in rows)


@dataclass(frozen=True)
class BankerSystem:
    """A snapshot of resource claims, holdings and free resources.

    ``maximum`` and ``allocation`` hold one row per process and one column
    per resource type; ``available`` holds one entry per resource type.
    """

    maximum: Sequence[Sequence[int]]
    allocation: Sequence[Sequence[int]]
    available: Sequence[int]
    need: tuple[tuple[int, ...], ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        maximum = _as_matrix(self.maximum)
        allocation = _as_matrix(self.allocation)
        available = tuple(int(value) for value in self.available)
        resources = len(available)

        if len(maximum) != len(allocation):
            raise ValueError(
                f"maximum has {len(maximum)} processes but allocation has {len(allocation)}"
            )
        for process, (max_row, alloc_row) in enumerate(zip(maximum, allocation)):
            if len(max_row) != resources or len(alloc_row) != resources:
                raise ValueError(
                    f"process P{process} must list exactly {resources} resources"
                )

        need = tuple(
            tuple(m - a for m, a in zip(max_row, alloc_row))
            for max_row, alloc_row in zip(maximum, allocation)
        )
        object.__setattr__(self, "maximum", maximum)
        object.__setattr__(self, "allocation", allocation)
        object.__setattr__(self, "available", available)
        object.__setattr__(self, "need", need)

    @property
    def process_count(self) -> int:
        return len(self.maximum)

    @property
    def resource_count(self) -> int:
        return len(self.available)

    def safe_sequence(self) -> tuple[int, ...] | None:
        """Return an order in which every process can finish, or None if unsafe."""
        work = list(self.available)
        finished = [False] * self.process_count
        sequence: list[int] = []

        while len(sequence) < self.process_count:
            progressed = False
            for process, (need_row, alloc_row) in enumerate(zip(self.need, self.allocation)):
                if finished[process]:
                    continue
                if all(free >= wanted for free, wanted in zip(work, need_row)):
                    work = [free + held for free, held in zip(work, alloc_row)]
                    finished[process] = True
                    sequence.append(process)
                    progressed = True
            if not progressed:
                return None
        return tuple(sequence)

    def is_safe(self) -> bool:
        """Whether the system is in a safe state."""
        return self.safe_sequence() is not None

    def render(self) -> str:
        """Format the allocation, maximum and need matrices and the free resources."""
        header = "Process\\Resource " + "".join(f"R{j} " for j in range(self.resource_count))

        def section(title: str, rows: tuple[tuple[int, ...], ...]) -> str:
            lines = [f"\n{title}:", header]
            lines.extend(
                f"P{process}\t\t" + "".join(f"{value}  " for value in row)
                for process, row in enumerate(rows)
            )
            return "\n".join(lines) + "\n"

        available = "".join(f"R{j}: {value}  " for j, value in enumerate(self.available))
        return (
            section("ALLOCATION MATRIX", self.allocation)
            + section("MAX MATRIX", self.maximum)
            + section("NEED MATRIX", self.need)
            + f"\nAVAILABLE RESOURCES:\n{available}\n"
        )