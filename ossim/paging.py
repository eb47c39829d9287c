"""Page replacement: FIFO, LRU and two flavours of LFU."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(frozen=True)
class PageStep:
    """One page reference and the frame contents after serving it.

    ``frame`` is the index the page was loaded into on a fault, None on a hit.
    Empty frames hold None.
    """

    page: int
    hit: bool
    frame: Optional[int]
    frames: tuple[Optional[int], ...]


@dataclass(frozen=True)
class PagingTrace:
    """The step-by-step result of running a replacement algorithm."""

    algorithm: str
    frame_count: int
    steps: tuple[PageStep, ...]

    def __iter__(self) -> Iterator[PageStep]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    @property
    def faults(self) -> int:
        return sum(1 for step in self.steps if not step.hit)

    @property
    def hits(self) -> int:
        return sum(1 for step in self.steps if step.hit)

    @property
    def final_frames(self) -> tuple[Optional[int], ...]:
        if not self.steps:
            return (None,) * self.frame_count
        return self.steps[-1].frames


def _prepare(pages: Iterable[int], frame_count: int) -> list[int]:
    if frame_count < 1:
        raise ValueError("there must be at least one frame")
    references = [int(page) for page in pages]
    for page in references:
        if page < 0:
            raise ValueError(f"page numbers cannot be negative: {page}")
    return references


def fifo(pages: Iterable[int], frame_count: int) -> PagingTrace:
    """Replace the page that was loaded earliest."""
    references = _prepare(pages, frame_count)
    frames: list[Optional[int]] = [None] * frame_count
    next_slot = 0
    steps = []
    for page in references:
        if page in frames:
            steps.append(PageStep(page, True, None, tuple(frames)))
            continue
        slot = next_slot
        frames[slot] = page
        next_slot = (next_slot + 1) % frame_count
        steps.append(PageStep(page, False, slot, tuple(frames)))
    return PagingTrace("FIFO", frame_count, tuple(steps))


def lru(pages: Iterable[int], frame_count: int) -> PagingTrace:
    """Fill frames in order, then replace the least recently used page."""
    references = _prepare(pages, frame_count)
    frames: list[Optional[int]] = [None] * frame_count
    last_used = [0] * frame_count
    filled = 0
    clock = 1
    steps = []
    for page in references:
        if page in frames:
            last_used[frames.index(page)] = clock
            clock += 1
            steps.append(PageStep(page, True, None, tuple(frames)))
            continue
        if filled < frame_count:
            slot = filled
            filled += 1
        else:
            slot = min(range(frame_count), key=last_used.__getitem__)
        frames[slot] = page
        last_used[slot] = clock
        clock += 1
        steps.append(PageStep(page, False, slot, tuple(frames)))
    return PagingTrace("LRU", frame_count, tuple(steps))


def lfu(pages: Iterable[int], frame_count: int) -> PagingTrace:
    """Replace the resident page referenced least often over the whole history.

    Reference counts survive eviction; empty frames are filled first and
    ties go to the lowest frame index.
    """
    references = _prepare(pages, frame_count)
    frames: list[Optional[int]] = [None] * frame_count
    frequency: Counter[int] = Counter()
    steps = []
    for page in references:
        frequency[page] += 1
        if page in frames:
            steps.append(PageStep(page, True, None, tuple(frames)))
            continue
        if None in frames:
            slot = frames.index(None)
        else:
            slot = min(range(frame_count), key=lambda j: frequency[frames[j]])
        frames[slot] = page
        steps.append(PageStep(page, False, slot, tuple(frames)))
    return PagingTrace("LFU", frame_count, tuple(steps))


def lfu_resident(pages: Iterable[int], frame_count: int) -> PagingTrace:
    """Replace the frame whose page was used least since it was loaded.

    A frame's count restarts at one whenever a new page is loaded into it;
    ties go to the lowest frame index.
    """
    references = _prepare(pages, frame_count)
    frames: list[Optional[int]] = [None] * frame_count
    counts = [0] * frame_count
    steps = []
    for page in references:
        if page in frames:
            counts[frames.index(page)] += 1
            steps.append(PageStep(page, True, None, tuple(frames)))
            continue
        slot = min(range(frame_count), key=counts.__getitem__)
        frames[slot] = page
        counts[slot] = 1
        steps.append(PageStep(page, False, slot, tuple(frames)))
    return PagingTrace("LFU", frame_count, tuple(steps))


def format_trace(trace: PagingTrace) -> str:
    """Format the frame contents after each reference and the fault total."""
    lines = [
        "Frame: " + "".join(f"{-1 if value is None else value} " for value in step.frames)
        for step in trace.steps
    ]
    lines.append(f"Total Page Faults ({trace.algorithm}): {trace.faults}")
    return "\n".join(lines) + "\n"