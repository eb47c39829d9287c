"""CPU scheduling: FCFS, SJF, SRTF, preemptive priority and round robin."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence

# Remaining times at or above this are never picked by SRTF.
SRTF_TIME_LIMIT = 999
# Priority values at or above this are never picked by priority scheduling.
PRIORITY_LIMIT = 999999


@dataclass(frozen=True)
class Job:
    """A process to schedule; a lower ``priority`` value means more urgent."""

    pid: int
    arrival: int
    burst: int
    priority: int = 0

    def __post_init__(self) -> None:
        if self.burst < 0:
            raise ValueError(f"P{self.pid}: burst time cannot be negative")


@dataclass(frozen=True)
class JobResult:
    """A job together with the time it finished."""

    job: Job
    completion: int

    @property
    def pid(self) -> int:
        return self.job.pid

    @property
    def arrival(self) -> int:
        return self.job.arrival

    @property
    def burst(self) -> int:
        return self.job.burst

    @property
    def turnaround(self) -> int:
        return self.completion - self.job.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.job.burst


@dataclass(frozen=True)
class Schedule:
    """Per-job results in the order the algorithm reports them."""

    results: tuple[JobResult, ...]

    def __iter__(self):
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def _mean(self, values: Iterable[int]) -> float:
        if not self.results:
            raise ValueError("an empty schedule has no averages")
        return sum(values) / len(self.results)

    def average_waiting(self) -> float:
        """Mean waiting time over all jobs."""
        return self._mean(r.waiting for r in self.results)

    def average_turnaround(self) -> float:
        """Mean turnaround time over all jobs."""
        return self._mean(r.turnaround for r in self.results)


def _require_positive_bursts(jobs: Sequence[Job]) -> None:
    for job in jobs:
        if job.burst <= 0:
            raise ValueError(f"P{job.pid}: burst time must be positive")


def fcfs(jobs: Iterable[Job]) -> Schedule:
    """Run jobs to completion in the order given, idling until each arrives."""
    results = []
    now = 0
    for job in jobs:
        now = max(now, job.arrival) + job.burst
        results.append(JobResult(job, now))
    return Schedule(tuple(results))


def sjf(jobs: Iterable[Job]) -> Schedule:
    """Order jobs by burst time (stable), then run each to completion."""
    results: list[JobResult] = []
    for job in sorted(jobs, key=lambda j: j.burst):
        start = job.arrival
        if results and job.arrival <= results[-1].completion:
            start = results[-1].completion
        results.append(JobResult(job, start + job.burst))
    return Schedule(tuple(results))


def srtf(jobs: Iterable[Job]) -> Schedule:
    """Shortest remaining time first, one time unit at a time.

    Ties go to the job listed first; results come in completion order.
    """
    pending = list(jobs)
    _require_positive_bursts(pending)
    for job in pending:
        if job.burst >= SRTF_TIME_LIMIT:
            raise ValueError(f"P{job.pid}: burst time must be below {SRTF_TIME_LIMIT}")
    remaining = {i: job.burst for i, job in enumerate(pending)}
    results = []
    now = 0
    while remaining:
        ready = [i for i in remaining if pending[i].arrival <= now]
        now += 1
        if not ready:
            continue
        chosen = min(ready, key=lambda i: (remaining[i], i))
        remaining[chosen] -= 1
        if remaining[chosen] == 0:
            del remaining[chosen]
            results.append(JobResult(pending[chosen], now))
    return Schedule(tuple(results))


def priority_preemptive(jobs: Iterable[Job]) -> Schedule:
    """Preemptive priority scheduling, one time unit at a time.

    The arrived job with the lowest priority value runs; ties go to the job
    listed first. Results keep the input order.
    """
    pending = list(jobs)
    _require_positive_bursts(pending)
    for job in pending:
        if job.priority >= PRIORITY_LIMIT:
            raise ValueError(f"P{job.pid}: priority must be below {PRIORITY_LIMIT}")
    remaining = {i: job.burst for i, job in enumerate(pending)}
    completion: dict[int, int] = {}
    now = 0
    while remaining:
        ready = [i for i in remaining if pending[i].arrival <= now]
        now += 1
        if not ready:
            continue
        chosen = min(ready, key=lambda i: (pending[i].priority, i))
        remaining[chosen] -= 1
        if remaining[chosen] == 0:
            del remaining[chosen]
            completion[chosen] = now
    return Schedule(tuple(JobResult(job, completion[i]) for i, job in enumerate(pending)))


def round_robin(jobs: Iterable[Job], quantum: int) -> Schedule:
    """Round robin with the given time quantum; results come in completion order.

    Jobs are admitted in arrival order; newly arrived jobs join the queue
    ahead of the job whose slice just ended.
    """
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    ordered = sorted(jobs, key=lambda j: j.arrival)
    _require_positive_bursts(ordered)
    remaining = [job.burst for job in ordered]
    admitted = [False] * len(ordered)
    queue: deque[int] = deque()
    results = []
    now = 0

    def admit() -> None:
        for i, job in enumerate(ordered):
            if not admitted[i] and job.arrival <= now and remaining[i] > 0:
                queue.append(i)
                admitted[i] = True

    admit()
    while len(results) < len(ordered):
        if not queue:
            now += 1
            admit()
            continue
        current = queue.popleft()
        if remaining[current] <= quantum:
            now += remaining[current]
            remaining[current] = 0
            results.append(JobResult(ordered[current], now))
        else:
            now += quantum
            remaining[current] -= quantum
        admit()
        if remaining[current] > 0:
            queue.append(current)
    return Schedule(tuple(results))


_RULE = "-" * 80


def format_table(schedule: Schedule) -> str:
    """Format a schedule as a table followed by the average times."""
    lines = [
        "",
        "Process Scheduling Table:",
        _RULE,
        "PID\tArrival Time\tBurst Time\tCompletion Time\tWaiting Time\tTurnaround Time",
        _RULE,
    ]
    lines.extend(
        f"P{r.pid}\t{r.arrival}\t\t{r.burst}\t\t{r.completion}\t\t{r.waiting}\t\t{r.turnaround}"
        for r in schedule
    )
    lines.append(_RULE)
    lines.append(f"Average Waiting Time: {schedule.average_waiting():.2f}")
    lines.append(f"Average Turnaround Time: {schedule.average_turnaround():.2f}")
    return "\n".join(lines) + "\n"