import pytest

from ossim.fixed_partition import (
    PartitionResult,
    best_fit,
    first_fit,
    format_result,
    worst_fit,
)

BLOCKS = [100, 500, 200, 300, 600]
PROCESSES = [212, 417, 112, 426]


def test_first_fit_example():
    assert first_fit(BLOCKS, PROCESSES).allocations == (1, 4, 1, None)


def test_best_fit_example():
    assert best_fit(BLOCKS, PROCESSES).allocations == (3, 1, 2, 4)


def test_worst_fit_example():
    assert worst_fit(BLOCKS, PROCESSES).allocations == (4, 1, 4, None)


@pytest.mark.parametrize("strategy", [first_fit, best_fit, worst_fit])
def test_memory_is_conserved(strategy):
    result = strategy(BLOCKS, PROCESSES)
    placed = sum(size for size, block in zip(PROCESSES, result.allocations) if block is not None)
    assert sum(result.remaining) + placed == sum(BLOCKS)
    assert all(free >= 0 for free in result.remaining)


@pytest.mark.parametrize("strategy", [first_fit, best_fit, worst_fit])
def test_input_not_mutated(strategy):
    blocks = list(BLOCKS)
    strategy(blocks, PROCESSES)
    assert blocks == BLOCKS


@pytest.mark.parametrize("strategy", [first_fit, best_fit, worst_fit])
def test_each_block_shrinks_by_its_processes(strategy):
    result = strategy(BLOCKS, PROCESSES)
    for index, original in enumerate(BLOCKS):
        used = sum(s for s, b in zip(PROCESSES, result.allocations) if b == index)
        assert result.remaining[index] == original - used


@pytest.mark.parametrize("strategy", [best_fit, worst_fit])
def test_ties_go_to_earliest_block(strategy):
    result = strategy([50, 50], [10])
    assert result.allocations == (0,)


@pytest.mark.parametrize("strategy", [first_fit, best_fit, worst_fit])
def test_no_blocks_means_nothing_allocated(strategy):
    result = strategy([], [5, 6])
    assert result.allocations == (None, None)
    assert result.unallocated == (0, 1)


def test_format_result_shows_one_based_blocks_and_unallocated():
    result = PartitionResult((212, 426), (1, None), (100, 288))
    text = format_result(result)
    assert "Process No.\tProcess Size\tBlock no." in text
    assert " 1\t\t212\t\t2" in text
    assert " 2\t\t426\t\tNot Allocated" in text
    assert "100 -> 288" in text