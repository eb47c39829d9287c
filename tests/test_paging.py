import pytest

from ossim.paging import fifo, format_trace, lfu, lfu_resident, lru

BELADY = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]


def test_hits_and_faults_cover_every_reference():
    pages = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2]
    traces = [fifo(pages, 3), lru(pages, 3), lfu(pages, 3), lfu_resident(pages, 3)]
    for trace in traces:
        assert trace.hits + trace.faults == len(pages)
        assert len(trace) == len(pages)


def test_only_cold_misses_when_everything_fits():
    pages = [4, 5, 4, 6, 5, 6, 4]
    traces = [fifo(pages, 3), lru(pages, 3), lfu(pages, 3), lfu_resident(pages, 3)]
    for trace in traces:
        assert trace.faults == len(set(pages))
        assert sorted(trace.final_frames) == sorted(set(pages))


def test_referenced_page_is_resident_afterwards():
    pages = [1, 3, 0, 3, 5, 6, 3, 1, 0]
    traces = [fifo(pages, 2), lru(pages, 2), lfu(pages, 2), lfu_resident(pages, 2)]
    for trace in traces:
        for step, page in zip(trace, pages):
            assert step.page == page
            assert page in step.frames
            assert len(step.frames) == 2
            assert (step.frame is None) == step.hit


def test_fifo_shows_beladys_anomaly():
    assert fifo(BELADY, 3).faults == 9
    assert fifo(BELADY, 4).faults == 10


def test_lru_never_faults_more_with_more_frames():
    assert lru(BELADY, 4).faults <= lru(BELADY, 3).faults


def test_fifo_evicts_oldest_load():
    assert fifo([1, 2, 1, 3], 2).final_frames == (3, 2)


def test_lru_evicts_least_recently_used():
    assert lru([1, 2, 1, 3], 2).final_frames == (1, 3)


def test_lfu_keeps_history_of_evicted_pages():
    pages = [1, 1, 1, 2, 3, 2, 3, 2, 3]
    assert lfu(pages, 2).final_frames == (3, 2)
    assert lfu_resident(pages, 2).final_frames == (1, 3)


def test_lfu_resident_fills_empty_frames_in_order():
    trace = lfu_resident([7, 8], 3)
    assert [step.frame for step in trace] == [0, 1]
    assert trace.final_frames == (7, 8, None)


def test_rejects_zero_frames():
    with pytest.raises(ValueError):
        fifo([1, 2], 0)
    with pytest.raises(ValueError):
        lru([1, 2], 0)
    with pytest.raises(ValueError):
        lfu([1, 2], 0)
    with pytest.raises(ValueError):
        lfu_resident([1, 2], 0)


def test_rejects_negative_pages():
    with pytest.raises(ValueError):
        fifo([1, -1], 2)
    with pytest.raises(ValueError):
        lru([1, -1], 2)
    with pytest.raises(ValueError):
        lfu([1, -1], 2)
    with pytest.raises(ValueError):
        lfu_resident([1, -1], 2)


def test_format_trace_marks_empty_frames():
    trace = fifo([5], 2)
    assert format_trace(trace) == f"Frame: 5 -1 \nTotal Page Faults (FIFO): {trace.faults}\n"


def test_format_trace_has_one_line_per_reference():
    trace = lru(BELADY, 3)
    lines = format_trace(trace).splitlines()
    assert len(lines) == len(BELADY) + 1
    assert lines[-1] == f"Total Page Faults (LRU): {trace.faults}"