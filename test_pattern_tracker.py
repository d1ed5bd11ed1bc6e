#!/usr/bin/env python3
"""Tests for the lock pattern touch/path tracker."""

import gc
import itertools
import sys
sys.path.insert(0, '.')

import numpy as np
import pytest

from pattern_lock.core.state import (
    CellOutOfRangeError,
    GridState,
    PathTracker,
    PatternObserver,
    PatternTracker,
    can_connect,
)

ALL_CELLS = list(itertools.product(range(3), range(3)))


class RecordingObserver(PatternObserver):
    def __init__(self):
        self.events = []

    def on_connected(self, row, col):
        self.events.append(('connected', row, col))

    def on_cleared(self):
        self.events.append(('cleared',))


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def tracker(observer):
    return PatternTracker(observer)


def assert_consistent(tracker):
    path = tracker.path
    assert len(path) == len(set(path))
    assert len(path) == int(np.count_nonzero(tracker.occupancy))
    for row, col in ALL_CELLS:
        assert tracker.occupancy[row, col] == ((row, col) in path)


def test_fresh_state_is_empty(tracker):
    assert tracker.path == []
    assert not tracker.occupancy.any()
    assert tracker.occupancy.shape == (3, 3)
    assert tracker.connected_count == 0
    assert not tracker.is_full


@pytest.mark.parametrize("row,col", ALL_CELLS)
def test_first_touch_accepted_then_rejected(tracker, row, col):
    tracker.clear()
    assert tracker.submit_touch(row, col) is True
    assert tracker.submit_touch(row, col) is False
    assert tracker.submit_touch(row, col) is False
    assert tracker.path == [(row, col)]


def test_repeat_touch_keeps_path_unchanged(tracker, observer):
    assert tracker.submit_touch(0, 0)
    assert tracker.path == [(0, 0)]

    assert not tracker.submit_touch(0, 0)
    assert tracker.path == [(0, 0)]
    assert observer.events == [('connected', 0, 0)]


def test_three_cell_path(tracker, observer):
    assert tracker.submit_touch(0, 0)
    assert tracker.submit_touch(0, 1)
    assert tracker.submit_touch(1, 1)

    assert tracker.path == [(0, 0), (0, 1), (1, 1)]
    expected = np.zeros((3, 3), dtype=bool)
    expected[0, 0] = expected[0, 1] = expected[1, 1] = True
    assert np.array_equal(tracker.occupancy, expected)
    assert observer.events == [
        ('connected', 0, 0),
        ('connected', 0, 1),
        ('connected', 1, 1),
    ]
    assert_consistent(tracker)


def test_full_grid_rejects_everything(tracker):
    for row, col in ALL_CELLS:
        assert tracker.submit_touch(row, col)

    assert tracker.path == ALL_CELLS
    assert tracker.is_full
    assert tracker.connected_count == 9
    for row, col in ALL_CELLS:
        assert not tracker.submit_touch(row, col)
    assert len(tracker.path) == 9


def test_clear_after_partial_path(tracker, observer):
    for cell in [(0, 0), (0, 1), (1, 1)]:
        tracker.submit_touch(*cell)

    tracker.clear()

    assert observer.events[-1] == ('cleared',)
    assert tracker.path == []
    assert not tracker.occupancy.any()
    assert tracker.submit_touch(0, 0)


def test_clear_is_idempotent(tracker, observer):
    tracker.submit_touch(2, 1)
    tracker.clear()
    once_path, once_grid = tracker.path, tracker.occupancy
    tracker.clear()

    assert tracker.path == once_path == []
    assert np.array_equal(tracker.occupancy, once_grid)
    assert observer.events.count(('cleared',)) == 2


def test_clear_from_full_grid(tracker, observer):
    for row, col in ALL_CELLS:
        tracker.submit_touch(row, col)
    assert tracker.is_full

    tracker.clear()

    assert observer.events[-1] == ('cleared',)
    assert tracker.path == []
    assert not tracker.occupancy.any()
    assert not tracker.is_full
    for row, col in ALL_CELLS:
        assert tracker.submit_touch(row, col)


def test_mixed_sequence_stays_consistent(tracker):
    sequence = [(1, 1), (0, 0), (1, 1), (2, 2), (0, 0), (0, 2), (2, 0), (2, 2)]
    accepted = [tracker.submit_touch(*cell) for cell in sequence]

    assert accepted == [True, True, False, True, False, True, True, False]
    assert tracker.path == [(1, 1), (0, 0), (2, 2), (0, 2), (2, 0)]
    assert_consistent(tracker)


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 3), (10, 10)])
def test_out_of_range_raises_without_mutation(tracker, observer, row, col):
    tracker.submit_touch(1, 1)

    with pytest.raises(CellOutOfRangeError):
        tracker.submit_touch(row, col)

    assert tracker.path == [(1, 1)]
    assert observer.events == [('connected', 1, 1)]


@pytest.mark.parametrize("row,col", [(1.0, 0), (0, "1"), (True, 0)])
def test_non_integer_coordinates_raise(tracker, row, col):
    with pytest.raises(CellOutOfRangeError):
        tracker.submit_touch(row, col)


def test_out_of_range_is_a_value_error(tracker):
    with pytest.raises(ValueError):
        tracker.submit_touch(5, 5)


def test_numpy_integers_accepted(tracker, observer):
    assert tracker.submit_touch(np.int64(2), np.int64(0))
    assert tracker.path == [(2, 0)]

    _, row, col = observer.events[0]
    assert type(row) is int
    assert type(col) is int


@pytest.mark.parametrize("row,col", [(-1, 0), (3, 1), (1, 3)])
def test_can_connect_out_of_range(row, col):
    with pytest.raises(CellOutOfRangeError):
        can_connect(row, col, GridState())


@pytest.mark.parametrize("row,col", [(-1, 0), (3, 1), (1, 3)])
def test_grid_mark_out_of_range(row, col):
    grid = GridState()
    with pytest.raises(CellOutOfRangeError):
        grid.mark(row, col)
    assert grid.connected_count == 0


def test_can_connect_does_not_mutate():
    grid = GridState()
    assert can_connect(1, 2, grid)
    assert can_connect(1, 2, grid)
    assert grid.connected_count == 0

    grid.mark(1, 2)
    assert not can_connect(1, 2, grid)


def test_accessors_return_copies(tracker):
    tracker.submit_touch(0, 0)

    tracker.path.append((2, 2))
    tracker.occupancy[2, 2] = True

    assert tracker.path == [(0, 0)]
    assert not tracker.is_connected(2, 2)


def test_path_tracker_membership():
    path = PathTracker()
    path.append(0, 1)
    path.append(2, 2)

    assert len(path) == 2
    assert (0, 1) in path
    assert [2, 2] in path
    assert (1, 1) not in path
    assert path.last == (2, 2)
    assert list(path) == [(0, 1), (2, 2)]


def test_tracker_works_without_observer():
    tracker = PatternTracker()
    assert tracker.submit_touch(0, 0)
    tracker.clear()
    assert tracker.path == []


def test_observer_is_held_weakly():
    observer = RecordingObserver()
    tracker = PatternTracker(observer)
    tracker.submit_touch(0, 0)
    events = observer.events
    assert events == [('connected', 0, 0)]

    del observer
    gc.collect()

    assert tracker.observer is None
    assert tracker.submit_touch(0, 1)
    tracker.clear()
    assert tracker.path == []


def test_set_observer_replaces_and_detaches(tracker, observer):
    other = RecordingObserver()
    tracker.set_observer(other)
    tracker.submit_touch(1, 0)

    assert observer.events == []
    assert other.events == [('connected', 1, 0)]

    tracker.set_observer(None)
    tracker.clear()
    assert other.events == [('connected', 1, 0)]


def test_observer_sees_state_already_updated():
    class CheckingObserver(PatternObserver):
        def __init__(self, tracker_ref):
            self.tracker_ref = tracker_ref
            self.seen = []

        def on_connected(self, row, col):
            self.seen.append(self.tracker_ref[0].path)

    holder = []
    observer = CheckingObserver(holder)
    tracker = PatternTracker(observer)
    holder.append(tracker)

    tracker.submit_touch(2, 2)
    assert observer.seen == [[(2, 2)]]


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
