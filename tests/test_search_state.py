from math import inf

import pytest

from pathlab.core.errors import InvariantViolation
from pathlab.core.search_state import SearchState


def test_reset_discards_previous_run() -> None:
    state = SearchState()
    state.reset(4, 5)
    state.mark_visited((0, 0))
    state.set_score((0, 0), 0)
    state.set_predecessor((0, 1), (0, 0))

    state.reset(2, 2)
    assert state.visited == set()
    assert state.predecessor == {}
    assert state.distance == {} and state.score == {}
    assert state.capacity == 4


def test_unset_distance_is_infinite() -> None:
    state = SearchState()
    state.reset(3, 3)
    assert state.distance_of((1, 1)) == inf
    assert state.predecessor_of((1, 1)) is None


def test_set_score_only_accepts_strictly_better_distance() -> None:
    state = SearchState()
    state.reset(3, 3)
    state.set_score((1, 1), 5)
    state.set_score((1, 1), 3, priority=7)
    assert state.distance[(1, 1)] == 3
    assert state.score[(1, 1)] == 7
    with pytest.raises(InvariantViolation):
        state.set_score((1, 1), 3)
    with pytest.raises(InvariantViolation):
        state.set_score((1, 1), 4)


def test_score_defaults_to_distance() -> None:
    state = SearchState()
    state.reset(3, 3)
    state.set_score((0, 1), 1)
    assert state.score[(0, 1)] == 1


def test_self_predecessor_is_rejected() -> None:
    state = SearchState()
    state.reset(3, 3)
    with pytest.raises(InvariantViolation):
        state.set_predecessor((1, 1), (1, 1))
