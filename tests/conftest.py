import itertools

import pytest

from simulator.alphabet import Direction
from simulator.tape import Tape
from simulator.transition_table import HALT_STATE, Transition, TransitionTable


class ScriptedSource:
    """Random source stand-in returning options[i] for each scripted index, cycling."""

    def __init__(self, indices):
        self._indices = itertools.cycle(indices)
        self.calls = 0

    def choice(self, options):
        self.calls += 1
        return options[next(self._indices) % len(options)]


@pytest.fixture
def first_source():
    return ScriptedSource([0])


@pytest.fixture
def halting_table():
    """q0 on '0' writes '1', stays and halts; everything else loops in q1."""
    loop = Transition("0", Direction.LEFT, "q1")
    return TransitionTable({
        "q0": {"0": Transition("1", Direction.STAY, HALT_STATE), "1": loop, "_": loop},
        "q1": {"0": loop, "1": loop, "_": loop},
        HALT_STATE: {},
    })


@pytest.fixture
def make_tape(first_source):
    def _make(cells, head=None, viewport_width=None, rng=None):
        return Tape(
            viewport_width or len(cells),
            rng=rng or first_source,
            cells=list(cells),
            head=head,
        )
    return _make
