from dataclasses import dataclass
from enum import Enum
from typing import Optional

from simulator.alphabet import DEFAULT_ALPHABET, Direction
from simulator.errors import MachineHaltedError
from simulator.random_source import RandomSource
from simulator.tape import Tape
from simulator.transition_table import HALT_STATE, generate_table


class MachineStatus(Enum):
    RUNNING = "running"
    HALTED = "halted"
    NO_RULE = "no_rule"


@dataclass(frozen=True)
class StepResult:
    step: int
    previous_state: str
    read: str
    written: Optional[str]
    direction: Optional[Direction]
    next_state: str
    status: MachineStatus

    @property
    def halted(self):
        return self.status is not MachineStatus.RUNNING

    def to_dict(self):
        return {
            "step": self.step,
            "previous_state": self.previous_state,
            "read": self.read,
            "written": self.written,
            "direction": self.direction.value if self.direction else None,
            "next_state": self.next_state,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class RunSummary:
    steps: int
    status: MachineStatus
    final_state: str

    @property
    def halted(self):
        return self.status is not MachineStatus.RUNNING

    def to_dict(self):
        return {"steps": self.steps, "status": self.status.value, "final_state": self.final_state}


class TuringMachine:
    def __init__(self, table, tape, initial_state=None, rng=None):
        self.table = table
        self.tape = tape
        self.rng = rng if rng is not None else RandomSource()

        if initial_state is None:
            initial_state = self.rng.choice(table.non_halt_states)
        elif initial_state not in table:
            raise ValueError(f"Initial state {initial_state} is not part of the transition table.")

        self.initial_state = initial_state
        self.current_state = initial_state
        self.steps = 0
        self.status = MachineStatus.HALTED if initial_state == HALT_STATE else MachineStatus.RUNNING

    @classmethod
    def from_complexity(cls, complexity, viewport_width, rng=None, alphabet=DEFAULT_ALPHABET):
        """Random table, random tape sized to the viewport, random start state."""
        rng = rng if rng is not None else RandomSource()
        table = generate_table(complexity, alphabet, rng)
        tape = Tape(viewport_width, alphabet, rng)
        return cls(table, tape, rng=rng)

    @property
    def running(self):
        return self.status is MachineStatus.RUNNING

    def step(self):
        if not self.running:
            raise MachineHaltedError(f"Machine already stopped ({self.status.value}) in state {self.current_state}.")

        previous_state = self.current_state
        symbol = self.tape.read()
        transition = self.table.lookup(previous_state, symbol)

        if transition is None:
            self.status = MachineStatus.NO_RULE
            self.steps += 1
            return StepResult(self.steps, previous_state, symbol, None, None, previous_state, self.status)

        self.tape.write(transition.write)
        self.tape.move_head(transition.move)
        self.current_state = transition.next_state
        if self.current_state == HALT_STATE:
            self.status = MachineStatus.HALTED

        self.steps += 1
        return StepResult(
            self.steps,
            previous_state,
            symbol,
            transition.write,
            transition.move,
            self.current_state,
            self.status,
        )

    def iter_steps(self, max_steps=None):
        """Yield StepResults until the machine stops or max_steps is reached."""
        taken = 0
        while self.running and (max_steps is None or taken < max_steps):
            yield self.step()
            taken += 1

    def run(self, max_steps=None, on_step=None):
        for result in self.iter_steps(max_steps):
            if on_step is not None:
                on_step(result)
        return self.summary()

    def summary(self):
        return RunSummary(self.steps, self.status, self.current_state)

    # === Display accessors ===
    def visible_window(self, width):
        return self.tape.visible_window(width)

    def head_offset(self, width):
        return self.tape.head_offset(width)
