import json
from pathlib import Path
from typing import NamedTuple

from simulator.alphabet import DEFAULT_ALPHABET, DIRECTION_POOL, Alphabet, Direction
from simulator.errors import InvalidComplexityError
from simulator.random_source import RandomSource

HALT_STATE = "qH"


class Transition(NamedTuple):
    write: str
    move: Direction
    next_state: str

    def to_list(self):
        return [self.write, self.move.value, self.next_state]


def state_name(index):
    return f"q{index}"


class TransitionTable:
    """state -> symbol -> Transition, with an empty rule set for HALT."""

    def __init__(self, rules, alphabet=DEFAULT_ALPHABET):
        self.alphabet = alphabet
        self._rules = {
            state: {
                symbol: Transition(transition.write, Direction.parse(transition.move), transition.next_state)
                for symbol, transition in row.items()
            }
            for state, row in rules.items()
        }
        self._rules.setdefault(HALT_STATE, {})
        self._validate()

    def _validate(self):
        if self._rules[HALT_STATE]:
            raise ValueError(f"Halt state {HALT_STATE} must not have outgoing transitions.")
        for state, row in self._rules.items():
            for symbol, transition in row.items():
                if symbol not in self.alphabet:
                    raise ValueError(f"State {state} has a rule for unknown symbol {symbol!r}.")
                if transition.write not in self.alphabet:
                    raise ValueError(f"Rule ({state}, {symbol!r}) writes unknown symbol {transition.write!r}.")
                if transition.next_state not in self._rules:
                    raise ValueError(f"Rule ({state}, {symbol!r}) points to unknown state {transition.next_state}.")

    @property
    def states(self):
        return list(self._rules)

    @property
    def non_halt_states(self):
        return [state for state in self._rules if state != HALT_STATE]

    @property
    def num_states(self):
        return len(self.non_halt_states)

    def rules_for(self, state):
        return dict(self._rules[state])

    def lookup(self, state, symbol):
        """Transition for (state, symbol), or None when no rule exists."""
        return self._rules.get(state, {}).get(symbol)

    def is_total(self):
        return all(
            symbol in self._rules[state]
            for state in self.non_halt_states
            for symbol in self.alphabet
        )

    def __contains__(self, state):
        return state in self._rules

    def __eq__(self, other):
        if not isinstance(other, TransitionTable):
            return NotImplemented
        return self._rules == other._rules and self.alphabet.symbols == other.alphabet.symbols

    # === Structural dump ===
    def to_dict(self):
        return {
            state: {symbol: transition.to_list() for symbol, transition in row.items()}
            for state, row in self._rules.items()
        }

    @classmethod
    def from_dict(cls, data, alphabet=DEFAULT_ALPHABET):
        rules = {}
        for state, row in data.items():
            rules[state] = {}
            for symbol, entry in row.items():
                if len(entry) != 3:
                    raise ValueError(f"Rule ({state}, {symbol!r}) must be [write, move, next_state], got {entry}.")
                write, move, next_state = entry
                rules[state][symbol] = Transition(write, Direction.parse(move), next_state)
        return cls(rules, alphabet)

    def save(self, path):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=4)
        return str(path)

    @classmethod
    def load(cls, path, alphabet=DEFAULT_ALPHABET):
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Transition table not found at: {path}")
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f), alphabet)


def generate_table(complexity, alphabet=DEFAULT_ALPHABET, rng=None):
    """Draw a random total table with 2 ** (complexity + 1) working states.

    For each state and each symbol (alphabet order) three uniform draws are
    made: the symbol to write, the move from DIRECTION_POOL and the next state,
    which may be HALT.
    """
    if isinstance(complexity, bool) or not isinstance(complexity, int):
        raise InvalidComplexityError(f"Complexity must be an integer, got {complexity!r}.")
    if complexity < 0:
        raise InvalidComplexityError(f"Complexity must be non-negative, got {complexity}.")

    rng = rng if rng is not None else RandomSource()
    num_states = 2 ** (complexity + 1)
    targets = [state_name(i) for i in range(num_states)] + [HALT_STATE]

    rules = {}
    for i in range(num_states):
        row = {}
        for symbol in alphabet:
            write = rng.choice(alphabet.symbols)
            move = rng.choice(DIRECTION_POOL)
            next_state = rng.choice(targets)
            row[symbol] = Transition(write, move, next_state)
        rules[state_name(i)] = row
    rules[HALT_STATE] = {}
    return TransitionTable(rules, alphabet)
