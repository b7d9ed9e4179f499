from enum import Enum

from simulator.errors import InvalidDirectionError

DEFAULT_SYMBOLS = ("0", "1", "_")
BLANK = "_"


class Direction(Enum):
    LEFT = "L"
    RIGHT = "R"
    STAY = "N"

    @classmethod
    def parse(cls, value):
        """Accept a Direction or its one-letter code."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidDirectionError(f"Invalid move direction: {value!r}") from None


# Left appears twice: generated tables drift left twice as often as right or stay.
DIRECTION_POOL = (Direction.LEFT, Direction.RIGHT, Direction.STAY, Direction.LEFT)


class Alphabet:
    def __init__(self, symbols=DEFAULT_SYMBOLS, blank=BLANK):
        symbols = tuple(symbols)
        if not symbols:
            raise ValueError("Alphabet needs at least one symbol.")
        if len(set(symbols)) != len(symbols):
            raise ValueError(f"Alphabet symbols must be unique, got {symbols}.")
        if blank not in symbols:
            raise ValueError(f"Blank symbol {blank!r} is not part of the alphabet {symbols}.")
        self.symbols = symbols
        self.blank = blank

    def __iter__(self):
        return iter(self.symbols)

    def __len__(self):
        return len(self.symbols)

    def __contains__(self, symbol):
        return symbol in self.symbols

    def __repr__(self):
        return f"Alphabet({self.symbols!r}, blank={self.blank!r})"


DEFAULT_ALPHABET = Alphabet()
