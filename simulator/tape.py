from simulator.alphabet import DEFAULT_ALPHABET, Direction
from simulator.random_source import RandomSource


class Tape:
    """Growable buffer standing in for an infinite tape.

    Moving Left walks the head towards the end of the buffer, moving Right
    walks it towards the start. Whenever the head comes within ``margin``
    cells (half the viewport) of either end, one random cell is added there,
    so a centered viewport never runs out of tape.
    """

    def __init__(self, viewport_width, alphabet=DEFAULT_ALPHABET, rng=None, cells=None, head=None):
        if viewport_width < 1:
            raise ValueError(f"Viewport width must be positive, got {viewport_width}.")
        self.alphabet = alphabet
        self.rng = rng if rng is not None else RandomSource()
        self.viewport_width = viewport_width
        self.margin = viewport_width // 2

        if cells is None:
            cells = [self._fresh_symbol() for _ in range(viewport_width)]
        self._cells = list(cells)
        if not self._cells:
            raise ValueError("Tape needs at least one materialized cell.")

        self.head = len(self._cells) // 2 if head is None else head
        if not 0 <= self.head < len(self._cells):
            raise IndexError(f"Head {self.head} outside tape of length {len(self._cells)}.")

    def _fresh_symbol(self):
        return self.rng.choice(self.alphabet.symbols)

    def __len__(self):
        return len(self._cells)

    @property
    def cells(self):
        return tuple(self._cells)

    def read(self):
        return self._cells[self.head]

    def write(self, symbol):
        self._cells[self.head] = symbol

    def move_head(self, direction):
        direction = Direction.parse(direction)

        if direction is Direction.LEFT:
            self.head += 1
            if self.head + self.margin >= len(self._cells):
                self._cells.append(self._fresh_symbol())
        elif direction is Direction.RIGHT:
            if self.margin == 0 and self.head == 0:
                # one-cell viewport: the head lands on a new leftmost cell
                self._cells.insert(0, self._fresh_symbol())
                return
            self.head = max(0, self.head - 1)
            if self.head - self.margin < 0:
                self._cells.insert(0, self._fresh_symbol())
                self.head += 1

    def window_start(self, width):
        return max(0, self.head - width // 2)

    def visible_window(self, width):
        """At most ``width`` cells around the head, clipped at the buffer edges."""
        start = self.window_start(width)
        return self._cells[start:start + width]

    def head_offset(self, width):
        """Column of the head inside visible_window(width)."""
        return self.head - self.window_start(width)
