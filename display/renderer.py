# display/renderer.py

import time

from rich.console import Group
from rich.live import Live
from rich.text import Text

STATE_STYLE = "bold cyan"
HEAD_STYLE = "bold yellow"
HEAD_CELL_STYLE = "reverse bold"


class TapeRenderer:
    """Draws the state box, the head marker and the visible tape.

        ┌───────┐
        │ q3    │ ┌─┐
        └───────┘ └┬┘
    01_1100_10_0110_01
    """

    def __init__(self, width):
        self.width = width

    def _header(self, state, head_col):
        label = f" {state:<5} "
        box_top = "┌" + "─" * len(label) + "┐"
        box_mid = "│" + label + "│"
        box_bottom = "└" + "─" * len(label) + "┘"

        # marker spans head_col - 1 .. head_col + 1, the state box sits one space to its left
        indent = head_col - 1 - 1 - len(box_top)
        lines = [Text(no_wrap=True, overflow="crop") for _ in range(3)]
        if indent >= 0:
            pad = " " * indent
            lines[0].append(pad + box_top, style=STATE_STYLE)
            lines[1].append(pad + box_mid, style=STATE_STYLE)
            lines[1].append(" ┌─┐", style=HEAD_STYLE)
            lines[2].append(pad + box_bottom, style=STATE_STYLE)
            lines[2].append(" └┬┘", style=HEAD_STYLE)
        else:
            # no room left of the head: marker only, state goes on the top line
            marker_top, marker_bottom = ("┌─┐", "└┬┘") if head_col > 0 else ("─┐", "┬┘")
            pad = " " * max(0, head_col - 1)
            lines[0].append(f"state {state}", style=STATE_STYLE)
            lines[1].append(pad + marker_top, style=HEAD_STYLE)
            lines[2].append(pad + marker_bottom, style=HEAD_STYLE)
        return lines

    def _tape_line(self, cells, head_col):
        line = Text(no_wrap=True, overflow="crop")
        for col, symbol in enumerate(cells):
            line.append(symbol, style=HEAD_CELL_STYLE if col == head_col else None)
        return line

    @staticmethod
    def describe(result):
        if result is None:
            return ""
        if result.written is None:
            return f"No rule for state {result.previous_state} and symbol \"{result.read}\""
        return (
            f"#{result.step}: {result.previous_state}, {result.read} -> "
            f"{result.written}, {result.direction.value}, {result.next_state}"
        )

    def render(self, machine, result=None):
        cells = machine.visible_window(self.width)
        head_col = machine.head_offset(self.width)
        lines = self._header(machine.current_state, head_col)
        lines.append(self._tape_line(cells, head_col))
        lines.append(Text(self.describe(result), style="dim", no_wrap=True, overflow="ellipsis"))
        return Group(*lines)


class LiveRun:
    """Runs a machine inside a rich Live display, pausing after every step."""

    def __init__(self, machine, renderer, console, step_delay=0.2, sleep=time.sleep):
        self.machine = machine
        self.renderer = renderer
        self.console = console
        self.step_delay = step_delay
        self.sleep = sleep
        self.last_result = None

    def run(self, max_steps=None, on_step=None):
        with Live(self.renderer.render(self.machine), console=self.console, auto_refresh=False) as live:

            def handle(result):
                self.last_result = result
                if on_step is not None:
                    on_step(result)
                live.update(self.renderer.render(self.machine, result), refresh=True)
                if self.step_delay:
                    self.sleep(self.step_delay)

            return self.machine.run(max_steps, on_step=handle)
