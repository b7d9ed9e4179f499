import io

from rich.console import Console

from display.renderer import LiveRun, TapeRenderer
from simulator.turing_machine import MachineStatus, TuringMachine


def render_lines(renderable, width=60):
    console = Console(file=io.StringIO(), width=width, color_system=None)
    console.print(renderable)
    return console.file.getvalue().splitlines()


def test_layout_puts_marker_over_head(halting_table, make_tape):
    cells = "01_" * 10
    machine = TuringMachine(halting_table, make_tape(cells), initial_state="q0")
    renderer = TapeRenderer(30)

    lines = render_lines(renderer.render(machine))

    assert "┌───────┐" in lines[0]
    assert "│ q0    │" in lines[1]
    assert lines[2].index("┬") == machine.head_offset(30) == 15
    assert lines[3] == cells


def test_narrow_viewport_falls_back_to_marker_only(halting_table, make_tape):
    machine = TuringMachine(halting_table, make_tape("01_01"), initial_state="q1")
    lines = render_lines(TapeRenderer(5).render(machine))
    assert lines[0] == "state q1"
    assert lines[2].index("┬") == 2
    assert lines[3] == "01_01"


def test_describe_transition(halting_table, make_tape):
    machine = TuringMachine(halting_table, make_tape("000", head=1), initial_state="q0")
    result = machine.step()
    assert TapeRenderer.describe(result) == "#1: q0, 0 -> 1, N, qH"
    assert TapeRenderer.describe(None) == ""


def test_live_run_paces_each_step(halting_table, make_tape):
    machine = TuringMachine(halting_table, make_tape("000", head=1), initial_state="q0")
    console = Console(file=io.StringIO(), width=40, color_system=None)
    delays = []
    seen = []

    live_run = LiveRun(machine, TapeRenderer(3), console, step_delay=0.5, sleep=delays.append)
    summary = live_run.run(on_step=seen.append)

    assert summary.status is MachineStatus.HALTED
    assert delays == [0.5]
    assert len(seen) == 1
    assert live_run.last_result is seen[0]
    assert "qH" in console.file.getvalue()
