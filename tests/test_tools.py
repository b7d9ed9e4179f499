import io
import json

from rich.console import Console

from simulator.alphabet import Direction
from simulator.random_source import RandomSource
from simulator.transition_table import HALT_STATE, Transition, generate_table
from tools.survey import run_survey, summarize
from tools.table_inspect import format_transition, inspect_table


def test_format_transition():
    assert format_transition(Transition("1", Direction.LEFT, "q3")) == "1Lq3"
    assert format_transition(Transition("_", Direction.STAY, HALT_STATE)) == "_NqH"
    assert format_transition(None) == "-"


def test_inspect_table_prints_every_state(tmp_path):
    table = generate_table(1, rng=RandomSource(seed=2))
    path = table.save(tmp_path / "states.json")
    console = Console(file=io.StringIO(), width=120, color_system=None)

    loaded = inspect_table(path, output=console)

    output = console.file.getvalue()
    assert loaded == table
    for state in table.non_halt_states:
        assert state in output
    assert "HALT" in output


def test_summarize_counts_outcomes():
    results = [
        {"steps_taken": 4, "status": "halted"},
        {"steps_taken": 10, "status": "halted"},
        {"steps_taken": 100, "status": "running"},
        {"steps_taken": 1, "status": "no_rule"},
    ]
    stats = summarize(results)
    assert stats["machines"] == 4
    assert stats["halted"] == 2
    assert stats["no_rule"] == 1
    assert stats["running"] == 1
    assert stats["halt_fraction"] == 0.5
    assert stats["mean_steps_to_halt"] == 7.0
    assert stats["max_steps_to_halt"] == 10


def test_summarize_without_halts():
    stats = summarize([{"steps_taken": 50, "status": "running"}])
    assert stats["halted"] == 0
    assert stats["mean_steps_to_halt"] is None


def test_run_survey_writes_results(tmp_path):
    output_file = tmp_path / "results" / "survey.jsonl"
    results, stats = run_survey(5, 0, max_steps=50, viewport_width=10, seed=1, output_file=output_file, show_progress=False)

    assert len(results) == 5
    assert stats["halted"] + stats["no_rule"] + stats["running"] == 5
    assert all(entry["steps_taken"] <= 50 for entry in results)
    with open(output_file, "r", encoding="utf-8") as f:
        lines = [json.loads(line) for line in f]
    assert [entry["machine_id"] for entry in lines] == [f"TM_{i:06d}" for i in range(5)]
