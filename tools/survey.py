# tools/survey.py

import argparse
import json
from pathlib import Path

import numpy as np
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, TimeElapsedColumn

from simulator.random_source import RandomSource
from simulator.turing_machine import MachineStatus, TuringMachine

console = Console()


def simulate_one(complexity, viewport_width, max_steps, rng):
    machine = TuringMachine.from_complexity(complexity, viewport_width, rng=rng)
    initial_state = machine.current_state
    summary = machine.run(max_steps=max_steps)
    return {
        "initial_state": initial_state,
        "steps_taken": summary.steps,
        "status": summary.status.value,
        "final_state": summary.final_state,
        "tape_length": len(machine.tape),
    }


def summarize(results):
    """Halting statistics over a batch of survey entries."""
    steps = np.array([entry["steps_taken"] for entry in results], dtype=np.int64)
    halted = np.array([entry["status"] == MachineStatus.HALTED.value for entry in results], dtype=bool)
    no_rule = np.array([entry["status"] == MachineStatus.NO_RULE.value for entry in results], dtype=bool)

    stats = {
        "machines": len(results),
        "halted": int(halted.sum()),
        "no_rule": int(no_rule.sum()),
        "running": int(len(results) - halted.sum() - no_rule.sum()),
        "halt_fraction": float(halted.mean()) if len(results) else 0.0,
        "mean_steps_to_halt": float(steps[halted].mean()) if halted.any() else None,
        "max_steps_to_halt": int(steps[halted].max()) if halted.any() else None,
    }
    return stats


def run_survey(num_machines, complexity, max_steps=10_000, viewport_width=80, seed=None, output_file=None, show_progress=True):
    rng = RandomSource(seed)
    results = []

    with Progress(
            SpinnerColumn(),
            BarColumn(),
            "[progress.percentage]{task.percentage:>3.0f}%",
            TextColumn("{task.completed}/{task.total} Machines"),
            TimeElapsedColumn(),
            console=console,
            disable=not show_progress
    ) as progress:
        task = progress.add_task("[cyan]Simulating...", total=num_machines)
        for idx in range(num_machines):
            entry = simulate_one(complexity, viewport_width, max_steps, rng)
            entry["machine_id"] = f"TM_{idx:06d}"
            results.append(entry)
            progress.update(task, advance=1)

    if output_file is not None:
        output_file = Path(output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "a", encoding="utf-8") as f:
            for entry in results:
                f.write(json.dumps(entry) + "\n")

    return results, summarize(results)


def print_stats(stats, output=None):
    output = output if output is not None else console
    output.print(f"[INFO] Simulated {stats['machines']:,} machines.")
    output.print(f"  Halted:  {stats['halted']:,} ({stats['halt_fraction']:.1%})")
    output.print(f"  No rule: {stats['no_rule']:,}")
    output.print(f"  Still running at step limit: {stats['running']:,}")
    if stats["mean_steps_to_halt"] is not None:
        output.print(f"  Mean steps to halt: {stats['mean_steps_to_halt']:.1f} (max {stats['max_steps_to_halt']:,})")


# === CLI ===
def main():
    parser = argparse.ArgumentParser(description="Run many random Turing machines headlessly and report halting statistics.")
    parser.add_argument("--machines", type=int, default=100, help="Number of machines to simulate (default=100)")
    parser.add_argument("--complexity", type=int, default=1, help="Table complexity (default=1)")
    parser.add_argument("--max_steps", type=int, default=10_000, help="Step limit per machine")
    parser.add_argument("--width", type=int, default=80, help="Viewport width used for tape growth")
    parser.add_argument("--seed", type=int, help="Seed for the random source")
    parser.add_argument("--output", default="results/survey.jsonl", help="Results file (JSON lines)")
    args = parser.parse_args()

    _, stats = run_survey(
        args.machines,
        args.complexity,
        max_steps=args.max_steps,
        viewport_width=args.width,
        seed=args.seed,
        output_file=args.output
    )
    print_stats(stats)


if __name__ == "__main__":
    main()
