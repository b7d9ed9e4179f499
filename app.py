# app.py

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.prompt import Confirm, FloatPrompt, IntPrompt

from config.config_loader import default_config, load_config, validate_config
from display.renderer import LiveRun, TapeRenderer
from logger.logger import JSONLogger
from simulator.random_source import RandomSource
from simulator.turing_machine import MachineStatus, TuringMachine
from tools.survey import print_stats, run_survey
from tools.table_inspect import inspect_table

console = Console()

DEFAULT_CONFIG_PATH = "config/runtime_config.json"


# === Utilities ===
def resolve_config(args):
    config_path = Path(args.config)
    if config_path.exists():
        config = load_config(str(config_path), verbose=args.verbose)
    elif args.config != DEFAULT_CONFIG_PATH:
        console.print(f"[red]Error: configuration file {config_path} not found![/red]")
        sys.exit(1)
    else:
        config = default_config()

    overrides = {
        "complexity": args.complexity,
        "viewport_width": args.width,
        "step_delay": args.delay,
        "max_steps": args.max_steps,
        "seed": args.seed,
    }
    config.update({key: value for key, value in overrides.items() if value is not None})
    if args.no_log:
        config["log_steps"] = False

    validate_config(config)
    return config


def prompt_settings(config):
    console.print("\n[bold cyan]Random Turing Machine[/bold cyan]")
    config["complexity"] = IntPrompt.ask("Complexity", default=config["complexity"])
    config["step_delay"] = FloatPrompt.ask("Delay between steps (seconds)", default=float(config["step_delay"]))
    config["max_steps"] = IntPrompt.ask("Max Steps (0 = unlimited)", default=config["max_steps"])
    config["log_steps"] = Confirm.ask("Log every step?", default=config["log_steps"])
    validate_config(config)
    return config


def print_summary(summary):
    color = {
        MachineStatus.HALTED: "green",
        MachineStatus.NO_RULE: "yellow",
        MachineStatus.RUNNING: "cyan",
    }[summary.status]
    console.print(
        f"[{color}]{summary.status.value}[/{color}] after {summary.steps:,} steps, "
        f"final state {summary.final_state}"
    )


def run_machine(config):
    width = config["viewport_width"] or console.width
    rng = RandomSource(config["seed"])
    machine = TuringMachine.from_complexity(config["complexity"], width, rng=rng)

    logger = JSONLogger(config["output_directory"], config["log_file_prefix"], config["states_file"])
    states_path = logger.dump_table(machine.table)
    logger.log_start(machine, config["complexity"])
    console.print(f"[green]Transition table with {machine.table.num_states:,} states saved to {states_path}[/green]")

    live_run = LiveRun(machine, TapeRenderer(width), console, step_delay=config["step_delay"])
    on_step = logger.log_step if config["log_steps"] else None
    max_steps = config["max_steps"] or None

    try:
        summary = live_run.run(max_steps=max_steps, on_step=on_step)
    except KeyboardInterrupt:
        summary = machine.summary()
        logger.log_interrupted(summary)
        console.print("[yellow]Interrupted.[/yellow]")
    else:
        logger.log_halt(summary, live_run.last_result)

    print_summary(summary)
    return summary


def main(argv=None):
    parser = argparse.ArgumentParser(description="Random Turing Machine Simulator")
    parser.add_argument("complexity", nargs="?", type=int, help="Table complexity, 2^(complexity+1) states (default=4)")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to runtime config JSON")
    parser.add_argument("--width", type=int, help="Viewport width (default: terminal width)")
    parser.add_argument("--delay", type=float, help="Seconds to pause after each step")
    parser.add_argument("--max-steps", type=int, help="Stop after this many steps (0 = unlimited)")
    parser.add_argument("--seed", type=int, help="Seed for the random source")
    parser.add_argument("--no-log", action="store_true", help="Do not log individual steps")
    parser.add_argument("--interactive", action="store_true", help="Prompt for run settings")
    parser.add_argument("--inspect", metavar="PATH", help="Pretty-print a saved transition table and exit")
    parser.add_argument("--survey", type=int, metavar="N", help="Run N machines headlessly and report halting statistics")
    parser.add_argument("--verbose", action="store_true", help="Print the loaded configuration")
    args = parser.parse_args(argv)

    if args.inspect:
        inspect_table(args.inspect)
        return

    try:
        config = resolve_config(args)
        if args.interactive and not args.survey:
            config = prompt_settings(config)
    except (TypeError, ValueError) as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        sys.exit(2)

    if args.survey:
        _, stats = run_survey(
            args.survey,
            config["complexity"],
            max_steps=config["max_steps"] or 10_000,
            viewport_width=config["viewport_width"] or 80,
            seed=config["seed"],
            output_file=Path(config["output_directory"]) / "survey.jsonl"
        )
        print_stats(stats)
        return

    if args.interactive:
        if not Confirm.ask("Start the machine?", default=True):
            console.print("[bold green]Goodbye![/bold green]")
            return

    run_machine(config)


if __name__ == "__main__":
    main()
