import argparse

from rich.console import Console
from rich.table import Table

from simulator.transition_table import HALT_STATE, TransitionTable

console = Console()


def format_transition(transition):
    """Compact notation: write symbol, move, next state (e.g. 1Lq3)."""
    if transition is None:
        return "-"
    return f"{transition.write}{transition.move.value}{transition.next_state}"


def build_table_view(table):
    view = Table(title="Transition Table", show_header=True, header_style="bold magenta")
    view.add_column("State", justify="center")
    for symbol in table.alphabet:
        view.add_column(f"\"{symbol}\"", justify="center")

    for state in table.non_halt_states:
        row = [state]
        for symbol in table.alphabet:
            transition = table.lookup(state, symbol)
            action = format_transition(transition)
            if transition is not None and transition.next_state == HALT_STATE:
                action = f"[green]{action}[/green]"
            row.append(action)
        view.add_row(*row)

    view.add_row(f"[red]{HALT_STATE}[/red]", *["[red]HALT[/red]"] * len(table.alphabet))
    return view


def inspect_table(path, output=None):
    output = output if output is not None else console
    table = TransitionTable.load(path)
    output.print(f"[INFO] Loaded {table.num_states:,} states from {path}")
    halting = sum(
        1
        for state in table.non_halt_states
        for transition in table.rules_for(state).values()
        if transition.next_state == HALT_STATE
    )
    output.print(f"[INFO] Rules leading to {HALT_STATE}: {halting}")
    output.print(build_table_view(table))
    return table


def main():
    parser = argparse.ArgumentParser(description="Turing Machine Transition Table Inspector")
    parser.add_argument("path", nargs="?", default="logs/states.json", help="Table dump to inspect (default=logs/states.json)")
    args = parser.parse_args()

    inspect_table(args.path)


if __name__ == "__main__":
    main()
