import json
import os
from datetime import datetime, timezone

from simulator.turing_machine import MachineStatus


class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="turing_", states_file="states.json"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        self.states_file = states_file
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    @staticmethod
    def _stamp(event, payload):
        entry = {"timestamp": datetime.now(timezone.utc).isoformat(), "event": event}
        entry.update(payload)
        return entry

    def log(self, entry: dict):
        """Log a single entry to the run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def log_start(self, machine, complexity=None):
        self.log(self._stamp("start", {
            "message": f"Starting Turing machine with initial state: {machine.current_state}",
            "initial_state": machine.current_state,
            "complexity": complexity,
            "num_states": machine.table.num_states,
            "tape_length": len(machine.tape),
        }))

    def log_step(self, result):
        self.log(self._stamp("step", result.to_dict()))

    def log_halt(self, summary, last_result=None):
        if summary.status is MachineStatus.HALTED:
            message = "Reached halt state"
        elif summary.status is MachineStatus.NO_RULE and last_result is not None:
            message = f"No rule for state {last_result.previous_state} and symbol \"{last_result.read}\""
        else:
            message = f"Stopped in state {summary.final_state}"
        payload = {"message": message}
        payload.update(summary.to_dict())
        self.log(self._stamp("halt", payload))

    def log_interrupted(self, summary):
        payload = {"message": "Run interrupted"}
        payload.update(summary.to_dict())
        self.log(self._stamp("interrupted", payload))

    def dump_table(self, table):
        """Write the transition table next to the run log."""
        return table.save(os.path.join(self.output_directory, self.states_file))
