"""Tracing module: logs solve and editor steps and writes them to CSV."""

import csv
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class TraceStep:
    """A single step in an editing or solving session."""

    timestamp: float
    step_number: int
    action_type: str  # 'encode', 'check', 'decode', 'move', 'set', 'clear', 'reset', 'quit'
    cell: Optional[str] = None
    value: Optional[Any] = None
    num_variables: Optional[int] = None
    num_constraints: Optional[int] = None
    result: Optional[str] = None
    reason: Optional[str] = None


class Tracer:
    """Records session steps for logging and analysis."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.steps: List[TraceStep] = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def _record(self, action_type: str, **fields: Any) -> None:
        if not self.enabled:
            return
        self.step_counter += 1
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type=action_type,
            **fields,
        ))

    def log_encode(self, num_variables: int, num_constraints: int, filled_cells: int):
        """Log construction of a constraint system."""
        self._record(
            'encode',
            num_variables=num_variables,
            num_constraints=num_constraints,
            reason=f"{filled_cells} filled cells fixed by equality",
        )

    def log_check(self, result: str):
        """Log the outcome of the satisfiability check."""
        self._record('check', result=result)

    def log_decode(self, cells_written: int):
        """Log a witness being written back into the board."""
        self._record('decode', reason=f"Wrote {cells_written} cells")

    def log_edit(self, action_type: str, cell: Optional[str] = None, value: Optional[Any] = None):
        """Log an editor transition ('move', 'set', 'clear', 'reset', 'quit')."""
        self._record(action_type, cell=cell, value=None if value is None else str(value))

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            print("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = [
            'timestamp', 'step_number', 'action_type', 'cell', 'value',
            'num_variables', 'num_constraints', 'result', 'reason'
        ]

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for step in self.steps:
                writer.writerow(asdict(step))

        print(f"Trace written to {filepath} ({len(self.steps)} steps)")

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        action_counts = {}
        for step in self.steps:
            action_counts[step.action_type] = action_counts.get(step.action_type, 0) + 1

        results = [s.result for s in self.steps if s.action_type == 'check']
        return {
            'total_steps': len(self.steps),
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': action_counts,
            'num_checks': len(results),
            'last_result': results[-1] if results else None,
        }


# Global tracer instance
_global_tracer: Optional[Tracer] = None


def get_tracer() -> Tracer:
    """Get or create the global tracer."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = Tracer(enabled=True)
    return _global_tracer


def reset_tracer() -> None:
    """Reset the global tracer."""
    global _global_tracer
    _global_tracer = None


def enable_tracing(enabled: bool = True) -> None:
    """Enable or disable tracing."""
    get_tracer().enabled = enabled
