"""Per-node outcome reporting."""

from rich.console import Console

from clear_conditions.logging_config import get_logger
from clear_conditions.models.run import NodeOutcome, Outcome, RunReport

logger = get_logger(__name__)


class RunReporter:
    """Records outcomes and prints one line per node as they happen."""

    def __init__(self, console: Console, interactive: bool = True):
        self.console = console
        self.interactive = interactive
        self.report = RunReport()

    def cleared(self, node: str) -> None:
        self._emit(NodeOutcome(node=node, outcome=Outcome.CLEARED))

    def failed(self, node: str, error: str | None = None) -> None:
        self._emit(NodeOutcome(node=node, outcome=Outcome.FAILED, error=error))

    def finish(self) -> RunReport:
        """Close the run; prints the closing marker in interactive mode."""
        if self.interactive:
            self.console.print("Done.")
        return self.report

    def _emit(self, outcome: NodeOutcome) -> None:
        self.report.record(outcome)
        # soft_wrap keeps each line whole on narrow or non-terminal consoles
        self.console.print(str(outcome), markup=False, highlight=False, soft_wrap=True)
