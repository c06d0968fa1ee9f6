"""Progress hooks for long-running services"""

from pathlib import Path

from ..models import UnitSpec, UnitOutcome


class DeployReporter:
    """Receives progress events from the deploy and package services

    The base class ignores every event. The CLI subclasses it to print
    status lines; tests subclass it to record what happened.
    """

    def on_unit_start(self, unit: UnitSpec) -> None:
        pass

    def on_step(self, unit: UnitSpec, index: int, total: int, description: str) -> None:
        pass

    def on_warning(self, message: str) -> None:
        pass

    def on_outcome(self, outcome: UnitOutcome) -> None:
        pass

    def on_cleanup(self, path: Path) -> None:
        pass
