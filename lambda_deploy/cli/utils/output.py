"""Output formatting utilities"""

from pathlib import Path
from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ...constants import (
    EMOJI_SUCCESS,
    EMOJI_ERROR,
    EMOJI_WARNING,
    EMOJI_PARTY,
    MSG_DEPLOY_SUCCESS,
    MSG_DEPLOY_FAILED,
)
from ...models import (
    UnitSpec,
    UnitStatus,
    UnitOutcome,
    DeploymentSummary,
    ContractReport,
    CheckLevel,
)
from ...services import DeployReporter
from ...utils.file_utils import format_size

console = Console()


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red][ERROR][/red] {escape(message)}: {escape(str(error))}")
    else:
        console.print(f"[red][ERROR][/red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print warning message"""
    console.print(f"[yellow][WARNING][/yellow] {escape(message)}")


def print_info(message: str) -> None:
    """Print info message"""
    console.print(f"[blue][INFO][/blue] {escape(message)}")


def print_success(message: str) -> None:
    """Print success message"""
    console.print(f"[green][SUCCESS][/green] {escape(message)}")


def print_header(title: str) -> None:
    console.print()
    console.print(Panel(f"[bold]{title}[/bold]", box=box.DOUBLE, expand=False, padding=(0, 5)))
    console.print()


class ConsoleReporter(DeployReporter):
    """Print deployment progress as status-prefixed lines"""

    def on_unit_start(self, unit: UnitSpec) -> None:
        print_info(f"Processing: {unit.name}")

    def on_step(self, unit: UnitSpec, index: int, total: int, description: str) -> None:
        console.print(f"  [{index}/{total}] {description}", markup=False)

    def on_warning(self, message: str) -> None:
        print_warning(message)

    def on_outcome(self, outcome: UnitOutcome) -> None:
        if outcome.status == UnitStatus.DEPLOYED:
            print_success(MSG_DEPLOY_SUCCESS.format(unit=outcome.unit))
        elif outcome.status == UnitStatus.PACKAGED:
            size = format_size(outcome.archive_size or 0)
            print_success(f"{EMOJI_SUCCESS} Packaged: {outcome.unit} ({size})")
        elif outcome.status == UnitStatus.DEPLOY_FAILED:
            print_error(MSG_DEPLOY_FAILED.format(unit=outcome.unit))
            console.print(f"   {outcome.message}", markup=False, style="dim")
            if outcome.hint:
                print_warning(f"   {outcome.hint}")
        else:
            print_error(outcome.message)
        console.print()

    def on_cleanup(self, path: Path) -> None:
        print_info("Cleaning up temporary files...")


def format_summary(summary: DeploymentSummary) -> None:
    """Format and display the deployment summary"""
    print_header("DEPLOYMENT SUMMARY")

    console.print(f"{EMOJI_SUCCESS} Successful: {summary.successful_count}")
    console.print(f"{EMOJI_ERROR} Failed: {summary.failed_count}")

    if summary.outcomes:
        table = Table(box=box.SIMPLE)
        table.add_column("Function", style="cyan")
        table.add_column("Status")
        table.add_column("Version", justify="right")
        table.add_column("Size", justify="right", style="dim")

        for outcome in summary.outcomes:
            style = "green" if outcome.succeeded else "red"
            table.add_row(
                outcome.unit,
                f"[{style}]{outcome.status.value}[/{style}]",
                outcome.function_version or "-",
                format_size(outcome.archive_size) if outcome.archive_size is not None else "-",
            )
        console.print(table)

    if summary.failed_units:
        console.print()
        console.print("Failed functions:")
        for name in summary.failed_units:
            console.print(f"  - {name}", markup=False)
        console.print()
        print_warning("Some functions failed to deploy. Check that they exist in AWS Lambda.")
    elif summary.outcomes and all(o.status == UnitStatus.PACKAGED for o in summary.outcomes):
        console.print()
        print_success(f"{EMOJI_SUCCESS} All Lambda functions packaged (dry run, nothing uploaded)")
        console.print()
    else:
        console.print()
        print_success(f"{EMOJI_PARTY} All Lambda functions deployed successfully!")
        console.print()


def format_contract_report(report: ContractReport) -> None:
    """Format and display contract validation checks"""
    for check in report.checks:
        if check.passed:
            console.print(f"{EMOJI_SUCCESS} {check.message}", markup=False)
        elif check.level == CheckLevel.WARNING:
            console.print(f"{EMOJI_WARNING}  {check.message}", markup=False)
        else:
            console.print(f"{EMOJI_ERROR} {check.message}", markup=False)
