"""System diagnostic command"""

import sys

import click
from rich import box
from rich.table import Table

from ..utils.output import console
from ...api import resolve_region
from ...api.exceptions import RemoteError
from ...backends import LambdaBackend
from ...core import UnitCatalog
from ...utils.process_utils import PipInstaller


class DiagnosticCheck:
    """Base class for diagnostic checks"""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.passed = False
        self.message = ""

    def run(self, ctx) -> 'DiagnosticCheck':
        """Run the diagnostic check"""
        raise NotImplementedError


class PipCheck(DiagnosticCheck):
    """Check that the dependency installer is callable"""

    def __init__(self):
        super().__init__("Installer", "Verify pip can be invoked")

    def run(self, ctx):
        installer = PipInstaller()
        if installer.is_available():
            self.passed = True
            self.message = f"pip available for {installer.python}"
        else:
            self.passed = False
            self.message = "pip not found"
        return self


class CredentialsCheck(DiagnosticCheck):
    """Check AWS credentials"""

    def __init__(self):
        super().__init__("AWS Credentials", "Verify sts:GetCallerIdentity succeeds")

    def run(self, ctx):
        config = ctx.obj.project_manager.load_config()
        region = resolve_region(None, config.defaults.region)
        try:
            identity = LambdaBackend().get_identity(region)
        except RemoteError as e:
            self.passed = False
            self.message = f"{e}. Run 'aws configure'"
            return self

        self.passed = True
        self.message = f"{identity.arn} ({region})"
        return self


class LayoutCheck(DiagnosticCheck):
    """Check the repository layout"""

    def __init__(self):
        super().__init__("Project Layout", "Verify function sources and shared libraries exist")

    def run(self, ctx):
        project_manager = ctx.obj.project_manager
        config = project_manager.load_config()
        resolver = project_manager.get_path_resolver()
        catalog = UnitCatalog.from_config(config.units, config.paths.lambdas)

        missing = [u.name for u in catalog if not u.source_path(resolver.project_root).is_dir()]
        issues = []
        if not resolver.get_lambdas_dir().is_dir():
            issues.append(f"Missing functions directory: {config.paths.lambdas}")
        if missing:
            issues.append(f"Missing sources: {', '.join(missing)}")
        if not resolver.get_shared_dir().is_dir():
            issues.append(f"Missing shared directory: {config.paths.shared}")

        if issues:
            self.passed = False
            self.message = "; ".join(issues)
        else:
            self.passed = True
            self.message = f"All {len(catalog)} function sources present"
        return self


@click.command()
@click.option('--check', multiple=True,
              type=click.Choice(['all', 'installer', 'credentials', 'layout']),
              default=['all'],
              help='Specific checks to run')
@click.pass_context
def doctor(ctx, check):
    """Run pre-flight diagnostics

    Runs the same checks as the deploy command's pre-flight step, plus a
    layout check, and reports them in one table.

    Examples:

        # Run all checks
        lambda-deploy doctor

        # Only check credentials
        lambda-deploy doctor --check credentials
    """
    console.print("[bold]Lambda Deploy Diagnostics[/bold]\n")

    all_checks = {
        'installer': PipCheck(),
        'credentials': CredentialsCheck(),
        'layout': LayoutCheck(),
    }

    if 'all' in check:
        checks_to_run = list(all_checks.values())
    else:
        checks_to_run = [all_checks[c] for c in check if c in all_checks]

    failed_checks = []
    for diagnostic_check in checks_to_run:
        diagnostic_check.run(ctx)
        if not diagnostic_check.passed:
            failed_checks.append(diagnostic_check)

    table = Table(title="Diagnostic Results", box=box.ROUNDED)
    table.add_column("Check", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Details")

    for diagnostic_check in checks_to_run:
        status = "[green]✓ PASS[/green]" if diagnostic_check.passed else "[red]✗ FAIL[/red]"
        table.add_row(diagnostic_check.name, status, diagnostic_check.message)

    console.print(table)

    if failed_checks:
        console.print(f"\n[red]{len(failed_checks)} check(s) failed[/red]")
        sys.exit(1)

    console.print("\n[green]All checks passed![/green]")
