"""Unit listing command"""

import sys

import click
from rich import box
from rich.table import Table

from ..utils.output import console, print_error
from ...api.exceptions import LambdaDeployError
from ...core import UnitCatalog


@click.command()
@click.pass_context
def units(ctx):
    """List the configured Lambda functions

    Shows every function in the catalog with its source directory and
    whether the source and dependency manifest exist.
    """
    try:
        project_manager = ctx.obj.project_manager
        config = project_manager.load_config()
        catalog = UnitCatalog.from_config(config.units, config.paths.lambdas)
        root = project_manager.project_root

        table = Table(title="Lambda Functions", box=box.ROUNDED)
        table.add_column("Function", style="cyan", no_wrap=True)
        table.add_column("Source")
        table.add_column("Present", justify="center")
        table.add_column("Requirements", justify="center")

        for unit in catalog:
            present = unit.source_path(root).is_dir()
            has_requirements = unit.requirements_path(root) is not None
            table.add_row(
                unit.name,
                unit.source_dir,
                "[green]✓[/green]" if present else "[red]✗[/red]",
                "✓" if has_requirements else "-",
            )

        console.print(table)

    except LambdaDeployError as e:
        print_error(str(e))
        sys.exit(1)
