"""Deploy command implementation"""

import sys
from pathlib import Path

import click

from ..utils.output import (
    console,
    ConsoleReporter,
    format_summary,
    print_header,
    print_info,
    print_success,
    print_error,
)
from ...api import Deployer
from ...api.exceptions import LambdaDeployError


@click.command()
@click.argument('environment', required=False)
@click.argument('unit', required=False)
@click.option('--region', help='AWS region (default: $AWS_REGION, $REGION, then config)')
@click.option('--dry-run', is_flag=True, help='Package only; skip credentials check and upload')
@click.option('--keep-artifacts', type=click.Path(file_okay=False, path_type=Path),
              help='Copy built archives into this directory before cleanup')
@click.pass_context
def deploy(ctx, environment, unit, region, dry_run, keep_artifacts):
    """Package and deploy Lambda functions

    ENVIRONMENT defaults to "dev". UNIT restricts the run to one function;
    without it every configured function is deployed.

    Each function is packaged with the shared libraries and its
    dependencies, then uploaded with UpdateFunctionCode and a new version
    is published. A failure in one function does not stop the others;
    the command exits with status 1 if any function failed.

    Examples:

        # Deploy all functions to dev
        lambda-deploy deploy dev

        # Deploy all functions to prod
        lambda-deploy deploy prod

        # Deploy a single function
        lambda-deploy deploy dev sam-json-processor
    """
    try:
        deployer = Deployer(project_root=ctx.obj.project_root, reporter=ConsoleReporter())
        environment = environment or deployer.config.defaults.environment
        resolved_region = deployer.resolve_region(region)
        units = deployer.deploy_service.select_units(unit)

        print_header("RFP LAMBDA FUNCTIONS DEPLOYMENT")
        console.print(f"Environment: {environment}", markup=False)
        console.print(f"Region: {resolved_region}", markup=False)
        console.print(f"Functions: {len(units)}")
        if dry_run:
            console.print("[yellow]Dry run: archives are built but not uploaded[/yellow]")
        console.print()

        print_info("Checking prerequisites...")
        deployer.deploy_service.check_prerequisites(resolved_region, dry_run=dry_run)
        print_success("Prerequisites check passed!")

        summary = deployer.deploy_service.deploy(
            environment=environment,
            unit_name=unit,
            region=resolved_region,
            dry_run=dry_run,
            keep_artifacts=keep_artifacts.resolve() if keep_artifacts else None,
            skip_prerequisites=True,
        )

        format_summary(summary)
        sys.exit(summary.exit_code)

    except LambdaDeployError as e:
        print_error(str(e))
        sys.exit(1)
