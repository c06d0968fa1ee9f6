"""Contract validation command"""

import sys

import click

from ..utils.output import console, format_contract_report, print_error
from ...api.exceptions import LambdaDeployError
from ...constants import EMOJI_SEARCH, EMOJI_SUCCESS
from ...core import ProjectManager
from ...services import ContractService


@click.command(name='validate-contracts')
@click.option('--check-schema', is_flag=True,
              help='Also check every event schema against its JSON Schema metaschema')
@click.pass_context
def validate_contracts(ctx, check_schema):
    """Validate the API contract bundle

    Checks that the contracts submodule is present, that the OpenAPI spec
    exists, and that every *.schema.json event schema is valid JSON.

    Examples:

        lambda-deploy validate-contracts

        lambda-deploy validate-contracts --check-schema
    """
    try:
        project_manager: ProjectManager = ctx.obj.project_manager
        config = project_manager.load_config()
        service = ContractService(project_manager.get_path_resolver(), config.contracts)

        name = config.name or project_manager.project_root.name
        console.print(f"{EMOJI_SEARCH} Validating API contracts for {name}...", markup=False)

        report = service.validate(check_schema=check_schema)
        format_contract_report(report)

        if report.passed:
            console.print()
            console.print(f"{EMOJI_SUCCESS} Contract validation complete!")

        sys.exit(report.exit_code)

    except LambdaDeployError as e:
        print_error(str(e))
        sys.exit(1)
