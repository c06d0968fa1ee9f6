"""Contract validation API"""

from pathlib import Path
from typing import Optional, Union

from ..core import ProjectManager
from ..models import ContractReport
from ..services import ContractService


def validate_contracts(project_root: Optional[Union[str, Path]] = None,
                       check_schema: bool = False) -> ContractReport:
    """
    Validate the contract bundle of a project

    Args:
        project_root: Repository root (searched for if omitted)
        check_schema: Also check each document against its JSON Schema metaschema

    Returns:
        ContractReport
    """
    project_manager = ProjectManager(project_root)
    config = project_manager.load_config()
    service = ContractService(project_manager.get_path_resolver(), config.contracts)
    return service.validate(check_schema=check_schema)
