"""Services for lambda-deploy"""

from .reporter import DeployReporter
from .package_service import PackageService
from .deploy_service import DeployService
from .contract_service import ContractService

__all__ = [
    "DeployReporter",
    "PackageService",
    "DeployService",
    "ContractService",
]
