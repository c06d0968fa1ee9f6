"""Lambda Deploy - package Python function sources and push them to AWS Lambda.

This tool assembles each function's source, the shared library tree and
its dependencies into a zip archive, uploads it with UpdateFunctionCode,
and validates the external contract bundle the functions conform to.
"""

from .__version__ import __version__, __version_info__, __license__

from .api.exceptions import (
    LambdaDeployError,
    ConfigError,
    ProjectNotFoundError,
    PrerequisiteError,
    PackageError,
    DependencyInstallError,
    RemoteError,
)

# Core API
from .api.deployer import Deployer, deploy
from .api.validator import validate_contracts

# Data models
from .models import (
    UnitSpec,
    UnitStatus,
    UnitOutcome,
    DeploymentSummary,
    ContractReport,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__license__",

    # Main classes
    "Deployer",

    # Core API functions
    "deploy",
    "validate_contracts",

    # Data models
    "UnitSpec",
    "UnitStatus",
    "UnitOutcome",
    "DeploymentSummary",
    "ContractReport",

    # Exceptions
    "LambdaDeployError",
    "ConfigError",
    "ProjectNotFoundError",
    "PrerequisiteError",
    "PackageError",
    "DependencyInstallError",
    "RemoteError",
]
