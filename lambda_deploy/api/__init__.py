"""Public API for lambda-deploy"""

from .exceptions import (
    LambdaDeployError,
    ConfigError,
    ProjectNotFoundError,
    PrerequisiteError,
    PackageError,
    DependencyInstallError,
    RemoteError,
)
from .deployer import Deployer, deploy, resolve_region
from .validator import validate_contracts

__all__ = [
    # Classes
    "Deployer",

    # Functions
    "deploy",
    "resolve_region",
    "validate_contracts",

    # Exceptions
    "LambdaDeployError",
    "ConfigError",
    "ProjectNotFoundError",
    "PrerequisiteError",
    "PackageError",
    "DependencyInstallError",
    "RemoteError",
]
