"""Data models for lambda-deploy"""

from .unit import UnitSpec
from .result import (
    UnitStatus,
    UnitOutcome,
    DeploymentSummary,
    CheckLevel,
    CheckResult,
    ContractReport,
)
from .config import PathsConfig, ContractsConfig, DefaultsConfig

__all__ = [
    # Unit models
    "UnitSpec",

    # Result models
    "UnitStatus",
    "UnitOutcome",
    "DeploymentSummary",
    "CheckLevel",
    "CheckResult",
    "ContractReport",

    # Config models
    "PathsConfig",
    "ContractsConfig",
    "DefaultsConfig",
]
