"""Configuration data models"""

from dataclasses import dataclass
from typing import Dict, Any

from ..constants import (
    DEFAULT_LAMBDAS_DIR,
    DEFAULT_SHARED_DIR,
    DEFAULT_TEMP_DIR,
    DEFAULT_REQUIREMENTS_FILE,
    DEFAULT_CONTRACTS_DIR,
    DEFAULT_OPENAPI_SPEC,
    DEFAULT_EVENTS_DIR,
    DEFAULT_EVENTS_SCHEMA,
    DEFAULT_ENVIRONMENT,
    DEFAULT_REGION,
)


@dataclass
class PathsConfig:
    """Project-relative locations used while packaging"""

    lambdas: str = DEFAULT_LAMBDAS_DIR
    shared: str = DEFAULT_SHARED_DIR
    temp: str = DEFAULT_TEMP_DIR
    requirements: str = DEFAULT_REQUIREMENTS_FILE
    contracts: str = DEFAULT_CONTRACTS_DIR

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PathsConfig':
        """Create from dictionary"""
        return cls(
            lambdas=data.get('lambdas', DEFAULT_LAMBDAS_DIR),
            shared=data.get('shared', DEFAULT_SHARED_DIR),
            temp=data.get('temp', DEFAULT_TEMP_DIR),
            requirements=data.get('requirements', DEFAULT_REQUIREMENTS_FILE),
            contracts=data.get('contracts', DEFAULT_CONTRACTS_DIR),
        )


@dataclass
class ContractsConfig:
    """Layout of the contract bundle, relative to the bundle root"""

    openapi: str = DEFAULT_OPENAPI_SPEC
    events_dir: str = DEFAULT_EVENTS_DIR
    events_schema: str = DEFAULT_EVENTS_SCHEMA

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ContractsConfig':
        """Create from dictionary"""
        return cls(
            openapi=data.get('openapi', DEFAULT_OPENAPI_SPEC),
            events_dir=data.get('events_dir', DEFAULT_EVENTS_DIR),
            events_schema=data.get('events_schema', DEFAULT_EVENTS_SCHEMA),
        )


@dataclass
class DefaultsConfig:
    """Fallback values for command-line options"""

    environment: str = DEFAULT_ENVIRONMENT
    region: str = DEFAULT_REGION

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DefaultsConfig':
        """Create from dictionary"""
        return cls(
            environment=data.get('environment', DEFAULT_ENVIRONMENT),
            region=data.get('region', DEFAULT_REGION),
        )
