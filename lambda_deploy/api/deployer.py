"""Deployer API for deployment operations"""

import os
from pathlib import Path
from typing import Optional, Union

from ..backends import FunctionBackend, LambdaBackend
from ..constants import ENV_REGION_VARS
from ..core import ProjectManager, UnitCatalog
from ..models import DeploymentSummary
from ..services import DeployService, PackageService, DeployReporter
from ..utils.process_utils import PipInstaller


def resolve_region(region: Optional[str] = None, default: Optional[str] = None) -> str:
    """Pick the region: explicit value, then environment, then config default"""
    if region:
        return region

    for var in ENV_REGION_VARS:
        value = os.environ.get(var)
        if value:
            return value

    return default


class Deployer:
    """Deployer class for deployment operations"""

    def __init__(self,
                 project_root: Optional[Union[str, Path]] = None,
                 backend: Optional[FunctionBackend] = None,
                 installer: Optional[PipInstaller] = None,
                 reporter: Optional[DeployReporter] = None):
        """
        Initialize deployer

        Args:
            project_root: Repository root (searched for if omitted)
            backend: Remote function service (AWS Lambda if omitted)
            installer: Dependency installer
            reporter: Progress event receiver
        """
        self.project_manager = ProjectManager(project_root)
        self.config = self.project_manager.load_config()
        self.path_resolver = self.project_manager.get_path_resolver()
        self.catalog = UnitCatalog.from_config(self.config.units, self.config.paths.lambdas)
        self.backend = backend or LambdaBackend()
        self.reporter = reporter or DeployReporter()

        self.package_service = PackageService(
            self.path_resolver,
            installer=installer,
            reporter=self.reporter,
        )
        self.deploy_service = DeployService(
            self.path_resolver,
            self.catalog,
            self.backend,
            package_service=self.package_service,
            reporter=self.reporter,
        )

    def resolve_region(self, region: Optional[str] = None) -> str:
        return resolve_region(region, self.config.defaults.region)

    def deploy(self,
               environment: Optional[str] = None,
               unit_name: Optional[str] = None,
               region: Optional[str] = None,
               dry_run: bool = False,
               keep_artifacts: Optional[Union[str, Path]] = None) -> DeploymentSummary:
        """
        Package and deploy units

        Args:
            environment: Environment label (config default if omitted)
            unit_name: Restrict the run to one unit
            region: Service region (environment or config default if omitted)
            dry_run: Package only
            keep_artifacts: Directory to copy archives into

        Returns:
            DeploymentSummary

        Raises:
            PrerequisiteError: If pre-flight checks fail
        """
        return self.deploy_service.deploy(
            environment=environment or self.config.defaults.environment,
            unit_name=unit_name,
            region=self.resolve_region(region),
            dry_run=dry_run,
            keep_artifacts=Path(keep_artifacts).resolve() if keep_artifacts else None,
        )


def deploy(environment: Optional[str] = None,
           unit_name: Optional[str] = None,
           region: Optional[str] = None,
           project_root: Optional[Union[str, Path]] = None,
           dry_run: bool = False) -> DeploymentSummary:
    """
    Convenience function for deployment

    Example:
        summary = deploy("dev", "sam-json-processor")
        if not summary.success:
            print(summary.failed_units)
    """
    deployer = Deployer(project_root=project_root)
    return deployer.deploy(
        environment=environment,
        unit_name=unit_name,
        region=region,
        dry_run=dry_run,
    )
