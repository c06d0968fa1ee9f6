"""Deploy service implementation"""

import logging
import shutil
import time
from pathlib import Path
from typing import List, Optional

from ..api.exceptions import PackageError, PrerequisiteError, RemoteError
from ..backends import FunctionBackend, CallerIdentity
from ..constants import (
    DEFAULT_ENVIRONMENT,
    DEFAULT_REGION,
    HINT_CREATE_FUNCTION,
    MSG_SOURCE_NOT_FOUND,
    PACKAGE_STEPS,
    ErrorCode,
)
from ..core import PathResolver, UnitCatalog
from ..models import UnitSpec, UnitStatus, UnitOutcome, DeploymentSummary
from ..utils.file_utils import remove_path
from .package_service import PackageService
from .reporter import DeployReporter

logger = logging.getLogger(__name__)


class DeployService:
    """Package and deploy units one after another

    Units are processed strictly in order. Every per-unit failure is turned
    into a UnitOutcome so a later unit is never skipped because an earlier
    one failed. Only pre-flight failures abort the run.
    """

    def __init__(self,
                 path_resolver: PathResolver,
                 catalog: UnitCatalog,
                 backend: FunctionBackend,
                 package_service: Optional[PackageService] = None,
                 reporter: Optional[DeployReporter] = None):
        """
        Initialize deploy service

        Args:
            path_resolver: Path resolver instance
            catalog: Units available for deployment
            backend: Remote function service
            package_service: Package service (created from path_resolver if omitted)
            reporter: Progress event receiver
        """
        self.path_resolver = path_resolver
        self.catalog = catalog
        self.backend = backend
        self.reporter = reporter or DeployReporter()
        self.package_service = package_service or PackageService(path_resolver, reporter=self.reporter)

    @property
    def temp_root(self) -> Path:
        return self.path_resolver.get_temp_dir()

    def check_prerequisites(self, region: str, dry_run: bool = False) -> Optional[CallerIdentity]:
        """
        Verify tools and credentials before touching any unit

        Args:
            region: Service region for the identity probe
            dry_run: Skip the identity probe

        Returns:
            Authenticated identity, or None in dry-run mode

        Raises:
            PrerequisiteError: If the installer or the identity probe fails
        """
        if not self.package_service.installer.is_available():
            raise PrerequisiteError("pip not found. Install pip for the current Python interpreter.")

        if dry_run:
            logger.info("Dry run: skipping credential check")
            return None

        try:
            identity = self.backend.get_identity(region)
        except RemoteError as e:
            raise PrerequisiteError(f"{e}. Run 'aws configure'")

        logger.info(f"Authenticated as {identity.arn}")
        return identity

    def deploy_unit(self,
                    unit: UnitSpec,
                    region: str,
                    dry_run: bool = False,
                    keep_artifacts: Optional[Path] = None) -> UnitOutcome:
        """
        Package and deploy a single unit

        Args:
            unit: Unit to process
            region: Service region
            dry_run: Package only, skip the remote call
            keep_artifacts: Directory to copy the archive into

        Returns:
            The unit's terminal outcome; never raises for per-unit failures
        """
        start_time = time.time()
        self.reporter.on_unit_start(unit)

        source_dir = unit.source_path(self.path_resolver.project_root)
        if not source_dir.is_dir():
            relative = self.path_resolver.make_relative(source_dir)
            return self._finish(UnitOutcome(
                unit=unit.name,
                status=UnitStatus.SKIPPED,
                message=MSG_SOURCE_NOT_FOUND.format(path=relative),
                error_code=ErrorCode.SOURCE_NOT_FOUND,
                duration=time.time() - start_time,
                dry_run=dry_run,
            ))

        try:
            stats = self.package_service.package(unit)
            if keep_artifacts:
                keep_artifacts.mkdir(parents=True, exist_ok=True)
                shutil.copy2(stats.path, keep_artifacts / stats.path.name)
            zip_bytes = stats.path.read_bytes()
        except PackageError as e:
            return self._finish(UnitOutcome(
                unit=unit.name,
                status=UnitStatus.PACKAGE_FAILED,
                message=str(e),
                error_code=e.error_code,
                duration=time.time() - start_time,
                dry_run=dry_run,
            ))
        except OSError as e:
            return self._finish(UnitOutcome(
                unit=unit.name,
                status=UnitStatus.PACKAGE_FAILED,
                message=f"Packaging {unit.name} failed: {e}",
                error_code=ErrorCode.PACKAGE_FAILED,
                duration=time.time() - start_time,
                dry_run=dry_run,
            ))

        if dry_run:
            return self._finish(UnitOutcome(
                unit=unit.name,
                status=UnitStatus.PACKAGED,
                message="Packaged (dry run, not deployed)",
                archive_size=stats.archive_size,
                checksum=stats.checksum,
                duration=time.time() - start_time,
                dry_run=True,
            ))

        self.reporter.on_step(unit, len(PACKAGE_STEPS), len(PACKAGE_STEPS), PACKAGE_STEPS[-1])
        try:
            update = self.backend.update_function_code(unit.name, zip_bytes, region, publish=True)
        except RemoteError as e:
            return self._finish(UnitOutcome(
                unit=unit.name,
                status=UnitStatus.DEPLOY_FAILED,
                message=str(e),
                hint=HINT_CREATE_FUNCTION,
                error_code=e.error_code,
                archive_size=stats.archive_size,
                checksum=stats.checksum,
                duration=time.time() - start_time,
            ))

        return self._finish(UnitOutcome(
            unit=unit.name,
            status=UnitStatus.DEPLOYED,
            message=f"Published version {update.version}" if update.version else "Deployed",
            archive_size=stats.archive_size,
            checksum=stats.checksum,
            function_version=update.version,
            duration=time.time() - start_time,
        ))

    def _finish(self, outcome: UnitOutcome) -> UnitOutcome:
        if outcome.succeeded:
            logger.info(f"{outcome.unit}: {outcome.status.value}")
        else:
            logger.warning(f"{outcome.unit}: {outcome.status.value}: {outcome.message}")
        self.reporter.on_outcome(outcome)
        return outcome

    def deploy(self,
               environment: str = DEFAULT_ENVIRONMENT,
               unit_name: Optional[str] = None,
               region: str = DEFAULT_REGION,
               dry_run: bool = False,
               keep_artifacts: Optional[Path] = None,
               skip_prerequisites: bool = False) -> DeploymentSummary:
        """
        Run the full deployment

        Args:
            environment: Environment label
            unit_name: Restrict the run to one unit
            region: Service region
            dry_run: Package only, skip credentials and remote calls
            keep_artifacts: Directory to copy archives into before cleanup
            skip_prerequisites: Do not run pre-flight checks

        Returns:
            DeploymentSummary with one outcome per unit in scope

        Raises:
            PrerequisiteError: If pre-flight checks fail; no unit is touched
        """
        units = self.select_units(unit_name)

        if not skip_prerequisites:
            self.check_prerequisites(region, dry_run=dry_run)

        summary = DeploymentSummary(environment=environment, region=region)
        self.temp_root.mkdir(parents=True, exist_ok=True)

        try:
            for unit in units:
                summary = summary.record(
                    self.deploy_unit(unit, region, dry_run=dry_run, keep_artifacts=keep_artifacts)
                )
        finally:
            self.cleanup()

        return summary

    def select_units(self, unit_name: Optional[str] = None) -> List[UnitSpec]:
        return self.catalog.select(unit_name)

    def cleanup(self) -> None:
        """Remove the temporary packaging root"""
        self.reporter.on_cleanup(self.temp_root)
        if remove_path(self.temp_root):
            logger.debug(f"Removed {self.temp_root}")
