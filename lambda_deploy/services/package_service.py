"""Package service implementation"""

import logging
from pathlib import Path
from typing import Optional

from ..api.exceptions import PackageError
from ..constants import PACKAGE_STEPS, MERGED_REQUIREMENTS_SUFFIX, MSG_SOURCE_NOT_FOUND, ErrorCode
from ..core import PathResolver, ZipArchiver, ArchiveStats, merge_requirements
from ..models import UnitSpec
from ..utils.file_utils import remove_path, reset_directory, merge_tree
from ..utils.process_utils import PipInstaller
from .reporter import DeployReporter

logger = logging.getLogger(__name__)


class PackageService:
    """Assemble a unit's package directory and compress it"""

    def __init__(self,
                 path_resolver: PathResolver,
                 installer: Optional[PipInstaller] = None,
                 archiver: Optional[ZipArchiver] = None,
                 reporter: Optional[DeployReporter] = None):
        """
        Initialize package service

        Args:
            path_resolver: Path resolver instance
            installer: Dependency installer
            archiver: Zip archiver
            reporter: Progress event receiver
        """
        self.path_resolver = path_resolver
        self.installer = installer or PipInstaller()
        self.archiver = archiver or ZipArchiver()
        self.reporter = reporter or DeployReporter()

    @property
    def temp_root(self) -> Path:
        return self.path_resolver.get_temp_dir()

    def _step(self, unit: UnitSpec, index: int) -> None:
        description = PACKAGE_STEPS[index - 1]
        logger.debug(f"{unit.name}: [{index}/{len(PACKAGE_STEPS)}] {description}")
        self.reporter.on_step(unit, index, len(PACKAGE_STEPS), description)

    def clean(self, unit: UnitSpec) -> None:
        """Remove any package directory and archive left by a previous run"""
        remove_path(unit.package_dir(self.temp_root))
        remove_path(unit.archive_path(self.temp_root))
        remove_path(self.temp_root / f"{unit.name}{MERGED_REQUIREMENTS_SUFFIX}")

    def package(self, unit: UnitSpec) -> ArchiveStats:
        """
        Build the deployment archive for one unit

        Args:
            unit: Unit to package; its source directory must exist

        Returns:
            ArchiveStats of the created archive

        Raises:
            PackageError: If any packaging step fails
        """
        source_dir = unit.source_path(self.path_resolver.project_root)
        if not source_dir.is_dir():
            raise PackageError(
                MSG_SOURCE_NOT_FOUND.format(path=self.path_resolver.make_relative(source_dir)),
                ErrorCode.SOURCE_NOT_FOUND,
            )

        package_dir = unit.package_dir(self.temp_root)
        archive_path = unit.archive_path(self.temp_root)

        try:
            self.clean(unit)
            reset_directory(package_dir)

            self._step(unit, 1)
            merge_tree(source_dir, package_dir)

            self._step(unit, 2)
            shared_dir = self.path_resolver.get_shared_dir()
            if shared_dir.is_dir():
                merge_tree(shared_dir, package_dir / shared_dir.name)
            else:
                self.reporter.on_warning(f"Shared directory not found: {self.path_resolver.paths.shared}")

            self._step(unit, 3)
            self.install_dependencies(unit, package_dir)

            self._step(unit, 4)
            return self.archiver.build(package_dir, archive_path)

        except PackageError:
            raise
        except (OSError, ValueError) as e:
            raise PackageError(f"Packaging {unit.name} failed: {e}")

    def install_dependencies(self, unit: UnitSpec, package_dir: Path) -> None:
        """Install unit and shared dependencies into package_dir

        Both manifests are merged into one file so a single installer run
        sees them together; unit entries take precedence on a name clash.
        """
        unit_manifest = unit.requirements_path(self.path_resolver.project_root)
        shared_manifest = self.path_resolver.get_base_requirements()

        if unit_manifest is None:
            self.reporter.on_warning(f"No {unit.requirements} found for {unit.name}")

        merged = merge_requirements(unit_manifest, shared_manifest)
        if merged.is_empty():
            logger.debug(f"{unit.name}: no dependencies to install")
            return

        for name in merged.overridden:
            self.reporter.on_warning(
                f"{unit.name}: shared requirement '{name}' overridden by unit requirement"
            )

        merged_path = merged.write(self.temp_root / f"{unit.name}{MERGED_REQUIREMENTS_SUFFIX}")
        self.installer.install(merged_path, package_dir, cwd=self.path_resolver.project_root)
