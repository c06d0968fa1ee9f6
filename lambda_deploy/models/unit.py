"""Deployable unit model"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional

from ..constants import (
    ARCHIVE_EXTENSION,
    DEFAULT_LAMBDAS_DIR,
    DEFAULT_REQUIREMENTS_FILE,
    UNIT_NAME_PATTERN,
)


@dataclass(frozen=True)
class UnitSpec:
    """One independently deployable function

    Attributes:
        name: Function name, also used as the remote function name
        source_dir: Source directory, relative to the project root
        requirements: Dependency manifest file name inside source_dir
    """
    name: str
    source_dir: str
    requirements: str = DEFAULT_REQUIREMENTS_FILE

    def __post_init__(self):
        if not self.name:
            raise ValueError("Unit name cannot be empty")
        if not UNIT_NAME_PATTERN.match(self.name):
            raise ValueError(f"Invalid unit name: '{self.name}'")

    @classmethod
    def for_name(cls, name: str, lambdas_dir: str = DEFAULT_LAMBDAS_DIR) -> 'UnitSpec':
        """Create a unit using the conventional <lambdas>/<name> layout"""
        return cls(name=name, source_dir=f"{lambdas_dir}/{name}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any],
                  lambdas_dir: str = DEFAULT_LAMBDAS_DIR) -> 'UnitSpec':
        """Create from dictionary"""
        name = data.get('name')
        if not name:
            raise ValueError("Unit entry requires 'name'")

        return cls(
            name=name,
            source_dir=data.get('source') or f"{lambdas_dir}/{name}",
            requirements=data.get('requirements') or DEFAULT_REQUIREMENTS_FILE,
        )

    def source_path(self, project_root: Path) -> Path:
        return Path(project_root) / self.source_dir

    def requirements_path(self, project_root: Path) -> Optional[Path]:
        """Unit dependency manifest, or None if the unit declares none"""
        path = self.source_path(project_root) / self.requirements
        return path if path.is_file() else None

    def package_dir(self, temp_root: Path) -> Path:
        return Path(temp_root) / self.name

    def archive_path(self, temp_root: Path) -> Path:
        return Path(temp_root) / f"{self.name}{ARCHIVE_EXTENSION}"
