"""Path resolution module for lambda-deploy"""

import os
from pathlib import Path
from typing import Optional, Union

from ..api.exceptions import ProjectNotFoundError
from ..constants import ENV_PROJECT_ROOT, PROJECT_MARKERS
from ..models.config import PathsConfig


class PathResolver:
    """Resolves paths within a functions repository"""

    def __init__(self, project_root: Union[str, Path], paths: Optional[PathsConfig] = None):
        """Initialize path resolver

        Args:
            project_root: Root directory of the project
            paths: Configured project-relative locations
        """
        self.project_root = Path(project_root).resolve()
        self.paths = paths or PathsConfig()

    @staticmethod
    def find_project_root(start_path: Optional[Path] = None) -> Path:
        """Find the project root by walking up from start_path

        The PROJECT_ROOT environment variable takes precedence over the search.

        Raises:
            ProjectNotFoundError: If no marker is found up to the filesystem root
        """
        env_root = os.environ.get(ENV_PROJECT_ROOT)
        if env_root:
            return Path(env_root).resolve()

        current = Path(start_path or Path.cwd()).resolve()

        for candidate in [current, *current.parents]:
            if any((candidate / marker).exists() for marker in PROJECT_MARKERS):
                return candidate

        raise ProjectNotFoundError()

    def resolve(self, path: Union[str, Path]) -> Path:
        """Resolve a path relative to project root

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Resolved absolute path
        """
        path = Path(path)

        if path.is_absolute():
            return path

        return (self.project_root / path).resolve()

    def get_lambdas_dir(self) -> Path:
        return self.resolve(self.paths.lambdas)

    def get_shared_dir(self) -> Path:
        return self.resolve(self.paths.shared)

    def get_temp_dir(self) -> Path:
        """Get the temporary packaging root"""
        return self.resolve(self.paths.temp)

    def get_base_requirements(self) -> Optional[Path]:
        """Get the root-level dependency manifest if present"""
        path = self.resolve(self.paths.requirements)
        return path if path.is_file() else None

    def get_contracts_dir(self) -> Path:
        return self.resolve(self.paths.contracts)

    def make_relative(self, path: Union[str, Path]) -> Path:
        """Make a path relative to project root

        Args:
            path: Path to make relative

        Returns:
            Relative path, or the path unchanged if it is outside the project
        """
        path = Path(path).resolve()

        try:
            return path.relative_to(self.project_root)
        except ValueError:
            return path
