"""Project configuration loading"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Dict, Any, List

import yaml

from .path_resolver import PathResolver
from ..api.exceptions import ConfigError, ProjectNotFoundError
from ..constants import PROJECT_CONFIG_FILE, CONFIG_VERSION
from ..models.config import PathsConfig, ContractsConfig, DefaultsConfig

logger = logging.getLogger(__name__)


@dataclass
class ProjectConfig:
    """Project configuration data model

    This represents the configuration stored in .lambda-deploy.yaml.
    Every section is optional; a repository without the file gets the
    defaults of the rfp-lambdas layout.
    """
    name: str = ""
    version: str = CONFIG_VERSION
    paths: PathsConfig = field(default_factory=PathsConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    contracts: ContractsConfig = field(default_factory=ContractsConfig)
    units: Optional[List[Dict[str, Any]]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProjectConfig':
        """Create ProjectConfig from dictionary

        Args:
            data: Configuration dictionary

        Returns:
            ProjectConfig instance
        """
        if not isinstance(data, dict):
            raise ConfigError("Project configuration must be a mapping")

        project_data = data.get('project') or {}
        units = data.get('units')
        if units is not None and not isinstance(units, list):
            raise ConfigError("'units' must be a list")

        return cls(
            name=project_data.get('name', ''),
            version=str(data.get('version', CONFIG_VERSION)),
            paths=PathsConfig.from_dict(data.get('paths') or {}),
            defaults=DefaultsConfig.from_dict(data.get('defaults') or {}),
            contracts=ContractsConfig.from_dict(data.get('contracts') or {}),
            units=[u if isinstance(u, dict) else {'name': u} for u in units] if units else units,
        )


class ProjectManager:
    """Locate the project root and load its configuration"""

    def __init__(self, project_root: Optional[Path] = None):
        """Initialize project manager

        Args:
            project_root: Explicit project root. If not provided, it is
                          searched for lazily when needed.
        """
        self._project_root = Path(project_root).resolve() if project_root else None
        self._config: Optional[ProjectConfig] = None

    @property
    def project_root(self) -> Path:
        if self._project_root is None:
            try:
                self._project_root = PathResolver.find_project_root()
            except ProjectNotFoundError:
                logger.debug("No project markers found, using current directory")
                self._project_root = Path.cwd().resolve()
        return self._project_root

    @property
    def config_path(self) -> Path:
        return self.project_root / PROJECT_CONFIG_FILE

    def load_config(self) -> ProjectConfig:
        """Load project configuration

        Returns:
            Parsed configuration, or defaults when no config file exists

        Raises:
            ConfigError: If the file exists but cannot be parsed
        """
        if self._config is not None:
            return self._config

        if not self.config_path.exists():
            logger.debug(f"No {PROJECT_CONFIG_FILE} in {self.project_root}, using defaults")
            self._config = ProjectConfig()
            return self._config

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_path}: {e}")

        self._config = ProjectConfig.from_dict(data)
        logger.info(f"Loaded project configuration from {self.config_path}")
        return self._config

    def get_path_resolver(self) -> PathResolver:
        return PathResolver(self.project_root, self.load_config().paths)
