"""Core functionality for lambda-deploy"""

from .path_resolver import PathResolver
from .project_manager import ProjectManager, ProjectConfig
from .unit_catalog import UnitCatalog
from .requirements import merge_requirements, parse_requirements_file, MergedRequirements
from .archive import ZipArchiver, ArchiveStats

__all__ = [
    "PathResolver",
    "ProjectManager",
    "ProjectConfig",
    "UnitCatalog",
    "merge_requirements",
    "parse_requirements_file",
    "MergedRequirements",
    "ZipArchiver",
    "ArchiveStats",
]
