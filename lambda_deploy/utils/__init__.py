"""Utility functions for lambda-deploy"""

from .file_utils import (
    calculate_file_checksum,
    format_size,
    remove_path,
    reset_directory,
    merge_tree,
)

from .process_utils import (
    run_command,
    PipInstaller,
)

__all__ = [
    "calculate_file_checksum",
    "format_size",
    "remove_path",
    "reset_directory",
    "merge_tree",
    "run_command",
    "PipInstaller",
]
