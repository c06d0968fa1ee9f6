"""External process helpers"""

import logging
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from ..api.exceptions import DependencyInstallError

logger = logging.getLogger(__name__)


def run_command(args: List[str],
                cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
    """
    Run a command and capture its output

    Args:
        args: Command and arguments
        cwd: Working directory

    Returns:
        Completed process; the caller checks returncode
    """
    logger.debug(f"Running: {' '.join(args)}")
    return subprocess.run(
        args,
        cwd=str(cwd) if cwd else None,
        capture_output=True,
        text=True,
        check=False,
    )


class PipInstaller:
    """Install dependencies into a target directory with pip"""

    def __init__(self, python: Optional[str] = None, quiet: bool = True):
        self.python = python or sys.executable
        self.quiet = quiet

    @property
    def base_command(self) -> List[str]:
        return [self.python, "-m", "pip"]

    def is_available(self) -> bool:
        """Check that pip can be invoked"""
        try:
            result = run_command(self.base_command + ["--version"])
        except OSError as e:
            logger.debug(f"pip probe failed: {e}")
            return False
        return result.returncode == 0

    def install(self, requirements_file: Path, target_dir: Path,
                cwd: Optional[Path] = None) -> None:
        """
        Install a requirements file into target_dir

        Relative paths inside the manifest resolve against cwd.

        Raises:
            DependencyInstallError: If pip exits non-zero
        """
        args = self.base_command + [
            "install",
            "-r", str(requirements_file),
            "-t", str(target_dir),
        ]
        if self.quiet:
            args.append("--quiet")

        try:
            result = run_command(args, cwd=cwd)
        except OSError as e:
            raise DependencyInstallError(f"Could not run pip: {e}")

        if result.returncode != 0:
            detail = (result.stderr or result.stdout or "").strip().splitlines()
            message = detail[-1] if detail else f"exit code {result.returncode}"
            raise DependencyInstallError(
                f"pip install failed for {requirements_file.name}: {message}",
                returncode=result.returncode,
            )
