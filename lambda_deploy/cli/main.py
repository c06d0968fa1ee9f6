# lambda_deploy/cli/main.py
"""Main CLI entry point for lambda-deploy"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.logging import RichHandler

from ..__version__ import __version__
from ..constants import APP_NAME, LOG_FORMAT
from ..core import ProjectManager
from .utils.output import console

# Import all commands
from .commands import (
    deploy,
    validate,
    units,
    doctor,
)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True,
    )

    # Adjust third-party loggers
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("boto3").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


class Context:
    """CLI context object with lazy project initialization

    The project manager is only created when a command asks for it, so
    commands like --help work outside a functions repository.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """Initialize CLI context"""
        self._project_root = project_root
        self._project_manager: Optional[ProjectManager] = None
        self.verbose: bool = False
        self.debug: bool = False

    @property
    def project_manager(self) -> ProjectManager:
        if self._project_manager is None:
            self._project_manager = ProjectManager(self._project_root)
            if self.debug:
                console.print(f"[dim]Project root: {self._project_manager.project_root}[/dim]")
        return self._project_manager

    @property
    def project_root(self) -> Path:
        return self.project_manager.project_root


@click.group(name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all log output except errors')
@click.option('--project-root', type=click.Path(file_okay=False, path_type=Path),
              help='Repository root (default: search upward from the current directory)')
@click.version_option(version=__version__, prog_name=APP_NAME)
@click.pass_context
def cli(ctx, verbose, debug, quiet, project_root):
    """Lambda Deploy - package and deploy Python Lambda functions

    Each function under lambdas/ is bundled with the shared/ library tree
    and its dependencies into a zip archive, then pushed to AWS Lambda
    with UpdateFunctionCode, publishing a new version.
    """
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(project_root)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


# Register commands
cli.add_command(deploy.deploy)
cli.add_command(validate.validate_contracts)
cli.add_command(units.units)
cli.add_command(doctor.doctor)


def main():
    """Main entry point for the CLI application

    click runs outside standalone mode; a Ctrl-C exits with 130.
    """
    try:
        rv = cli(prog_name=APP_NAME, standalone_mode=False)

    except click.Abort as e:
        if isinstance(e.__cause__, KeyboardInterrupt):
            console.print("\n[yellow]Operation cancelled by user[/yellow]")
            sys.exit(130)
        console.print("[yellow]Aborted[/yellow]")
        sys.exit(1)

    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)

    sys.exit(rv if isinstance(rv, int) else 0)


if __name__ == "__main__":
    main()
