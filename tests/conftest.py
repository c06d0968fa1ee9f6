"""Shared fixtures for lambda-deploy tests"""

from pathlib import Path
from typing import List, Optional, Set

import pytest

from lambda_deploy.api.exceptions import DependencyInstallError, RemoteError
from lambda_deploy.backends import FunctionBackend, CallerIdentity, FunctionUpdate
from lambda_deploy.constants import DEFAULT_UNITS
from lambda_deploy.core import PathResolver, UnitCatalog, parse_requirements_file
from lambda_deploy.services import DeployReporter, DeployService, PackageService
from lambda_deploy.utils.process_utils import PipInstaller


class FakeBackend(FunctionBackend):
    """In-memory function service"""

    def __init__(self, missing: Optional[Set[str]] = None, authenticated: bool = True):
        super().__init__()
        self.missing = set(missing or ())
        self.authenticated = authenticated
        self.identity_calls: List[str] = []
        self.updates: List[dict] = []

    def get_identity(self, region: str) -> CallerIdentity:
        self.identity_calls.append(region)
        if not self.authenticated:
            raise RemoteError("Unable to locate credentials")
        return CallerIdentity(account="123456789012", arn="arn:aws:iam::123456789012:user/ci")

    def update_function_code(self, function_name, zip_bytes, region, publish=True) -> FunctionUpdate:
        if function_name in self.missing:
            raise RemoteError(
                f"update-function-code failed for {function_name}: "
                f"ResourceNotFoundException: Function not found",
                function_name=function_name,
            )
        self.updates.append({
            'name': function_name,
            'size': len(zip_bytes),
            'region': region,
            'publish': publish,
        })
        return FunctionUpdate(function_name=function_name, version=str(len(self.updates)))


class FakeInstaller(PipInstaller):
    """Installer that writes one stub package per requirement name"""

    def __init__(self, available: bool = True, fail: bool = False):
        super().__init__(python="python3")
        self.available = available
        self.fail = fail
        self.installs: List[dict] = []

    def is_available(self) -> bool:
        return self.available

    def install(self, requirements_file: Path, target_dir: Path,
                cwd: Optional[Path] = None) -> None:
        lines = parse_requirements_file(requirements_file)
        self.installs.append({
            'requirements': [line.text for line in lines],
            'target': target_dir,
            'cwd': cwd,
        })
        if self.fail:
            raise DependencyInstallError("pip install failed: No matching distribution", returncode=1)
        for line in lines:
            if line.name:
                package = target_dir / line.name.replace("-", "_")
                package.mkdir(parents=True, exist_ok=True)
                (package / "__init__.py").write_text(f"# {line.text}\n")


class RecordingReporter(DeployReporter):
    """Reporter that keeps every event"""

    def __init__(self):
        self.events = []

    def on_unit_start(self, unit):
        self.events.append(('start', unit.name))

    def on_step(self, unit, index, total, description):
        self.events.append(('step', unit.name, index))

    def on_warning(self, message):
        self.events.append(('warning', message))

    def on_outcome(self, outcome):
        self.events.append(('outcome', outcome.unit, outcome.status))

    def on_cleanup(self, path):
        self.events.append(('cleanup', path))

    @property
    def warnings(self):
        return [e[1] for e in self.events if e[0] == 'warning']


def make_unit_source(root: Path, name: str, requirements: Optional[str] = None) -> Path:
    source = root / "lambdas" / name
    source.mkdir(parents=True, exist_ok=True)
    (source / "lambda_function.py").write_text(
        "def lambda_handler(event, context):\n    return {'statusCode': 200}\n"
    )
    if requirements is not None:
        (source / "requirements.txt").write_text(requirements)
    return source


@pytest.fixture
def project(tmp_path, monkeypatch) -> Path:
    """Repository with a shared library tree and no function sources"""
    monkeypatch.delenv("PROJECT_ROOT", raising=False)
    root = tmp_path / "rfp-lambdas"
    (root / "lambdas").mkdir(parents=True)
    shared = root / "shared"
    shared.mkdir()
    (shared / "__init__.py").write_text("")
    (shared / "s3_utils.py").write_text("BUCKET = 'sam-data'\n")
    return root


@pytest.fixture
def full_project(project) -> Path:
    """Repository with all default function sources present"""
    for name in DEFAULT_UNITS:
        make_unit_source(project, name, requirements="requests==2.31.0\n")
    return project


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def installer() -> FakeInstaller:
    return FakeInstaller()


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def make_service(backend, installer, reporter):
    """Build a DeployService for a project root"""

    def _make(root: Path, catalog: Optional[UnitCatalog] = None) -> DeployService:
        resolver = PathResolver(root)
        package_service = PackageService(resolver, installer=installer, reporter=reporter)
        return DeployService(
            resolver,
            catalog or UnitCatalog.default(),
            backend,
            package_service=package_service,
            reporter=reporter,
        )

    return _make
