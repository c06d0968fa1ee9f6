"""Tests for project discovery, configuration and region resolution"""

import pytest

from lambda_deploy.api.deployer import Deployer, resolve_region
from lambda_deploy.api.exceptions import ConfigError, ProjectNotFoundError
from lambda_deploy.core import PathResolver, ProjectManager

from .conftest import FakeBackend, FakeInstaller


CONFIG = """\
version: "1.0"
project:
  name: rfp-lambdas
paths:
  shared: common
defaults:
  environment: staging
  region: eu-west-1
units:
  - sam-json-processor
  - name: sam-email-notification
    source: functions/email
"""


@pytest.fixture
def clear_region(monkeypatch):
    for var in ("AWS_REGION", "REGION"):
        monkeypatch.delenv(var, raising=False)


class TestProjectManager:

    def test_defaults_without_config_file(self, project):
        config = ProjectManager(project).load_config()

        assert config.paths.lambdas == "lambdas"
        assert config.defaults.region == "us-east-1"
        assert config.units is None

    def test_config_file_loaded(self, project):
        (project / ".lambda-deploy.yaml").write_text(CONFIG)

        manager = ProjectManager(project)
        config = manager.load_config()

        assert config.name == "rfp-lambdas"
        assert config.defaults.environment == "staging"
        assert config.units == [
            {'name': 'sam-json-processor'},
            {'name': 'sam-email-notification', 'source': 'functions/email'},
        ]
        assert manager.get_path_resolver().get_shared_dir() == project.resolve() / "common"

    def test_invalid_yaml_is_config_error(self, project):
        (project / ".lambda-deploy.yaml").write_text("paths: [unclosed\n")

        with pytest.raises(ConfigError):
            ProjectManager(project).load_config()

    def test_units_must_be_a_list(self, project):
        (project / ".lambda-deploy.yaml").write_text("units: sam-json-processor\n")

        with pytest.raises(ConfigError, match="'units' must be a list"):
            ProjectManager(project).load_config()


class TestFindProjectRoot:

    def test_walks_up_to_marker(self, project):
        nested = project / "lambdas" / "sam-json-processor"
        nested.mkdir(parents=True)

        assert PathResolver.find_project_root(nested) == project.resolve()

    def test_environment_variable_wins(self, project, tmp_path, monkeypatch):
        monkeypatch.setenv("PROJECT_ROOT", str(tmp_path))

        assert PathResolver.find_project_root(project) == tmp_path.resolve()

    def test_not_found(self, tmp_path, monkeypatch):
        monkeypatch.delenv("PROJECT_ROOT", raising=False)
        empty = tmp_path / "empty"
        empty.mkdir()

        if any((p / "lambdas").exists() or (p / ".lambda-deploy.yaml").exists() for p in empty.parents):
            pytest.skip("a parent directory looks like a project")
        with pytest.raises(ProjectNotFoundError):
            PathResolver.find_project_root(empty)


class TestRegionResolution:

    def test_explicit_region_wins(self, monkeypatch):
        monkeypatch.setenv("AWS_REGION", "eu-central-1")

        assert resolve_region("ap-south-1", "us-east-1") == "ap-south-1"

    def test_aws_region_before_region(self, monkeypatch):
        monkeypatch.setenv("AWS_REGION", "eu-central-1")
        monkeypatch.setenv("REGION", "us-west-2")

        assert resolve_region(None, "us-east-1") == "eu-central-1"

    def test_region_variable_used(self, clear_region, monkeypatch):
        monkeypatch.setenv("REGION", "us-west-2")

        assert resolve_region(None, "us-east-1") == "us-west-2"

    def test_config_default_last(self, project, clear_region):
        (project / ".lambda-deploy.yaml").write_text(CONFIG)

        deployer = Deployer(project, backend=FakeBackend(), installer=FakeInstaller())

        assert deployer.resolve_region() == "eu-west-1"

    def test_deployer_uses_configured_catalog(self, project, clear_region):
        (project / ".lambda-deploy.yaml").write_text(CONFIG)

        deployer = Deployer(project, backend=FakeBackend(), installer=FakeInstaller())

        assert deployer.catalog.names == ["sam-json-processor", "sam-email-notification"]
        assert deployer.catalog.get("sam-email-notification").source_dir == "functions/email"
