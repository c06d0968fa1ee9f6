"""Tests for the sequential deployment flow"""

import shutil
import zipfile

import pytest

from lambda_deploy.api.exceptions import PrerequisiteError
from lambda_deploy.constants import DEFAULT_UNITS, HINT_CREATE_FUNCTION, ErrorCode
from lambda_deploy.core import PathResolver, UnitCatalog
from lambda_deploy.models import UnitStatus
from lambda_deploy.services import DeployService, PackageService

from .conftest import FakeBackend, FakeInstaller


class TestDeployService:

    def test_all_units_deployed(self, full_project, make_service, backend):
        summary = make_service(full_project).deploy("dev", region="us-east-1")

        assert summary.successful_count == 8
        assert summary.exit_code == 0
        assert [u['name'] for u in backend.updates] == DEFAULT_UNITS
        assert all(u['publish'] for u in backend.updates)
        assert {u['region'] for u in backend.updates} == {"us-east-1"}

    def test_missing_sources_are_counted_as_failures(self, full_project, make_service, backend):
        shutil.rmtree(full_project / "lambdas" / "sam-produce-user-report")
        shutil.rmtree(full_project / "lambdas" / "sam-produce-web-reports")

        summary = make_service(full_project).deploy("dev")

        assert summary.successful_count == 6
        assert summary.failed_count == 2
        assert summary.failed_units == ["sam-produce-user-report", "sam-produce-web-reports"]
        assert summary.exit_code == 1
        assert len(backend.updates) == 6

        skipped = summary.outcome_for("sam-produce-user-report")
        assert skipped.status == UnitStatus.SKIPPED
        assert skipped.error_code == ErrorCode.SOURCE_NOT_FOUND

    def test_single_unit(self, full_project, make_service, backend):
        summary = make_service(full_project).deploy("dev", unit_name="sam-json-processor")

        assert [o.unit for o in summary.outcomes] == ["sam-json-processor"]
        assert summary.exit_code == 0
        assert backend.updates[0]['name'] == "sam-json-processor"
        assert summary.outcomes[0].function_version == "1"

    def test_temp_root_removed_after_run(self, full_project, make_service):
        service = make_service(full_project)

        service.deploy("dev", unit_name="sam-json-processor")

        assert not (full_project / "temp_packages").exists()

    def test_remote_failure_does_not_stop_later_units(self, full_project, make_service, reporter):
        service = make_service(full_project)
        service.backend = FakeBackend(missing={"sam-gov-daily-download"})

        summary = service.deploy("dev")

        failed = summary.outcome_for("sam-gov-daily-download")
        assert failed.status == UnitStatus.DEPLOY_FAILED
        assert failed.hint == HINT_CREATE_FUNCTION
        assert "ResourceNotFoundException" in failed.message
        assert summary.successful_count == 7
        assert summary.outcome_for("sam-json-processor").status == UnitStatus.DEPLOYED

    def test_install_failure_is_package_failed(self, full_project, backend, reporter):
        resolver = PathResolver(full_project)
        service = DeployService(
            resolver,
            UnitCatalog.default(),
            backend,
            package_service=PackageService(resolver, installer=FakeInstaller(fail=True), reporter=reporter),
            reporter=reporter,
        )

        summary = service.deploy("dev", unit_name="sam-json-processor")

        outcome = summary.outcomes[0]
        assert outcome.status == UnitStatus.PACKAGE_FAILED
        assert outcome.error_code == ErrorCode.DEPENDENCY_INSTALL_FAILED
        assert backend.updates == []
        assert not (full_project / "temp_packages").exists()

    def test_missing_credentials_abort_before_any_unit(self, full_project, make_service, reporter):
        service = make_service(full_project)
        service.backend = FakeBackend(authenticated=False)

        with pytest.raises(PrerequisiteError, match="aws configure"):
            service.deploy("dev")

        assert not any(e[0] == 'start' for e in reporter.events)
        assert service.backend.updates == []

    def test_missing_installer_aborts(self, full_project, make_service, installer):
        installer.available = False

        with pytest.raises(PrerequisiteError, match="pip"):
            make_service(full_project).deploy("dev")

    def test_dry_run_packages_without_remote_calls(self, full_project, make_service, backend):
        summary = make_service(full_project).deploy("dev", dry_run=True)

        assert backend.identity_calls == []
        assert backend.updates == []
        assert summary.successful_count == 8
        assert {o.status for o in summary.outcomes} == {UnitStatus.PACKAGED}

    def test_keep_artifacts_copies_archive(self, full_project, make_service, tmp_path):
        artifacts = tmp_path / "artifacts"

        make_service(full_project).deploy(
            "dev", unit_name="sam-json-processor", dry_run=True, keep_artifacts=artifacts
        )

        archive = artifacts / "sam-json-processor.zip"
        assert zipfile.is_zipfile(archive)
        assert not (full_project / "temp_packages").exists()

    def test_configured_catalog_is_used(self, full_project, make_service, backend):
        catalog = UnitCatalog.from_config([{'name': 'sam-json-processor'}, {'name': 'sam-email-notification'}])

        summary = make_service(full_project, catalog=catalog).deploy("dev")

        assert [o.unit for o in summary.outcomes] == ["sam-json-processor", "sam-email-notification"]

    def test_undecodable_manifest_fails_only_that_unit(self, full_project, make_service, backend):
        manifest = full_project / "lambdas" / "sam-gov-daily-download" / "requirements.txt"
        manifest.write_bytes(b"requests==2.31.0  # caf\xe9\n")

        summary = make_service(full_project).deploy("dev")

        outcome = summary.outcome_for("sam-gov-daily-download")
        assert outcome.status == UnitStatus.PACKAGE_FAILED
        assert "not valid UTF-8" in outcome.message
        assert summary.failed_units == ["sam-gov-daily-download"]
        assert [u['name'] for u in backend.updates] == DEFAULT_UNITS[1:]

    def test_temp_root_removed_when_unexpected_error_escapes(self, full_project, make_service):
        class BrokenBackend(FakeBackend):
            def update_function_code(self, function_name, zip_bytes, region, publish=True):
                raise RuntimeError("connection pool exhausted")

        service = make_service(full_project)
        service.backend = BrokenBackend()

        with pytest.raises(RuntimeError):
            service.deploy("dev")

        assert not (full_project / "temp_packages").exists()
