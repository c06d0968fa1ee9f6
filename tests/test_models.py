"""Tests for result models"""

import pytest

from lambda_deploy.models import DeploymentSummary, UnitOutcome, UnitStatus


def test_record_returns_new_summary():
    empty = DeploymentSummary(environment="dev", region="us-east-1")

    summary = empty.record(UnitOutcome("sam-json-processor", UnitStatus.DEPLOYED))

    assert empty.outcomes == ()
    assert summary.successful_count == 1


def test_unit_recorded_once():
    summary = DeploymentSummary("dev", "us-east-1").record(
        UnitOutcome("sam-json-processor", UnitStatus.DEPLOYED)
    )

    with pytest.raises(ValueError):
        summary.record(UnitOutcome("sam-json-processor", UnitStatus.DEPLOY_FAILED))


def test_packaged_counts_only_in_dry_run():
    assert UnitOutcome("a", UnitStatus.PACKAGED, dry_run=True).succeeded
    assert not UnitOutcome("a", UnitStatus.PACKAGED).succeeded


def test_to_dict_lists_failures():
    summary = (DeploymentSummary("prod", "eu-west-1")
               .record(UnitOutcome("a", UnitStatus.DEPLOYED, function_version="3"))
               .record(UnitOutcome("b", UnitStatus.SKIPPED, message="Source directory not found")))

    data = summary.to_dict()

    assert data['successful'] == 1
    assert data['failed_units'] == ["b"]
    assert data['outcomes'][0]['function_version'] == "3"
    assert summary.exit_code == 1
