"""Contract bundle validation"""

import json
import logging
from pathlib import Path
from typing import Optional

from jsonschema.exceptions import SchemaError
from jsonschema.validators import validator_for

from ..constants import MSG_CONTRACTS_NOT_FOUND, SCHEMA_FILE_SUFFIX
from ..core import PathResolver
from ..models import ContractReport, ContractsConfig

logger = logging.getLogger(__name__)


class ContractService:
    """Check that the contract bundle is present and its schemas parse

    Checks run in order and stop at the first fatal failure, so a missing
    bundle is reported without attempting to parse anything.
    """

    def __init__(self, path_resolver: PathResolver, config: Optional[ContractsConfig] = None):
        self.path_resolver = path_resolver
        self.config = config or ContractsConfig()

    @property
    def bundle_dir(self) -> Path:
        return self.path_resolver.get_contracts_dir()

    def validate(self, check_schema: bool = False) -> ContractReport:
        """
        Validate the contract bundle

        Args:
            check_schema: Also verify that each document is a valid JSON Schema

        Returns:
            ContractReport; report.exit_code is 1 on any fatal failure
        """
        report = ContractReport()

        if not self.bundle_dir.is_dir():
            report.add_error("Contracts bundle", MSG_CONTRACTS_NOT_FOUND)
            return report
        report.add_success("Contracts bundle", "Contracts submodule present")

        openapi = self.bundle_dir / self.config.openapi
        if not openapi.is_file():
            report.add_error("OpenAPI spec", f"OpenAPI spec not found: {self.config.openapi}")
            return report
        report.add_success("OpenAPI spec", "OpenAPI spec found")

        events_dir = self.bundle_dir / self.config.events_dir
        if (events_dir / self.config.events_schema).is_file():
            report.add_success("Event schemas", "Event schemas found")
        else:
            report.add_warning("Event schemas", "Event schemas not found")

        if not events_dir.is_dir():
            report.add_warning("Schema documents", "No event schemas directory found")
            return report

        self.validate_documents(events_dir, report, check_schema)
        return report

    def validate_documents(self, events_dir: Path, report: ContractReport,
                           check_schema: bool = False) -> ContractReport:
        """Parse every schema document in events_dir, stopping at the first bad one"""
        documents = sorted(
            p for p in events_dir.iterdir()
            if p.is_file() and p.name.endswith(SCHEMA_FILE_SUFFIX)
        )

        for path in documents:
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    document = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                report.add_error(path.name, f"{path.name} has invalid JSON: {e}")
                return report

            if check_schema:
                if not isinstance(document, (dict, bool)):
                    report.add_error(path.name, f"{path.name} is not a JSON Schema object")
                    return report
                try:
                    validator_for(document).check_schema(document)
                except SchemaError as e:
                    report.add_error(path.name, f"{path.name} is not a valid JSON Schema: {e.message}")
                    return report

            logger.debug(f"Parsed {path}")
            report.add_success(path.name, f"{path.name} is valid JSON")

        return report
