"""Operation result models"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Any, Tuple


class UnitStatus(Enum):
    """Per-unit processing state"""
    PENDING = "pending"
    SKIPPED = "skipped"
    PACKAGING = "packaging"
    PACKAGE_FAILED = "package_failed"
    PACKAGED = "packaged"
    DEPLOYED = "deployed"
    DEPLOY_FAILED = "deploy_failed"

    @property
    def is_terminal(self) -> bool:
        return self not in (UnitStatus.PENDING, UnitStatus.PACKAGING)


@dataclass(frozen=True)
class UnitOutcome:
    """Terminal result of processing one unit"""

    unit: str
    status: UnitStatus
    message: str = ""
    hint: Optional[str] = None
    error_code: Optional[str] = None
    archive_size: Optional[int] = None
    checksum: Optional[str] = None
    function_version: Optional[str] = None
    duration: float = 0.0
    dry_run: bool = False

    @property
    def succeeded(self) -> bool:
        if self.status == UnitStatus.DEPLOYED:
            return True
        return self.dry_run and self.status == UnitStatus.PACKAGED

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            'unit': self.unit,
            'status': self.status.value,
            'succeeded': self.succeeded,
            'duration': self.duration,
        }

        if self.message:
            data['message'] = self.message
        if self.hint:
            data['hint'] = self.hint
        if self.error_code:
            data['error_code'] = self.error_code
        if self.archive_size is not None:
            data['archive_size'] = self.archive_size
        if self.checksum:
            data['checksum'] = self.checksum
        if self.function_version:
            data['function_version'] = self.function_version

        return data


@dataclass(frozen=True)
class DeploymentSummary:
    """Accumulated outcomes of one deployment run

    The summary never mutates. ``record`` returns a new summary so the
    per-unit loop can thread it through as a plain value.
    """

    environment: str
    region: str
    outcomes: Tuple[UnitOutcome, ...] = ()

    def record(self, outcome: UnitOutcome) -> 'DeploymentSummary':
        if not outcome.status.is_terminal:
            raise ValueError(f"Cannot record non-terminal status {outcome.status.value} for {outcome.unit}")
        if any(o.unit == outcome.unit for o in self.outcomes):
            raise ValueError(f"Outcome already recorded for unit: {outcome.unit}")
        return replace(self, outcomes=self.outcomes + (outcome,))

    @property
    def successful_count(self) -> int:
        return sum(1 for o in self.outcomes if o.succeeded)

    @property
    def failed_count(self) -> int:
        return sum(1 for o in self.outcomes if not o.succeeded)

    @property
    def failed_units(self) -> List[str]:
        return [o.unit for o in self.outcomes if not o.succeeded]

    @property
    def success(self) -> bool:
        return self.failed_count == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1

    def outcome_for(self, unit: str) -> Optional[UnitOutcome]:
        for outcome in self.outcomes:
            if outcome.unit == unit:
                return outcome
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'environment': self.environment,
            'region': self.region,
            'successful': self.successful_count,
            'failed': self.failed_count,
            'failed_units': self.failed_units,
            'outcomes': [o.to_dict() for o in self.outcomes],
        }


class CheckLevel(Enum):
    """Severity of a failed check"""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class CheckResult:
    """Outcome of checking a single contract artifact"""
    name: str
    passed: bool
    message: str
    level: CheckLevel = CheckLevel.ERROR

    @property
    def is_fatal(self) -> bool:
        return not self.passed and self.level == CheckLevel.ERROR


@dataclass
class ContractReport:
    """Aggregated contract validation result"""
    checks: List[CheckResult] = field(default_factory=list)

    def add(self, check: CheckResult) -> CheckResult:
        self.checks.append(check)
        return check

    def add_success(self, name: str, message: str) -> CheckResult:
        return self.add(CheckResult(name, True, message, CheckLevel.INFO))

    def add_warning(self, name: str, message: str) -> CheckResult:
        return self.add(CheckResult(name, False, message, CheckLevel.WARNING))

    def add_error(self, name: str, message: str) -> CheckResult:
        return self.add(CheckResult(name, False, message, CheckLevel.ERROR))

    @property
    def errors(self) -> List[CheckResult]:
        return [c for c in self.checks if c.is_fatal]

    @property
    def warnings(self) -> List[CheckResult]:
        return [c for c in self.checks if not c.passed and c.level == CheckLevel.WARNING]

    @property
    def passed(self) -> bool:
        return not self.errors

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1
