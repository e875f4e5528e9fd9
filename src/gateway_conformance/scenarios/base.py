"""Base classes for conformance scenarios."""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..framework.checks import CheckFailure, CheckRecorder


class ScenarioStatus(Enum):
    """Status of scenario execution."""

    PASS = "pass"
    FAIL = "fail"
    ERROR = "error"
    SKIP = "skip"


@dataclass
class ScenarioResult:
    """Result of scenario execution."""

    status: ScenarioStatus
    duration_ms: float
    error_message: Optional[str] = None
    failures: List[CheckFailure] = field(default_factory=list)
    checks_run: int = 0

    def __str__(self) -> str:
        status_str = self.status.value.upper()
        duration_str = f"{self.duration_ms:.2f}ms"

        if self.status in (ScenarioStatus.PASS, ScenarioStatus.SKIP):
            return f"✓ {status_str} ({duration_str})"
        elif self.error_message:
            return f"✗ {status_str} ({duration_str}): {self.error_message}"
        else:
            return f"✗ {status_str} ({duration_str})"

    def describe_failures(self) -> str:
        lines = [str(self)]
        lines.extend(f"  - {failure}" for failure in self.failures)
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "duration_ms": round(self.duration_ms, 3),
            "error_message": self.error_message,
            "checks_run": self.checks_run,
            "failures": [f.to_dict() for f in self.failures],
        }


class Scenario(ABC):
    """Base class for all conformance scenarios."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique scenario name."""
        pass

    @property
    def description(self) -> str:
        """Human-readable description."""
        return self.name

    @abstractmethod
    def run(self, gateway, checks: CheckRecorder) -> None:
        """Run every check of this scenario against ``gateway``."""
        pass

    def execute(self, gateway) -> ScenarioResult:
        """Execute scenario and return result."""
        checks = CheckRecorder(self.name)
        return self._timed_execute(lambda: self.run(gateway, checks), checks)

    def _timed_execute(self, func, checks: CheckRecorder) -> ScenarioResult:
        """Execute function and measure duration."""
        start = time.perf_counter()
        try:
            func()
        except AssertionError as e:
            duration_ms = (time.perf_counter() - start) * 1000
            return ScenarioResult(
                status=ScenarioStatus.FAIL,
                duration_ms=duration_ms,
                error_message=str(e),
                failures=checks.failures,
                checks_run=checks.checks_run,
            )
        except Exception as e:
            duration_ms = (time.perf_counter() - start) * 1000
            return ScenarioResult(
                status=ScenarioStatus.ERROR,
                duration_ms=duration_ms,
                error_message=f"{type(e).__name__}: {str(e)}",
                failures=checks.failures,
                checks_run=checks.checks_run,
            )

        duration_ms = (time.perf_counter() - start) * 1000
        if checks.failures:
            count = len(checks.failures)
            return ScenarioResult(
                status=ScenarioStatus.FAIL,
                duration_ms=duration_ms,
                error_message=f"{count} check{'s' if count != 1 else ''} failed",
                failures=checks.failures,
                checks_run=checks.checks_run,
            )
        return ScenarioResult(
            status=ScenarioStatus.PASS,
            duration_ms=duration_ms,
            checks_run=checks.checks_run,
        )
