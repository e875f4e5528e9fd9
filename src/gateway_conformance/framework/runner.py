"""Runs every conformance scenario against fresh gateway instances."""

import fnmatch
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..scenarios import build_scenarios
from ..scenarios.base import Scenario, ScenarioResult, ScenarioStatus
from .capability_matrix import CAPABILITY_MATRIX, CapabilityDescriptor
from .propagation import ParameterPropagationChecker, ProbeGenerator

logger = logging.getLogger(__name__)

GatewayFactory = Callable[[], Any]


@dataclass
class ConformanceReport:
    """Aggregate results of a conformance run."""

    gateway: str
    results: Dict[str, ScenarioResult] = field(default_factory=dict)
    duration_ms: float = 0.0

    def _count(self, status: ScenarioStatus) -> int:
        return sum(1 for r in self.results.values() if r.status == status)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return self._count(ScenarioStatus.PASS)

    @property
    def failed(self) -> int:
        return self._count(ScenarioStatus.FAIL)

    @property
    def errors(self) -> int:
        return self._count(ScenarioStatus.ERROR)

    @property
    def skipped(self) -> int:
        return self._count(ScenarioStatus.SKIP)

    @property
    def success(self) -> bool:
        """Whether no scenario failed or errored."""
        return self.failed == 0 and self.errors == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gateway": self.gateway,
            "success": self.success,
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "errors": self.errors,
            "skipped": self.skipped,
            "duration_ms": round(self.duration_ms, 3),
            "scenarios": {name: r.to_dict() for name, r in self.results.items()},
        }


def _matches_filter(name: str, patterns: Sequence[str]) -> bool:
    return any(fnmatch.fnmatch(name, p) for p in patterns)


class ConformanceRunner:
    """Coordinates gateway construction and scenario execution.

    A new gateway is built for every scenario, so scenario order never
    changes an outcome.
    """

    def __init__(
        self,
        gateway_factory: GatewayFactory,
        *,
        matrix: Sequence[CapabilityDescriptor] = CAPABILITY_MATRIX,
        probes: Optional[ProbeGenerator] = None,
        filter_patterns: Optional[Sequence[str]] = None,
        on_progress: Optional[Callable[[str, ScenarioResult], None]] = None,
    ):
        """
        Args:
            gateway_factory: Zero-argument callable returning a new gateway
            matrix: Capability catalog to check against
            probes: Probe generator shared by every scenario of the run
            filter_patterns: Glob patterns; non-matching scenarios are skipped
            on_progress: Called with (name, result) after each scenario
        """
        self.gateway_factory = gateway_factory
        self.checker = ParameterPropagationChecker(probes or ProbeGenerator())
        self.filter_patterns = list(filter_patterns or [])
        self.on_progress = on_progress
        self._scenarios = build_scenarios(self.checker, matrix)

    def scenarios(self) -> List[Scenario]:
        return list(self._scenarios)

    def get_scenario(self, name: str) -> Scenario:
        for scenario in self._scenarios:
            if scenario.name == name:
                return scenario
        raise KeyError(f"Unknown scenario: {name!r}")

    def run_scenario(self, scenario: Scenario) -> ScenarioResult:
        """Run a single scenario against a freshly built gateway."""
        try:
            gateway = self.gateway_factory()
        except Exception as e:
            return ScenarioResult(
                status=ScenarioStatus.ERROR,
                duration_ms=0.0,
                error_message=f"Gateway factory error: {type(e).__name__}: {e}",
            )

        result = scenario.execute(gateway)
        logger.debug("%s: %s", scenario.name, result)
        return result

    def run_named(self, name: str) -> ScenarioResult:
        return self.run_scenario(self.get_scenario(name))

    def run(self) -> ConformanceReport:
        """Run every scenario in order and collect a report."""
        report = ConformanceReport(gateway=self._gateway_label())
        start = time.perf_counter()

        for scenario in self._scenarios:
            if self.filter_patterns and not _matches_filter(scenario.name, self.filter_patterns):
                result = ScenarioResult(status=ScenarioStatus.SKIP, duration_ms=0.0)
            else:
                result = self.run_scenario(scenario)
            report.results[scenario.name] = result
            if self.on_progress:
                self.on_progress(scenario.name, result)

        report.duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s: %d passed, %d failed, %d errors, %d skipped",
            report.gateway,
            report.passed,
            report.failed,
            report.errors,
            report.skipped,
        )
        return report

    def _gateway_label(self) -> str:
        return getattr(self.gateway_factory, "__name__", None) or type(self.gateway_factory).__name__
