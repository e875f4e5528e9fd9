"""Soft assertions for conformance checks.

A failed check is recorded, not raised, so one scenario can report every
violation it finds in a single run.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List

logger = logging.getLogger(__name__)


class FailureKind(Enum):
    """Category of a conformance violation."""

    MISSING_ACCESSOR = "missing_accessor"
    VALUE_MISMATCH = "value_mismatch"
    NOT_CHAINABLE = "not_chainable"
    INVALID_FLAG = "invalid_flag"
    MISSING_CAPABILITY = "missing_capability"
    UNEXPECTED_CAPABILITY = "unexpected_capability"
    INVALID_REQUEST = "invalid_request"
    INVALID_VALUE = "invalid_value"
    ERROR = "error"


@dataclass(frozen=True)
class CheckFailure:
    """A single recorded violation."""

    kind: FailureKind
    check: str
    message: str

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.check}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "check": self.check, "message": self.message}


class CheckRecorder:
    """Collects check outcomes for one scenario."""

    def __init__(self, scenario: str = ""):
        self.scenario = scenario
        self.failures: List[CheckFailure] = []
        self.checks_run = 0

    @property
    def passed(self) -> bool:
        return not self.failures

    def fail(self, kind: FailureKind, check: str, message: str) -> None:
        failure = CheckFailure(kind=kind, check=check, message=message)
        logger.debug("%s: %s", self.scenario or "check", failure)
        self.failures.append(failure)

    def check(self, condition: bool, kind: FailureKind, check: str, message: str) -> bool:
        """Record one check; return whether it held."""
        self.checks_run += 1
        if not condition:
            self.fail(kind, check, message)
            return False
        return True

    def check_same(self, expected: Any, actual: Any, check: str) -> bool:
        """Check equal value and identical type (a probe must come back unchanged)."""
        same = type(expected) is type(actual) and expected == actual
        return self.check(
            same,
            FailureKind.VALUE_MISMATCH,
            check,
            f"expected {expected!r}, got {actual!r}",
        )

    @contextmanager
    def guard(self, check: str) -> Iterator[None]:
        """Record an exception raised inside the block as an ERROR failure.

        The rest of the block is skipped; checks after the block still run.
        """
        try:
            yield
        except Exception as e:
            self.checks_run += 1
            self.fail(FailureKind.ERROR, check, f"{type(e).__name__}: {e}")
