"""Baseline scenarios that do not depend on the capability catalog."""

from collections.abc import Mapping

from ..framework.checks import CheckRecorder, FailureKind
from ..framework.parameters import ParameterDescriptorSet
from ..framework.propagation import ParameterPropagationChecker
from .base import Scenario


def _accessor(gateway, checks: CheckRecorder, check: str, name: str):
    method = getattr(gateway, name, None)
    if checks.check(
        callable(method),
        FailureKind.MISSING_ACCESSOR,
        check,
        f"gateway must implement {name}()",
    ):
        return method
    return None


class _NonEmptyStringScenario(Scenario):
    accessor = ""

    def run(self, gateway, checks: CheckRecorder) -> None:
        getter = _accessor(gateway, checks, self.name, self.accessor)
        if getter is None:
            return
        with checks.guard(self.name):
            value = getter()
            checks.check(
                isinstance(value, str) and bool(value),
                FailureKind.INVALID_VALUE,
                self.name,
                f"{self.accessor}() must return a non-empty string, got {value!r}",
            )


class NameScenario(_NonEmptyStringScenario):
    """Gateway name is a non-empty string."""

    accessor = "get_name"

    @property
    def name(self) -> str:
        return "name"

    @property
    def description(self) -> str:
        return "get_name() is a non-empty string"


class ShortNameScenario(_NonEmptyStringScenario):
    """Gateway short name is a non-empty string."""

    accessor = "get_short_name"

    @property
    def name(self) -> str:
        return "short_name"

    @property
    def description(self) -> str:
        return "get_short_name() is a non-empty string"


class DefaultParametersScenario(Scenario):
    """Default parameters are an ordered mapping keyed by strings."""

    @property
    def name(self) -> str:
        return "default_parameters"

    @property
    def description(self) -> str:
        return "get_default_parameters() returns an ordered mapping"

    def run(self, gateway, checks: CheckRecorder) -> None:
        getter = _accessor(gateway, checks, self.name, "get_default_parameters")
        if getter is None:
            return
        with checks.guard(self.name):
            defaults = getter()
            if not checks.check(
                isinstance(defaults, Mapping),
                FailureKind.INVALID_VALUE,
                self.name,
                f"expected a mapping, got {type(defaults).__name__}",
            ):
                return
            for key in defaults:
                checks.check(
                    isinstance(key, str) and bool(key),
                    FailureKind.INVALID_VALUE,
                    self.name,
                    f"parameter keys must be non-empty strings, got {key!r}",
                )
            # Order is part of the contract: two reads must agree.
            checks.check(
                list(getter()) == list(defaults),
                FailureKind.INVALID_VALUE,
                self.name,
                "default parameter order is not stable between calls",
            )


class ParameterAccessorsScenario(Scenario):
    """Every default parameter has a chainable setter and a matching getter."""

    def __init__(self, checker: ParameterPropagationChecker):
        self.checker = checker

    @property
    def name(self) -> str:
        return "parameter_accessors"

    @property
    def description(self) -> str:
        return "Default parameters round-trip through their accessors"

    def run(self, gateway, checks: CheckRecorder) -> None:
        with checks.guard(self.name):
            descriptors = ParameterDescriptorSet.from_gateway(gateway, self.checker.resolver)
            self.checker.check_round_trip(gateway, descriptors, checks)


class TestModeScenario(Scenario):
    """Test mode setter chains and both booleans round-trip."""

    # Not a pytest test class despite the name.
    __test__ = False

    @property
    def name(self) -> str:
        return "test_mode"

    @property
    def description(self) -> str:
        return "set_test_mode()/get_test_mode() round-trip"

    def run(self, gateway, checks: CheckRecorder) -> None:
        setter = _accessor(gateway, checks, self.name, "set_test_mode")
        getter = _accessor(gateway, checks, self.name, "get_test_mode")
        if setter is None or getter is None:
            return
        for value in (False, True):
            label = f"test_mode={value}"
            with checks.guard(label):
                checks.check(
                    setter(value) is gateway,
                    FailureKind.NOT_CHAINABLE,
                    label,
                    "set_test_mode() must return the gateway itself",
                )
                checks.check_same(value, getter(), label)


class CurrencyScenario(Scenario):
    """Currency is stored uppercase and the setter chains."""

    @property
    def name(self) -> str:
        return "currency"

    @property
    def description(self) -> str:
        return "set_currency('eur') stores 'EUR'"

    def run(self, gateway, checks: CheckRecorder) -> None:
        setter = _accessor(gateway, checks, self.name, "set_currency")
        getter = _accessor(gateway, checks, self.name, "get_currency")
        if setter is None or getter is None:
            return
        with checks.guard(self.name):
            checks.check(
                setter("eur") is gateway,
                FailureKind.NOT_CHAINABLE,
                self.name,
                "set_currency() must return the gateway itself",
            )
            checks.check_same("EUR", getter(), self.name)
