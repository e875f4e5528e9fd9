"""Conformance scenarios."""

from typing import List, Optional, Sequence

from ..framework.capability_matrix import CAPABILITY_MATRIX, CapabilityDescriptor
from ..framework.propagation import ParameterPropagationChecker
from .base import Scenario, ScenarioResult, ScenarioStatus
from .baseline import (
    NameScenario,
    ShortNameScenario,
    DefaultParametersScenario,
    ParameterAccessorsScenario,
    TestModeScenario,
    CurrencyScenario,
)
from .capability import CapabilityScenario

BASELINE_SCENARIO_NAMES = [
    "name",
    "short_name",
    "default_parameters",
    "parameter_accessors",
    "test_mode",
    "currency",
]


def build_scenarios(
    checker: Optional[ParameterPropagationChecker] = None,
    matrix: Sequence[CapabilityDescriptor] = CAPABILITY_MATRIX,
) -> List[Scenario]:
    """Baseline scenarios followed by one scenario per capability, in catalog order."""
    checker = checker or ParameterPropagationChecker()
    scenarios: List[Scenario] = [
        NameScenario(),
        ShortNameScenario(),
        DefaultParametersScenario(),
        ParameterAccessorsScenario(checker),
        TestModeScenario(),
        CurrencyScenario(),
    ]
    scenarios.extend(CapabilityScenario(capability, checker) for capability in matrix)
    return scenarios


def scenario_names(matrix: Sequence[CapabilityDescriptor] = CAPABILITY_MATRIX) -> List[str]:
    return BASELINE_SCENARIO_NAMES + [capability.name for capability in matrix]


__all__ = [
    "Scenario",
    "ScenarioResult",
    "ScenarioStatus",
    "NameScenario",
    "ShortNameScenario",
    "DefaultParametersScenario",
    "ParameterAccessorsScenario",
    "TestModeScenario",
    "CurrencyScenario",
    "CapabilityScenario",
    "BASELINE_SCENARIO_NAMES",
    "build_scenarios",
    "scenario_names",
]
