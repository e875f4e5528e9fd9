"""Payment gateway conformance testing framework."""

__version__ = "0.1.0"

from .framework.capability_matrix import (
    CAPABILITY_MATRIX,
    CAPABILITY_NAMES,
    CapabilityDescriptor,
    get_capability,
)
from .framework.propagation import ParameterPropagationChecker, ProbeGenerator
from .framework.runner import ConformanceReport, ConformanceRunner
from .scenarios.base import ScenarioResult, ScenarioStatus

__all__ = [
    "CAPABILITY_MATRIX",
    "CAPABILITY_NAMES",
    "CapabilityDescriptor",
    "get_capability",
    "ParameterPropagationChecker",
    "ProbeGenerator",
    "ConformanceReport",
    "ConformanceRunner",
    "ScenarioResult",
    "ScenarioStatus",
]
