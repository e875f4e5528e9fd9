"""Core conformance framework.

Only the leaf modules are re-exported here; import the runner and the
capability matrix from their own modules.
"""

from .accessor_resolver import (
    AccessorNames,
    AccessorResolver,
    ParameterBinding,
    accessor_names,
    callable_attr,
    capitalized_form,
    derived_names,
    split_words,
)
from .checks import CheckFailure, CheckRecorder, FailureKind
from .parameters import ParameterDescriptor, ParameterDescriptorSet

__all__ = [
    "AccessorNames",
    "AccessorResolver",
    "ParameterBinding",
    "accessor_names",
    "callable_attr",
    "capitalized_form",
    "derived_names",
    "split_words",
    "CheckFailure",
    "CheckRecorder",
    "FailureKind",
    "ParameterDescriptor",
    "ParameterDescriptorSet",
]
