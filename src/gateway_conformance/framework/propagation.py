"""Parameter round-trip and propagation checks."""

import itertools
import random
from typing import Optional

from .checks import CheckRecorder, FailureKind
from .parameters import ParameterDescriptorSet
from .accessor_resolver import AccessorResolver


class ProbeGenerator:
    """Produces run-unique probe strings.

    Uniqueness comes from the counter; the random suffix only makes probes
    from different runs easy to tell apart.
    """

    def __init__(self, prefix: str = "", seed: Optional[int] = None):
        self.prefix = prefix
        self._counter = itertools.count(1)
        self._random = random.Random(seed)

    def next_probe(self) -> str:
        return f"{self.prefix}{next(self._counter):08x}.{self._random.getrandbits(32):08x}"

    def __iter__(self):
        return self

    def __next__(self) -> str:
        return self.next_probe()


class ParameterPropagationChecker:
    """Verifies that gateway parameters round-trip and reach requests."""

    def __init__(
        self,
        probes: Optional[ProbeGenerator] = None,
        resolver: Optional[AccessorResolver] = None,
    ):
        self.probes = probes or ProbeGenerator()
        self.resolver = resolver or AccessorResolver()

    def check_round_trip(
        self, gateway, descriptors: ParameterDescriptorSet, checks: CheckRecorder
    ) -> None:
        """Each declared key has a chainable setter whose value the getter returns."""
        for descriptor in descriptors:
            label = f"parameter {descriptor.key!r}"
            if not checks.check(
                descriptor.has_accessor_names,
                FailureKind.INVALID_VALUE,
                label,
                "key does not map to accessor names",
            ):
                continue
            has_getter = checks.check(
                descriptor.getter is not None,
                FailureKind.MISSING_ACCESSOR,
                label,
                f"gateway must implement {descriptor.getter_name}()",
            )
            has_setter = checks.check(
                descriptor.setter is not None,
                FailureKind.MISSING_ACCESSOR,
                label,
                f"gateway must implement {descriptor.setter_name}()",
            )
            if not (has_getter and has_setter):
                continue

            probe = self.probes.next_probe()
            with checks.guard(label):
                returned = descriptor.setter(probe)
                checks.check(
                    returned is gateway,
                    FailureKind.NOT_CHAINABLE,
                    label,
                    f"{descriptor.setter_name}() must return the gateway itself, got {returned!r}",
                )
                checks.check_same(probe, descriptor.getter(), label)

    def check_propagation(
        self,
        gateway,
        capability,
        descriptors: ParameterDescriptorSet,
        checks: CheckRecorder,
    ) -> None:
        """Every key set on the gateway shows up on a freshly built request.

        A new probe is set right before each request is built, so a value
        left behind by an earlier check cannot produce a false pass.
        """
        factory = capability.factory(gateway)
        if factory is None:
            checks.check(
                False,
                FailureKind.MISSING_CAPABILITY,
                capability.name,
                f"gateway has no {capability.method_name}() factory",
            )
            return

        for descriptor in descriptors:
            label = f"{capability.name} parameter {descriptor.key!r}"
            if descriptor.setter is None:
                # Reported by the parameter_accessors scenario.
                continue

            probe = self.probes.next_probe()
            with checks.guard(label):
                returned = descriptor.setter(probe)
                checks.check(
                    returned is gateway,
                    FailureKind.NOT_CHAINABLE,
                    label,
                    f"{descriptor.setter_name}() must return the gateway itself",
                )
                request = factory()
                getter = self.resolver.getter(request, descriptor.key)
                if checks.check(
                    getter is not None,
                    FailureKind.MISSING_ACCESSOR,
                    label,
                    f"request from {capability.method_name}() must implement {descriptor.getter_name}()",
                ):
                    checks.check_same(probe, getter(), label)
