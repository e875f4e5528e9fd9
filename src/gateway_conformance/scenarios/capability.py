"""Per-capability conformance scenario."""

from ..contract.request import RequestInterface
from ..framework.capability_matrix import CapabilityDescriptor
from ..framework.checks import CheckRecorder, FailureKind
from ..framework.parameters import ParameterDescriptorSet
from ..framework.propagation import ParameterPropagationChecker
from .base import Scenario


class CapabilityScenario(Scenario):
    """Support flag, capability surface and parameter propagation for one capability.

    Supported: the gateway implements the capability interface, the factory
    returns a request exposing every shared getter, and every default
    parameter set on the gateway reaches the request.

    Unsupported: the gateway does not implement the interface and the
    factory name does not exist on its type at all.
    """

    def __init__(self, capability: CapabilityDescriptor, checker: ParameterPropagationChecker):
        self.capability = capability
        self.checker = checker

    @property
    def name(self) -> str:
        return self.capability.name

    @property
    def description(self) -> str:
        return f"{self.capability.support_flag_name}() agrees with {self.capability.method_name}()"

    def run(self, gateway, checks: CheckRecorder) -> None:
        capability = self.capability
        flag_name = capability.support_flag_name

        query = capability.support_flag_query(gateway)
        if not checks.check(
            query is not None,
            FailureKind.MISSING_ACCESSOR,
            flag_name,
            f"gateway must implement {flag_name}()",
        ):
            return

        supported = None
        failed_before = len(checks.failures)
        with checks.guard(flag_name):
            supported = query()
        if len(checks.failures) > failed_before:
            return
        if not checks.check(
            type(supported) is bool,
            FailureKind.INVALID_FLAG,
            flag_name,
            f"{flag_name}() must return a bool, got {supported!r}",
        ):
            return

        if supported:
            self._check_supported(gateway, checks)
        else:
            self._check_absent(gateway, checks)

    def _check_supported(self, gateway, checks: CheckRecorder) -> None:
        capability = self.capability
        checks.check(
            capability.implemented_by(gateway),
            FailureKind.MISSING_CAPABILITY,
            capability.name,
            f"{capability.support_flag_name}() is True but gateway does not implement "
            f"{capability.interface.__name__}",
        )

        factory = capability.factory(gateway)
        if not checks.check(
            factory is not None,
            FailureKind.MISSING_CAPABILITY,
            capability.name,
            f"{capability.support_flag_name}() is True but gateway has no "
            f"{capability.method_name}() method",
        ):
            return

        descriptors = None
        with checks.guard(capability.name):
            descriptors = ParameterDescriptorSet.from_gateway(gateway, self.checker.resolver)
            request = factory()
            self._check_request(request, descriptors, checks)
        if descriptors is not None:
            self.checker.check_propagation(gateway, capability, descriptors, checks)

    def _check_request(self, request, descriptors: ParameterDescriptorSet, checks: CheckRecorder) -> None:
        method = self.capability.method_name
        if not checks.check(
            isinstance(request, RequestInterface),
            FailureKind.INVALID_REQUEST,
            method,
            f"{method}() must return a RequestInterface, got {type(request).__name__}",
        ):
            return
        for descriptor in descriptors:
            if not descriptor.has_accessor_names:
                continue
            checks.check(
                self.checker.resolver.getter(request, descriptor.key) is not None,
                FailureKind.MISSING_ACCESSOR,
                method,
                f"request must implement {descriptor.getter_name}()",
            )

    def _check_absent(self, gateway, checks: CheckRecorder) -> None:
        capability = self.capability
        checks.check(
            not capability.implemented_by(gateway),
            FailureKind.UNEXPECTED_CAPABILITY,
            capability.name,
            f"{capability.support_flag_name}() is False but gateway implements "
            f"{capability.interface.__name__}",
        )
        checks.check(
            not capability.declared_on_type(gateway),
            FailureKind.UNEXPECTED_CAPABILITY,
            capability.name,
            f"{capability.support_flag_name}() is False but "
            f"{type(gateway).__name__}.{capability.method_name} exists",
        )
