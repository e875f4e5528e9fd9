"""pytest mixin that runs the conformance suite against a gateway.

Usage::

    import pytest
    from gateway_conformance.testing import GatewayConformanceTests
    from my_gateway import MyGateway

    class TestMyGateway(GatewayConformanceTests):
        @pytest.fixture
        def gateway_factory(self):
            return MyGateway

Each scenario becomes its own parametrized test case.
"""

import pytest

from .framework.runner import ConformanceRunner
from .scenarios import scenario_names
from .scenarios.base import ScenarioStatus


class GatewayConformanceTests:
    """Conformance tests shared by every gateway test suite."""

    @pytest.fixture
    def gateway_factory(self):
        raise NotImplementedError("Provide a gateway_factory fixture returning a zero-argument gateway constructor")

    @pytest.fixture
    def conformance_runner(self, gateway_factory):
        return ConformanceRunner(gateway_factory)

    @pytest.mark.parametrize("scenario_name", scenario_names())
    def test_conformance(self, conformance_runner, scenario_name):
        result = conformance_runner.run_named(scenario_name)
        assert result.status == ScenarioStatus.PASS, (
            f"{scenario_name} failed:\n{result.describe_failures()}"
        )
