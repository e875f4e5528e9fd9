"""Pytest fixtures: the reference gateway and deliberately broken gateways."""

import pytest

from gateway_conformance.contract import (
    AbstractGateway,
    AbstractRequest,
    PurchaseCapable,
    RefundCapable,
    VoidCapable,
)
from gateway_conformance.framework.accessor_resolver import ParameterBinding
from gateway_conformance.framework.propagation import ProbeGenerator
from gateway_conformance.gateways import DummyGateway, DummyRequest


class AmountGateway(AbstractGateway, PurchaseCapable):
    """Declares a single amount parameter and supports purchase only."""

    def get_name(self):
        return "Amount"

    def get_default_parameters(self):
        return {"amount": "10.00"}

    def get_amount(self):
        return self.get_parameter("amount")

    def set_amount(self, value):
        return self.set_parameter("amount", value)

    def purchase(self, **options):
        return self.create_request(AbstractRequest, **options)


class MissingAccessorGateway(DummyGateway):
    """Declares a secret parameter without accessors for it."""

    def get_default_parameters(self):
        defaults = super().get_default_parameters()
        defaults["secret"] = ""
        return defaults


class NonChainingGateway(DummyGateway):
    def set_api_key(self, value):
        self.set_parameter("api_key", value)


class StaleRequestGateway(DummyGateway):
    """Builds purchase requests from the defaults instead of the current values."""

    def purchase(self, **options):
        return DummyRequest(**self.get_default_parameters())


class LyingFlagGateway(DummyGateway):
    """Claims complete_purchase without a factory; denies void while implementing it."""

    def supports_complete_purchase(self):
        return True

    def supports_void(self):
        return False


class LeftoverFactoryGateway(DummyGateway):
    """Defines delete_card without implementing the capability."""

    def delete_card(self, **options):
        return self.create_request(DummyRequest, **options)


class NonBoolFlagGateway(DummyGateway):
    def supports_purchase(self):
        return 1


class RaisingGetterGateway(DummyGateway):
    def get_api_key(self):
        raise RuntimeError("credentials unavailable")


class BadBaselineGateway(DummyGateway):
    """Fails every identity check."""

    def get_name(self):
        return ""

    def get_short_name(self):
        return None

    def set_test_mode(self, value):
        self.set_parameter("test_mode", "yes" if value else "no")
        return self

    def set_currency(self, value):
        return self.set_parameter("currency", value)


class OddKeyGateway(AbstractGateway, PurchaseCapable):
    """Declares a key with no identifier characters next to an amount without a setter."""

    def get_name(self):
        return "Odd Key"

    def get_default_parameters(self):
        return {"amount": "10.00", "--": ""}

    def get_amount(self):
        return self.get_parameter("amount")

    def purchase(self, **options):
        return self.create_request(AbstractRequest, **options)


class NonCallableGetterGateway(DummyGateway):
    """Shadows the region getter with a plain string attribute."""

    get_region = "eu"

    def get_default_parameters(self):
        defaults = super().get_default_parameters()
        defaults["region"] = ""
        return defaults

    def set_region(self, value):
        return self.set_parameter("region", value)


class RaisingFlagGateway(DummyGateway):
    def supports_refund(self):
        raise RuntimeError("flag lookup failed")


class ExplicitBindingGateway(AbstractGateway, RefundCapable, VoidCapable):
    """Binds its camelCase key to accessors with non-derived names."""

    def get_name(self):
        return "Explicit Binding"

    def get_default_parameters(self):
        return {"apiKey": ""}

    def api_key(self):
        return self.get_parameter("apiKey")

    def with_api_key(self, value):
        return self.set_parameter("apiKey", value)

    def parameter_bindings(self):
        return [ParameterBinding("apiKey", getter=self.api_key, setter=self.with_api_key)]

    def refund(self, **options):
        return self.create_request(DummyRequest, **options)

    def void(self, **options):
        return self.create_request(DummyRequest, **options)


@pytest.fixture
def probes():
    return ProbeGenerator(seed=1234)


@pytest.fixture
def dummy_gateway():
    return DummyGateway()


@pytest.fixture
def amount_gateway():
    return AmountGateway()


@pytest.fixture(scope="session")
def broken_gateways():
    """Return broken gateway classes by name."""
    return {
        "missing_accessor": MissingAccessorGateway,
        "non_chaining": NonChainingGateway,
        "stale_request": StaleRequestGateway,
        "lying_flag": LyingFlagGateway,
        "leftover_factory": LeftoverFactoryGateway,
        "non_bool_flag": NonBoolFlagGateway,
        "raising_getter": RaisingGetterGateway,
        "bad_baseline": BadBaselineGateway,
        "odd_key": OddKeyGateway,
        "non_callable_getter": NonCallableGetterGateway,
        "raising_flag": RaisingFlagGateway,
    }


@pytest.fixture(scope="session")
def explicit_binding_gateway_class():
    return ExplicitBindingGateway


@pytest.fixture(scope="session")
def amount_gateway_class():
    return AmountGateway
