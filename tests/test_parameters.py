"""ParameterDescriptorSet tests."""

import pytest

from gateway_conformance.framework.parameters import ParameterDescriptorSet


def test_descriptors_follow_declared_order(dummy_gateway):
    descriptors = ParameterDescriptorSet.from_gateway(dummy_gateway)
    assert descriptors.keys == ["api_key", "merchant_id", "test_mode"]
    assert len(descriptors) == 3
    assert "merchant_id" in descriptors
    assert "currency" not in descriptors


def test_descriptors_carry_derived_names_and_defaults(dummy_gateway):
    descriptor = ParameterDescriptorSet.from_gateway(dummy_gateway).get("test_mode")
    assert descriptor.getter_name == "get_test_mode"
    assert descriptor.setter_name == "set_test_mode"
    assert descriptor.default_value is False


def test_descriptors_bind_gateway_accessors(dummy_gateway):
    descriptor = ParameterDescriptorSet.from_gateway(dummy_gateway).get("api_key")
    assert descriptor.setter("secret-key") is dummy_gateway
    assert descriptor.getter() == "secret-key"


def test_missing_accessors_are_none(broken_gateways):
    gateway = broken_gateways["missing_accessor"]()
    descriptor = ParameterDescriptorSet.from_gateway(gateway).get("secret")
    assert descriptor.getter is None
    assert descriptor.setter is None


def test_from_defaults_without_target():
    descriptors = ParameterDescriptorSet.from_defaults({"amount": "10.00", "apiKey": ""})
    assert descriptors.defaults() == {"amount": "10.00", "apiKey": ""}
    assert descriptors.get("apiKey").getter_name == "get_api_key"
    assert descriptors.get("amount").getter is None


def test_unknown_key_raises(dummy_gateway):
    with pytest.raises(KeyError):
        ParameterDescriptorSet.from_gateway(dummy_gateway).get("nope")


def test_non_mapping_defaults_are_rejected():
    class ListDefaults:
        def get_default_parameters(self):
            return ["api_key"]

    with pytest.raises(TypeError):
        ParameterDescriptorSet.from_gateway(ListDefaults())


def test_descriptors_are_recomputed_per_gateway(amount_gateway, dummy_gateway):
    assert ParameterDescriptorSet.from_gateway(amount_gateway).keys == ["amount"]
    assert ParameterDescriptorSet.from_gateway(dummy_gateway).keys != ["amount"]


def test_keys_without_accessor_names_keep_their_slot():
    descriptors = ParameterDescriptorSet.from_defaults({"amount": "10.00", "--": "", 7: None})
    assert descriptors.keys == ["amount", "--", 7]
    assert descriptors.get("amount").has_accessor_names
    for key in ("--", 7):
        descriptor = descriptors.get(key)
        assert not descriptor.has_accessor_names
        assert descriptor.setter_name is None


def test_malformed_key_still_binds_other_keys(broken_gateways):
    gateway = broken_gateways["odd_key"]()
    descriptors = ParameterDescriptorSet.from_gateway(gateway)
    assert descriptors.get("amount").getter() == "10.00"
    assert descriptors.get("amount").setter is None
    assert descriptors.get("--").getter is None
