"""Reference gateway that satisfies the whole contract.

Supports authorize, capture, purchase, refund, void and create_card.
The remaining capabilities are left out entirely.
"""

from typing import Any, Dict

from ..contract import (
    AbstractGateway,
    AbstractRequest,
    AuthorizeCapable,
    CaptureCapable,
    CreateCardCapable,
    PurchaseCapable,
    RefundCapable,
    VoidCapable,
)


class DummyRequest(AbstractRequest):
    """Request carrying the dummy gateway's credentials."""

    def get_api_key(self):
        return self.get_parameter("api_key")

    def set_api_key(self, value) -> "DummyRequest":
        return self.set_parameter("api_key", value)

    def get_merchant_id(self):
        return self.get_parameter("merchant_id")

    def set_merchant_id(self, value) -> "DummyRequest":
        return self.set_parameter("merchant_id", value)


class DummyGateway(
    AbstractGateway,
    AuthorizeCapable,
    CaptureCapable,
    PurchaseCapable,
    RefundCapable,
    VoidCapable,
    CreateCardCapable,
):
    def get_name(self) -> str:
        return "Dummy"

    def get_default_parameters(self) -> Dict[str, Any]:
        return {
            "api_key": "",
            "merchant_id": "",
            "test_mode": False,
        }

    def get_api_key(self):
        return self.get_parameter("api_key")

    def set_api_key(self, value) -> "DummyGateway":
        return self.set_parameter("api_key", value)

    def get_merchant_id(self):
        return self.get_parameter("merchant_id")

    def set_merchant_id(self, value) -> "DummyGateway":
        return self.set_parameter("merchant_id", value)

    def authorize(self, **options) -> DummyRequest:
        return self.create_request(DummyRequest, **options)

    def capture(self, **options) -> DummyRequest:
        return self.create_request(DummyRequest, **options)

    def purchase(self, **options) -> DummyRequest:
        return self.create_request(DummyRequest, **options)

    def refund(self, **options) -> DummyRequest:
        return self.create_request(DummyRequest, **options)

    def void(self, **options) -> DummyRequest:
        return self.create_request(DummyRequest, **options)

    def create_card(self, **options) -> DummyRequest:
        return self.create_request(DummyRequest, **options)
