"""Request side of the gateway contract."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..framework.accessor_resolver import callable_attr, derived_names


class RequestInterface(ABC):
    """Minimal contract for objects produced by capability factories."""

    @abstractmethod
    def get_parameters(self) -> Dict[str, Any]:
        """Return a copy of every parameter the request holds."""


class AbstractRequest(RequestInterface):
    """Parameter-bag request with the accessors shared by all gateways.

    Gateway-specific keys are exposed by subclasses adding ``get_<key>`` /
    ``set_<key>`` pairs. A request copies values at initialization and does
    not track later changes on the gateway that built it.
    """

    def __init__(self, **parameters):
        self._parameters: Dict[str, Any] = {}
        self.initialize(**parameters)

    def initialize(self, **parameters) -> "AbstractRequest":
        """Reset the request and apply ``parameters`` through their setters.

        Keys without a matching setter are ignored.
        """
        self._parameters = {}
        for key, value in parameters.items():
            names = derived_names(key)
            setter = callable_attr(self, names.setter) if names else None
            if setter is not None:
                setter(value)
        return self

    def get_parameters(self) -> Dict[str, Any]:
        return dict(self._parameters)

    def get_parameter(self, key: str) -> Any:
        return self._parameters.get(key)

    def set_parameter(self, key: str, value: Any) -> "AbstractRequest":
        self._parameters[key] = value
        return self

    def get_test_mode(self):
        return self.get_parameter("test_mode")

    def set_test_mode(self, value) -> "AbstractRequest":
        return self.set_parameter("test_mode", value)

    def get_currency(self) -> Optional[str]:
        return self.get_parameter("currency")

    def set_currency(self, value: Optional[str]) -> "AbstractRequest":
        if value is not None:
            value = value.upper()
        return self.set_parameter("currency", value)

    def get_amount(self):
        return self.get_parameter("amount")

    def set_amount(self, value) -> "AbstractRequest":
        return self.set_parameter("amount", value)

    def get_transaction_id(self):
        return self.get_parameter("transaction_id")

    def set_transaction_id(self, value) -> "AbstractRequest":
        return self.set_parameter("transaction_id", value)

    def get_transaction_reference(self):
        return self.get_parameter("transaction_reference")

    def set_transaction_reference(self, value) -> "AbstractRequest":
        return self.set_parameter("transaction_reference", value)

    def get_card_reference(self):
        return self.get_parameter("card_reference")

    def set_card_reference(self, value) -> "AbstractRequest":
        return self.set_parameter("card_reference", value)
