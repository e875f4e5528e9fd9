"""Base class for gateway implementations."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Type, TypeVar

from ..framework.accessor_resolver import ParameterBinding, callable_attr, derived_names
from .capabilities import (
    AuthorizeCapable,
    CaptureCapable,
    CompleteAuthorizeCapable,
    CompletePurchaseCapable,
    CreateCardCapable,
    DeleteCardCapable,
    PurchaseCapable,
    RefundCapable,
    UpdateCardCapable,
    VoidCapable,
)
from .request import AbstractRequest

R = TypeVar("R", bound=AbstractRequest)


class AbstractGateway(ABC):
    """Holds gateway configuration and builds requests from it.

    Subclasses declare their configuration keys in ``get_default_parameters()``
    and a ``get_<key>`` / ``set_<key>`` pair for each of them. Capabilities are
    added by also inheriting the matching interface from
    ``gateway_conformance.contract.capabilities``; the ``supports_*`` flags
    follow from that automatically.
    """

    def __init__(self, **parameters):
        self._parameters: Dict[str, Any] = {}
        self.initialize(**parameters)

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable gateway name."""

    def get_short_name(self) -> str:
        name = type(self).__name__
        if name.endswith("Gateway") and name != "Gateway":
            name = name[: -len("Gateway")]
        return name

    def get_default_parameters(self) -> Dict[str, Any]:
        return {}

    def initialize(self, **parameters) -> "AbstractGateway":
        """Reset configuration to the defaults, then apply ``parameters``.

        Keys with a setter go through it, so normalization applies; other
        keys are stored as given.
        """
        self._parameters = dict(self.get_default_parameters())
        for key, value in parameters.items():
            names = derived_names(key)
            setter = callable_attr(self, names.setter) if names else None
            if setter is not None:
                setter(value)
            else:
                self.set_parameter(key, value)
        return self

    def get_parameters(self) -> Dict[str, Any]:
        return dict(self._parameters)

    def get_parameter(self, key: str) -> Any:
        return self._parameters.get(key)

    def set_parameter(self, key: str, value: Any) -> "AbstractGateway":
        self._parameters[key] = value
        return self

    def parameter_bindings(self) -> List[ParameterBinding]:
        """Accessor table for every default parameter key, in declared order.

        Override to bind keys to accessors that do not follow the
        ``get_<key>`` naming.
        """
        bindings = []
        for key in self.get_default_parameters():
            names = derived_names(key)
            if names is None:
                bindings.append(ParameterBinding(key=key, getter=None, setter=None))
                continue
            bindings.append(
                ParameterBinding(
                    key=key,
                    getter=callable_attr(self, names.getter),
                    setter=callable_attr(self, names.setter),
                )
            )
        return bindings

    def get_test_mode(self):
        return self.get_parameter("test_mode")

    def set_test_mode(self, value) -> "AbstractGateway":
        return self.set_parameter("test_mode", value)

    def get_currency(self) -> Optional[str]:
        return self.get_parameter("currency")

    def set_currency(self, value: Optional[str]) -> "AbstractGateway":
        if value is not None:
            value = value.upper()
        return self.set_parameter("currency", value)

    def supports_authorize(self) -> bool:
        return isinstance(self, AuthorizeCapable)

    def supports_complete_authorize(self) -> bool:
        return isinstance(self, CompleteAuthorizeCapable)

    def supports_capture(self) -> bool:
        return isinstance(self, CaptureCapable)

    def supports_purchase(self) -> bool:
        return isinstance(self, PurchaseCapable)

    def supports_complete_purchase(self) -> bool:
        return isinstance(self, CompletePurchaseCapable)

    def supports_refund(self) -> bool:
        return isinstance(self, RefundCapable)

    def supports_void(self) -> bool:
        return isinstance(self, VoidCapable)

    def supports_create_card(self) -> bool:
        return isinstance(self, CreateCardCapable)

    def supports_delete_card(self) -> bool:
        return isinstance(self, DeleteCardCapable)

    def supports_update_card(self) -> bool:
        return isinstance(self, UpdateCardCapable)

    def create_request(self, request_class: Type[R], **options) -> R:
        """Build a request pre-populated with this gateway's configuration.

        Args:
            request_class: AbstractRequest subclass to instantiate
            **options: Per-request values, applied over the gateway's current
                parameters

        Returns:
            Initialized request
        """
        parameters = self.get_parameters()
        parameters.update(options)
        return request_class(**parameters)
