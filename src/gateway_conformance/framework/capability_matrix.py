"""The fixed catalog of gateway capabilities.

Every gateway under test is checked against the same ten entries, in this
order. The catalog does not depend on any processor, so a new gateway is
certified without touching the harness.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Type

from ..contract.capabilities import (
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


@dataclass(frozen=True)
class CapabilityDescriptor:
    """A named capability bound to its support flag and factory.

    Attributes:
        name: Capability name, also the factory method name (e.g. "refund")
        interface: Capability interface a supporting gateway implements
    """

    name: str
    interface: Type

    @property
    def method_name(self) -> str:
        return self.name

    @property
    def support_flag_name(self) -> str:
        return f"supports_{self.name}"

    def support_flag_query(self, gateway) -> Optional[Callable[[], Any]]:
        """Return the gateway's bound ``supports_<name>`` query, or None."""
        query = getattr(gateway, self.support_flag_name, None)
        return query if callable(query) else None

    def factory(self, gateway) -> Optional[Callable[[], Any]]:
        """Return the gateway's bound factory for this capability, or None."""
        factory = getattr(gateway, self.method_name, None)
        return factory if callable(factory) else None

    def implemented_by(self, gateway) -> bool:
        return isinstance(gateway, self.interface)

    def declared_on_type(self, gateway) -> bool:
        """Whether the factory name exists anywhere on the gateway's type."""
        return hasattr(type(gateway), self.method_name)


CAPABILITY_MATRIX: Tuple[CapabilityDescriptor, ...] = (
    CapabilityDescriptor("authorize", AuthorizeCapable),
    CapabilityDescriptor("complete_authorize", CompleteAuthorizeCapable),
    CapabilityDescriptor("capture", CaptureCapable),
    CapabilityDescriptor("purchase", PurchaseCapable),
    CapabilityDescriptor("complete_purchase", CompletePurchaseCapable),
    CapabilityDescriptor("refund", RefundCapable),
    CapabilityDescriptor("void", VoidCapable),
    CapabilityDescriptor("create_card", CreateCardCapable),
    CapabilityDescriptor("delete_card", DeleteCardCapable),
    CapabilityDescriptor("update_card", UpdateCardCapable),
)

CAPABILITY_NAMES = [c.name for c in CAPABILITY_MATRIX]


def get_capability(name: str) -> CapabilityDescriptor:
    """Look up a catalog entry by name.

    Raises:
        KeyError: If the name is not in the catalog
    """
    for capability in CAPABILITY_MATRIX:
        if capability.name == name:
            return capability
    raise KeyError(f"Unknown capability: {name!r}")
