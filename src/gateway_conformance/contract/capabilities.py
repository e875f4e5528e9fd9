"""Optional capability interfaces.

A gateway class inherits one of these for each operation it supports and
leaves the rest out entirely. An unsupported operation has no method at all.
"""

from abc import ABC, abstractmethod


class AuthorizeCapable(ABC):
    @abstractmethod
    def authorize(self, **options):
        """Return a request that authorizes an amount on the customer's card."""


class CompleteAuthorizeCapable(ABC):
    @abstractmethod
    def complete_authorize(self, **options):
        """Return a request that completes an off-site authorization."""


class CaptureCapable(ABC):
    @abstractmethod
    def capture(self, **options):
        """Return a request that captures a previously authorized amount."""


class PurchaseCapable(ABC):
    @abstractmethod
    def purchase(self, **options):
        """Return a request that authorizes and captures in one step."""


class CompletePurchaseCapable(ABC):
    @abstractmethod
    def complete_purchase(self, **options):
        """Return a request that completes an off-site purchase."""


class RefundCapable(ABC):
    @abstractmethod
    def refund(self, **options):
        """Return a request that refunds a settled transaction."""


class VoidCapable(ABC):
    @abstractmethod
    def void(self, **options):
        """Return a request that voids an unsettled transaction."""


class CreateCardCapable(ABC):
    @abstractmethod
    def create_card(self, **options):
        """Return a request that stores a card and yields a card reference."""


class DeleteCardCapable(ABC):
    @abstractmethod
    def delete_card(self, **options):
        """Return a request that deletes a stored card."""


class UpdateCardCapable(ABC):
    @abstractmethod
    def update_card(self, **options):
        """Return a request that updates a stored card."""
