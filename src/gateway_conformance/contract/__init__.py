"""Contract that gateway implementations extend."""

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
from .gateway import AbstractGateway
from .request import AbstractRequest, RequestInterface

__all__ = [
    "AbstractGateway",
    "AbstractRequest",
    "RequestInterface",
    "AuthorizeCapable",
    "CompleteAuthorizeCapable",
    "CaptureCapable",
    "PurchaseCapable",
    "CompletePurchaseCapable",
    "RefundCapable",
    "VoidCapable",
    "CreateCardCapable",
    "DeleteCardCapable",
    "UpdateCardCapable",
]
