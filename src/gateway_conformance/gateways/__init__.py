"""Bundled gateway implementations."""

from .dummy import DummyGateway, DummyRequest

__all__ = ["DummyGateway", "DummyRequest"]
