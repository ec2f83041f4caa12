"""Exception hierarchy for inventory generation."""

from __future__ import annotations


class InventoryError(Exception):
    """Base class for every failure surfaced to the entry point."""


class ConfigurationError(InventoryError):
    """Required configuration (e.g. the API token) is missing or invalid."""


class FetchError(InventoryError):
    """The droplet list could not be retrieved or decoded."""


class SerializationError(InventoryError):
    """The inventory contains values that cannot be rendered."""
