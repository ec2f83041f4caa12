"""Inventory generation backed by the DigitalOcean API."""

from __future__ import annotations

from typing import Any, Protocol

from .builder import DEFAULT_GROUP_PREFIX, build_inventory
from .models import InstanceRecord, Inventory


class DropletSource(Protocol):
    def list_droplets(self) -> list[InstanceRecord]: ...


class InventoryService:
    """Build a fresh inventory from a droplet source on every call."""

    def __init__(self, source: DropletSource, prefix: str = DEFAULT_GROUP_PREFIX) -> None:
        self.source = source
        self.prefix = prefix

    def build(self) -> Inventory:
        return build_inventory(self.source.list_droplets(), prefix=self.prefix)

    def host_vars(self, name: str) -> dict[str, Any]:
        """Variables for one host; unknown hosts get an empty mapping."""
        return self.build().hostvars.get(name, {})
