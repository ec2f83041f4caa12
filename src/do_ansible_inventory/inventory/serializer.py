"""Render an inventory into the formats Ansible consumes."""

from __future__ import annotations

import json
from typing import Any

import yaml

from ..errors import SerializationError
from .models import Inventory


def serialize(inventory: Inventory) -> bytes:
    """Encode ``inventory`` as the JSON document returned by ``--list``.

    Keys are sorted so the same inventory always yields the same bytes.
    """
    try:
        text = json.dumps(
            inventory.to_ansible_inventory(),
            sort_keys=True,
            allow_nan=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"inventory is not representable as JSON: {exc}") from exc
    return text.encode("utf-8")


def serialize_host(hostvars: dict[str, Any]) -> bytes:
    """Encode the variables of a single host, as returned by ``--host``."""
    try:
        text = json.dumps(hostvars, sort_keys=True, allow_nan=False, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"host variables are not representable as JSON: {exc}") from exc
    return text.encode("utf-8")


def render_yaml(inventory: Inventory) -> str:
    """Render ``inventory`` as a static Ansible YAML inventory."""
    try:
        return yaml.safe_dump(inventory.to_yaml_inventory(), sort_keys=True)
    except yaml.YAMLError as exc:
        raise SerializationError(f"inventory is not representable as YAML: {exc}") from exc
