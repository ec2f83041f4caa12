"""Fold droplets into a grouped Ansible inventory."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from .models import AnsibleGroup, InstanceRecord, Inventory

logger = logging.getLogger(__name__)

DEFAULT_GROUP_PREFIX = "do_"


def group_name(slug: str, prefix: str = DEFAULT_GROUP_PREFIX) -> str:
    return f"{prefix}{slug}"


def public_address(instance: InstanceRecord) -> str | None:
    """Return the first public IPv4 address of ``instance``, if any."""
    for family, interface in instance.interfaces():
        if family == "ipv4" and interface.is_public:
            return interface.ip_address
    return None


def build_inventory(
    instances: Iterable[InstanceRecord],
    prefix: str = DEFAULT_GROUP_PREFIX,
) -> Inventory:
    """Group instances by region and tag and collect their host variables.

    Every instance joins its region group once and each of its tag groups once
    per occurrence of the tag. Repeated tags are kept as given. Host lists
    follow input order.
    """
    groups: dict[str, AnsibleGroup] = {}
    hostvars: dict[str, dict[str, Any]] = {}

    def add_member(slug: str, hostname: str) -> None:
        name = group_name(slug, prefix)
        group = groups.get(name)
        if group is None:
            group = groups[name] = AnsibleGroup()
        group.hosts.append(hostname)

    count = 0
    for instance in instances:
        count += 1
        add_member(instance.region.slug, instance.name)
        for tag in instance.tags:
            add_member(tag, instance.name)

        host = hostvars.setdefault(instance.name, {})
        address = public_address(instance)
        if address is not None:
            host["ansible_host"] = address

    logger.debug("Built inventory from %d droplets into %d groups", count, len(groups))
    return Inventory(groups=groups, hostvars=hostvars)
