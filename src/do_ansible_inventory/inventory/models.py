"""Inventory data models based on Pydantic."""

from __future__ import annotations

from typing import Any, Iterator, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

PUBLIC = "public"
PRIVATE = "private"


class NetworkInterface(BaseModel):
    """One address attached to a droplet."""

    model_config = ConfigDict(extra="ignore")

    ip_address: str
    netmask: Union[str, int, None] = None
    gateway: str | None = None
    type: str = Field(default=PRIVATE, description="Visibility: 'public' or 'private'.")

    @property
    def is_public(self) -> bool:
        return self.type == PUBLIC


class Networks(BaseModel):
    model_config = ConfigDict(extra="ignore")

    v4: list[NetworkInterface] = Field(default_factory=list)
    v6: list[NetworkInterface] = Field(default_factory=list)

    @field_validator("v4", "v6", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class Region(BaseModel):
    model_config = ConfigDict(extra="ignore")

    slug: str
    name: str | None = None


class InstanceRecord(BaseModel):
    """The fields of a droplet that matter for inventory generation."""

    model_config = ConfigDict(extra="ignore")

    id: Union[int, str]
    name: str = Field(description="Inventory hostname; expected to be unique across the fleet.")
    region: Region
    tags: list[str] = Field(default_factory=list)
    networks: Networks = Field(default_factory=Networks)
    features: list[str] = Field(default_factory=list)
    status: str | None = None

    @field_validator("tags", "features", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("networks", mode="before")
    @classmethod
    def _null_networks(cls, value: Any) -> Any:
        return Networks() if value is None else value

    def interfaces(self) -> Iterator[tuple[str, NetworkInterface]]:
        """Yield ``(family, interface)`` pairs, IPv4 first, in API order."""
        for interface in self.networks.v4:
            yield "ipv4", interface
        for interface in self.networks.v6:
            yield "ipv6", interface


class DropletsResponse(BaseModel):
    """Body of ``GET /droplets``; pagination links are read but not followed."""

    model_config = ConfigDict(extra="ignore")

    droplets: list[InstanceRecord] = Field(default_factory=list)
    links: dict[str, Any] = Field(default_factory=dict)
    meta: dict[str, Any] = Field(default_factory=dict)


class AnsibleGroup(BaseModel):
    """A named set of hosts plus optional shared variables."""

    hosts: list[str] = Field(default_factory=list)
    vars: dict[str, Any] = Field(default_factory=dict)
    children: list[str] = Field(default_factory=list)

    def to_ansible_mapping(self) -> dict[str, Any]:
        """Convert to the group mapping expected by Ansible, dropping empty sections."""
        mapping: dict[str, Any] = {"hosts": list(self.hosts)}
        if self.vars:
            mapping["vars"] = dict(self.vars)
        if self.children:
            mapping["children"] = list(self.children)
        return mapping


class Inventory(BaseModel):
    """Groups keyed by name plus per-host variables."""

    groups: dict[str, AnsibleGroup] = Field(default_factory=dict)
    hostvars: dict[str, dict[str, Any]] = Field(default_factory=dict)

    def to_ansible_inventory(self) -> dict[str, Any]:
        """Render into the dictionary Ansible reads from ``--list``."""
        document: dict[str, Any] = {
            name: group.to_ansible_mapping() for name, group in self.groups.items()
        }
        document["_meta"] = {
            "hostvars": {name: dict(values) for name, values in self.hostvars.items()}
        }
        return document

    def to_yaml_inventory(self) -> dict[str, Any]:
        """Render into Ansible's static YAML inventory structure."""
        children: dict[str, Any] = {}
        for name, group in self.groups.items():
            section: dict[str, Any] = {"hosts": {host: {} for host in group.hosts}}
            if group.vars:
                section["vars"] = dict(group.vars)
            if group.children:
                section["children"] = {child: {} for child in group.children}
            children[name] = section

        return {
            "all": {
                "hosts": {name: dict(values) for name, values in self.hostvars.items()},
                "children": children,
            }
        }
