from __future__ import annotations

import itertools

from do_ansible_inventory.inventory.builder import build_inventory, public_address
from do_ansible_inventory.inventory.models import InstanceRecord


def test_end_to_end_example(example_droplets) -> None:
    inventory = build_inventory(example_droplets)

    assert set(inventory.groups) == {"do_nyc3", "do_web", "do_db"}
    assert inventory.groups["do_nyc3"].hosts == ["vps2", "vps3"]
    assert inventory.groups["do_web"].hosts == ["vps2", "vps3"]
    assert inventory.groups["do_db"].hosts == ["vps3"]
    assert inventory.hostvars["vps2"]["ansible_host"] == "206.81.0.1"
    assert inventory.hostvars["vps3"]["ansible_host"] == "104.248.0.1"


def test_first_public_address_wins(make_droplet) -> None:
    record = make_droplet(
        "web01",
        v4=[
            {"ip_address": "10.0.0.5", "type": "private"},
            {"ip_address": "1.2.3.4", "type": "public"},
            {"ip_address": "5.6.7.8", "type": "public"},
        ],
    )
    assert public_address(record) == "1.2.3.4"
    assert build_inventory([record]).hostvars["web01"] == {"ansible_host": "1.2.3.4"}


def test_host_without_public_address_keeps_empty_hostvars(make_droplet) -> None:
    record = make_droplet("internal", v4=[{"ip_address": "10.0.0.7", "type": "private"}])
    inventory = build_inventory([record])
    assert inventory.hostvars == {"internal": {}}


def test_public_ipv6_is_not_used_as_ansible_host() -> None:
    record = InstanceRecord.model_validate(
        {
            "id": "abc",
            "name": "v6only",
            "region": {"slug": "nyc3"},
            "networks": {"v6": [{"ip_address": "2604:a880::1", "type": "public"}]},
        }
    )
    assert "ansible_host" not in build_inventory([record]).hostvars["v6only"]


def test_untagged_droplet_joins_only_region_group(make_droplet) -> None:
    inventory = build_inventory([make_droplet("lonely", region="ams3")])
    assert {name: group.hosts for name, group in inventory.groups.items()} == {"do_ams3": ["lonely"]}


def test_repeated_tag_is_not_deduplicated(make_droplet) -> None:
    inventory = build_inventory([make_droplet("web01", tags=["web", "web"])])
    assert inventory.groups["do_web"].hosts == ["web01", "web01"]


def test_every_droplet_has_single_region_membership(make_droplet) -> None:
    records = [
        make_droplet("a", region="nyc1"),
        make_droplet("b", region="sfo2", tags=["nyc1"]),
        make_droplet("c", region="nyc1"),
    ]
    inventory = build_inventory(records)
    for record in records:
        assert inventory.groups[f"do_{record.region.slug}"].hosts.count(record.name) == 1
    assert inventory.groups["do_nyc1"].hosts == ["a", "b", "c"]
    assert set(inventory.hostvars) == {"a", "b", "c"}


def test_custom_prefix_and_verbatim_slugs(make_droplet) -> None:
    inventory = build_inventory([make_droplet("a", region="fra1", tags=["K8S:worker"])], prefix="cloud_")
    assert set(inventory.groups) == {"cloud_fra1", "cloud_K8S:worker"}


def test_membership_is_order_independent(make_droplet) -> None:
    records = [
        make_droplet("a", region="nyc3", tags=["web"]),
        make_droplet("b", region="lon1", tags=["web", "db"]),
        make_droplet("c", region="nyc3", tags=["db"]),
    ]
    expected = None
    for permutation in itertools.permutations(records):
        inventory = build_inventory(permutation)
        sets = {name: set(group.hosts) for name, group in inventory.groups.items()}
        if expected is None:
            expected = sets
        assert sets == expected


def test_builds_do_not_share_state(example_droplets) -> None:
    first = build_inventory(example_droplets)
    second = build_inventory(example_droplets)
    assert first.groups["do_web"].hosts == second.groups["do_web"].hosts == ["vps2", "vps3"]
    assert first.groups["do_web"] is not second.groups["do_web"]


def test_empty_input_yields_empty_inventory() -> None:
    inventory = build_inventory([])
    assert inventory.groups == {}
    assert inventory.hostvars == {}
