from __future__ import annotations

from typing import Any

import pytest

from do_ansible_inventory.config import get_settings
from do_ansible_inventory.inventory.models import InstanceRecord


def droplet(
    name: str,
    region: str = "nyc3",
    tags: list[str] | None = None,
    v4: list[dict[str, Any]] | None = None,
    droplet_id: int = 1,
) -> InstanceRecord:
    return InstanceRecord.model_validate(
        {
            "id": droplet_id,
            "name": name,
            "region": {"slug": region, "name": region.upper()},
            "tags": tags or [],
            "networks": {"v4": v4 or [], "v6": []},
        }
    )


@pytest.fixture
def example_droplets() -> list[InstanceRecord]:
    return [
        droplet(
            "vps2",
            tags=["web"],
            v4=[{"ip_address": "206.81.0.1", "type": "public"}],
            droplet_id=2,
        ),
        droplet(
            "vps3",
            tags=["web", "db"],
            v4=[{"ip_address": "104.248.0.1", "type": "public"}],
            droplet_id=3,
        ),
    ]


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for var in ("DO_TOKEN", "DO_API_URL", "DO_PER_PAGE", "DO_TIMEOUT", "DO_GROUP_PREFIX", "DO_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_droplet():
    return droplet
