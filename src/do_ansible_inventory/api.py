"""FastAPI application exposing the generated inventory."""

from __future__ import annotations

from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Response

from . import __version__
from .client import DigitalOceanClient
from .config import get_settings
from .errors import ConfigurationError, FetchError, SerializationError
from .inventory.serializer import serialize
from .inventory.service import InventoryService

app = FastAPI(title="DigitalOcean Ansible Inventory", version=__version__)


async def get_inventory() -> InventoryService:
    try:
        settings = get_settings()
        client = DigitalOceanClient.from_settings(settings)
    except ConfigurationError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return InventoryService(client, prefix=settings.group_prefix)


@app.get("/healthz")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/inventory")
def inventory_document(inventory: InventoryService = Depends(get_inventory)) -> Response:
    try:
        body = serialize(inventory.build())
    except FetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except SerializationError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return Response(content=body, media_type="application/json")


@app.get("/inventory/hosts/{name}")
def host_variables(name: str, inventory: InventoryService = Depends(get_inventory)) -> dict[str, Any]:
    try:
        built = inventory.build()
    except FetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    if name not in built.hostvars:
        raise HTTPException(status_code=404, detail="Host not found")
    return built.hostvars[name]
