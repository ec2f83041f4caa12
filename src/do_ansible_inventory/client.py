"""Minimal DigitalOcean API client for listing droplets."""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from .config import Settings
from .errors import FetchError
from .inventory.models import DropletsResponse, InstanceRecord

logger = logging.getLogger(__name__)


def decode_droplets(payload: bytes) -> list[InstanceRecord]:
    """Decode a ``/droplets`` response body into instance records."""
    try:
        response = DropletsResponse.model_validate_json(payload)
    except ValidationError as exc:
        raise FetchError(f"unexpected /droplets response: {exc}") from exc
    pages = response.links.get("pages") or {}
    if isinstance(pages, dict) and pages.get("next"):
        logger.warning(
            "Droplet list is paginated; only the first %d droplets are included",
            len(response.droplets),
        )
    return response.droplets


class DigitalOceanClient:
    """Fetch droplets with a bearer token; one request, no retries."""

    def __init__(
        self,
        token: str,
        *,
        api_url: str = "https://api.digitalocean.com/v2",
        per_page: int = 200,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.per_page = per_page
        self._token = token
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: Optional[httpx.BaseTransport] = None
    ) -> "DigitalOceanClient":
        return cls(
            settings.require_token(),
            api_url=settings.api_url,
            per_page=settings.per_page,
            timeout=settings.timeout,
            transport=transport,
        )

    def _get(self, endpoint: str, params: Optional[dict[str, str]] = None) -> bytes:
        url = f"{self.api_url}{endpoint}"
        headers = {"Authorization": f"Bearer {self._token}"}
        logger.debug("GET %s", url)
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.get(url, headers=headers, params=params)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"failed to get {url}: HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"failed to get {url}, {exc}") from exc
        return response.content

    def list_droplets(self) -> list[InstanceRecord]:
        payload = self._get("/droplets", params={"per_page": str(self.per_page)})
        droplets = decode_droplets(payload)
        logger.debug("Fetched %d droplets", len(droplets))
        return droplets
