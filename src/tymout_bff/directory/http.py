"""Event Directory client over HTTP."""

import logging
import os
from typing import Any

import httpx

from tymout_bff.data import (
    DEVICE_TYPE_HEADER,
    Category,
    DeviceType,
    Event,
    SearchFilter,
    SpotlightParams,
)
from tymout_bff.errors import MalformedPayloadError

DEFAULT_EVENT_SERVICE_URL = "http://localhost:3002"

logger = logging.getLogger(__name__)


class HTTPEventDirectory:
    """Talks to the Event Directory REST service.

    Every call opens its own ``httpx.AsyncClient`` so concurrent calls share
    nothing. Non-2xx responses raise ``httpx.HTTPStatusError``; a 2xx body
    that is not a JSON array raises ``MalformedPayloadError``.

    Args:
        base_url: Service root (defaults to EVENT_SERVICE_URL env var, then
            http://localhost:3002).
        timeout: Per-call timeout in seconds.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = (
            base_url or os.environ.get("EVENT_SERVICE_URL") or DEFAULT_EVENT_SERVICE_URL
        ).rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def search_events(
        self,
        search_filter: SearchFilter,
        *,
        device_type: DeviceType | None = None,
    ) -> list[Event]:
        return await self._get_list(
            "/events/search", params=search_filter.to_params(), device_type=device_type
        )

    async def list_categories(self, *, device_type: DeviceType | None = None) -> list[Category]:
        return await self._get_list("/events/categories", device_type=device_type)

    async def get_spotlight(
        self,
        params: SpotlightParams,
        *,
        device_type: DeviceType | None = None,
    ) -> list[Event]:
        return await self._get_list(
            "/events/spotlight", params=params.to_params(), device_type=device_type
        )

    async def _get_list(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        device_type: DeviceType | None = None,
    ) -> list[Any]:
        """GET a path and return its body, which must be a JSON array."""
        headers: dict[str, str] = {}
        if device_type is not None:
            headers[DEVICE_TYPE_HEADER] = str(device_type)

        url = f"{self._base_url}{path}"
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            response = await client.get(url, params=params, headers=headers)
        response.raise_for_status()

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedPayloadError(path, "non-JSON body") from e
        if not isinstance(data, list):
            raise MalformedPayloadError(path, type(data).__name__)

        logger.debug(f"GET {path} returned {len(data)} items")
        return data
