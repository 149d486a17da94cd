from typing import Protocol

from tymout_bff.data import Category, DeviceType, Event, SearchFilter, SpotlightParams


class EventDirectory(Protocol):
    """Interface for the Event Directory service."""

    async def search_events(
        self,
        search_filter: SearchFilter,
        *,
        device_type: DeviceType | None = None,
    ) -> list[Event]:
        """Return events matching the filter.

        Args:
            search_filter: Filter fields forwarded as query parameters.
            device_type: Client device class, forwarded for observability.

        Returns:
            Events as returned by the directory.
        """
        ...

    async def list_categories(self, *, device_type: DeviceType | None = None) -> list[Category]:
        """Return all event categories."""
        ...

    async def get_spotlight(
        self,
        params: SpotlightParams,
        *,
        device_type: DeviceType | None = None,
    ) -> list[Event]:
        """Return featured events, at most ``params.limit`` of them."""
        ...
