"""Explore page aggregation."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from tymout_bff.data import DeviceType, ExploreRequest, ExploreResponse
from tymout_bff.directory.base import EventDirectory
from tymout_bff.pipeline.settle import Call, Outcome, settle_all

COMPOSITION_ERROR = "Failed to fetch explore data"

logger = logging.getLogger(__name__)


class ExploreAggregator:
    """Builds the Explore page payload from three Event Directory calls.

    Flow:
    1. Normalize the raw query and headers into an ExploreRequest
    2. Search, categories and spotlight run concurrently
    3. Each failed call contributes an empty list
    4. Results are composed into a single ExploreResponse

    The handler never raises. If composing the response fails, the same
    shape is returned with empty lists and ``error``/``message`` set.

    Args:
        directory: Event Directory client.
        spotlight_limit: Max featured events requested from the directory.
    """

    def __init__(self, directory: EventDirectory, *, spotlight_limit: int = 5) -> None:
        self._directory = directory
        self._spotlight_limit = spotlight_limit

    async def handle(
        self,
        raw_query: Mapping[str, Sequence[str]],
        raw_headers: Mapping[str, str] | None = None,
    ) -> ExploreResponse:
        """Aggregate an inbound Explore request.

        Args:
            raw_query: Query parameter name to all of its values.
            raw_headers: Request headers (for ``x-device-type``).

        Returns:
            ExploreResponse whose lists are always present.
        """
        request: ExploreRequest | None = None
        try:
            request = ExploreRequest.from_raw(raw_query, raw_headers)
            return await self.run(request)
        except Exception as e:
            logger.exception(f"Explore aggregation failed: {e}")
            return ExploreResponse(
                device_type=request.device_type if request else DeviceType.DESKTOP,
                error=COMPOSITION_ERROR,
                message=str(e),
            )

    async def run(self, request: ExploreRequest) -> ExploreResponse:
        """Fan out to the directory and compose the response."""
        device = request.device_type
        search_filter = request.search_filter()
        spotlight = request.spotlight_params(self._spotlight_limit)

        logger.info(
            f"Explore request [{device}] city={request.city} view={request.view} "
            f"tags={list(request.tags)}"
        )

        events, categories, featured = await settle_all(
            [
                Call(
                    "events",
                    lambda: self._directory.search_events(search_filter, device_type=device),
                    list,
                ),
                Call(
                    "categories",
                    lambda: self._directory.list_categories(device_type=device),
                    list,
                ),
                Call(
                    "spotlight",
                    lambda: self._directory.get_spotlight(spotlight, device_type=device),
                    list,
                ),
            ]
        )

        response = ExploreResponse(
            events=_collapse(events),
            categories=_collapse(categories),
            spotlight=_collapse(featured),
            device_type=device,
        )

        logger.info(
            f"Explore response [{device}] city={request.city}: "
            f"events={len(response.events)} categories={len(response.categories)} "
            f"spotlight={len(response.spotlight)}"
        )
        return response


def _collapse(outcome: Outcome[Any]) -> list[Any]:
    """Reduce an outcome to a list, logging failures and non-list values."""
    if not outcome.ok:
        logger.error(f"Error fetching {outcome.label}: {outcome.error}")
    else:
        logger.debug(f"Fetched {outcome.label} in {outcome.duration_seconds:.3f}s")

    value = outcome.value
    if not isinstance(value, list):
        logger.error(f"Discarding {outcome.label}: expected list, got {type(value).__name__}")
        return []
    return value
