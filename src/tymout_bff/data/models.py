"""Core data models for the Explore BFF."""

import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

PERSONALIZED_VIEW = "Only For You"
DEVICE_TYPE_HEADER = "x-device-type"

# Events and categories are passed through untouched.
Event = dict[str, Any]
Category = dict[str, Any]


class DeviceType(StrEnum):
    """Client device class, used for logging only."""

    MOBILE = "mobile"
    DESKTOP = "desktop"

    @classmethod
    def parse(cls, value: str | None) -> "DeviceType | None":
        """Return the matching member, or None for missing/unknown values."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class SearchFilter:
    """Parameters forwarded to ``GET /events/search``."""

    query: str | None = None
    tags: tuple[str, ...] = ()
    view: str | None = None
    time_filter: str | None = None
    distance: str | None = None
    sort_by: str | None = None
    city: str | None = None
    user_interests: tuple[str, ...] | None = None

    def to_params(self) -> dict[str, str | list[str]]:
        """Serialize to query parameters, omitting absent fields.

        Sequences use bracketed keys (``tags[]``) so a single value still
        reads as an array on the receiving end.
        """
        params: dict[str, str | list[str]] = {}
        scalars = {
            "query": self.query,
            "view": self.view,
            "timeFilter": self.time_filter,
            "distance": self.distance,
            "sortBy": self.sort_by,
            "city": self.city,
        }
        for key, value in scalars.items():
            if value is not None:
                params[key] = value
        if self.tags:
            params["tags[]"] = list(self.tags)
        if self.user_interests:
            params["userInterests[]"] = list(self.user_interests)
        return params


@dataclass(frozen=True)
class SpotlightParams:
    """Parameters forwarded to ``GET /events/spotlight``."""

    city: str | None = None
    limit: int = 5

    def to_params(self) -> dict[str, str | int]:
        params: dict[str, str | int] = {"limit": self.limit}
        if self.city is not None:
            params["city"] = self.city
        return params


@dataclass(frozen=True)
class ExploreRequest:
    """A user's search/filter intent for the Explore page."""

    query: str | None = None
    tags: tuple[str, ...] = ()
    view: str | None = None
    time_filter: str | None = None
    distance: str | None = None
    sort_by: str | None = None
    city: str | None = None
    user_interests: tuple[str, ...] | None = None
    device_type: DeviceType = DeviceType.DESKTOP

    @property
    def is_personalized(self) -> bool:
        return self.view == PERSONALIZED_VIEW

    @classmethod
    def from_raw(
        cls,
        raw_query: Mapping[str, Sequence[str]],
        raw_headers: Mapping[str, str] | None = None,
    ) -> "ExploreRequest":
        """Build a request from multi-valued query parameters and headers.

        Args:
            raw_query: Query parameter name to all of its values, in order.
            raw_headers: Request headers. Lookup of the device-type header is
                case-insensitive.

        Returns:
            Normalized ExploreRequest.
        """
        interests = _values(raw_query, "userInterests")
        return cls(
            query=_first(raw_query, "q"),
            tags=tuple(t for t in _values(raw_query, "tag") if t.strip()),
            view=_first(raw_query, "view"),
            time_filter=_first(raw_query, "timeFilter"),
            distance=_first(raw_query, "distance"),
            sort_by=_first(raw_query, "sort"),
            city=_first(raw_query, "city"),
            user_interests=normalize_interests(interests) or None,
            device_type=resolve_device_type(_first(raw_query, "deviceType"), raw_headers),
        )

    def search_filter(self) -> SearchFilter:
        """Outbound search filter; interests only ride along on the personalized view."""
        return SearchFilter(
            query=self.query,
            tags=self.tags,
            view=self.view,
            time_filter=self.time_filter,
            distance=self.distance,
            sort_by=self.sort_by,
            city=self.city,
            user_interests=self.user_interests if self.is_personalized else None,
        )

    def spotlight_params(self, limit: int) -> SpotlightParams:
        return SpotlightParams(city=self.city, limit=limit)


@dataclass
class ExploreResponse:
    """Aggregated payload returned by ``GET /explore``."""

    events: list[Event] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    spotlight: list[Event] = field(default_factory=list)
    device_type: DeviceType = DeviceType.DESKTOP
    timestamp: int = field(default_factory=lambda: int(time.time() * 1000))
    error: str | None = None
    message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "events": self.events,
            "categories": self.categories,
            "spotlight": self.spotlight,
            "timestamp": self.timestamp,
            "deviceType": str(self.device_type),
        }
        if self.error is not None:
            body["error"] = self.error
            body["message"] = self.message
        return body


def normalize_interests(values: Sequence[str]) -> tuple[str, ...]:
    """Turn repeated values or a single comma-separated string into a sequence.

    A lone value is split on commas; repeated values are kept as given.
    Empty entries left by stray commas are dropped.
    """
    if len(values) == 1:
        values = values[0].split(",")
    return tuple(v.strip() for v in values if v.strip())


def resolve_device_type(
    explicit: str | None,
    headers: Mapping[str, str] | None = None,
) -> DeviceType:
    """Explicit value first, then the ``x-device-type`` header, else desktop."""
    parsed = DeviceType.parse(explicit)
    if parsed is not None:
        return parsed
    if headers:
        for name, value in headers.items():
            if name.lower() == DEVICE_TYPE_HEADER:
                parsed = DeviceType.parse(value)
                if parsed is not None:
                    return parsed
    return DeviceType.DESKTOP


def _values(raw: Mapping[str, Sequence[str]], key: str) -> list[str]:
    values = raw.get(key)
    if values is None:
        return []
    if isinstance(values, str):
        return [values]
    return list(values)


def _first(raw: Mapping[str, Sequence[str]], key: str) -> str | None:
    values = _values(raw, key)
    return values[0] if values else None
