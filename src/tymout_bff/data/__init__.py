"""Data models for the Explore BFF."""

from tymout_bff.data.models import (
    DEVICE_TYPE_HEADER,
    PERSONALIZED_VIEW,
    Category,
    DeviceType,
    Event,
    ExploreRequest,
    ExploreResponse,
    SearchFilter,
    SpotlightParams,
    normalize_interests,
    resolve_device_type,
)

__all__ = [
    "Category",
    "DEVICE_TYPE_HEADER",
    "DeviceType",
    "Event",
    "ExploreRequest",
    "ExploreResponse",
    "PERSONALIZED_VIEW",
    "SearchFilter",
    "SpotlightParams",
    "normalize_interests",
    "resolve_device_type",
]
