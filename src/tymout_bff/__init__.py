"""Tymout BFF: Backend-For-Frontend aggregation for the Tymout web app."""

from tymout_bff.api import create_app
from tymout_bff.config import BffConfig, create_from_config, load_config
from tymout_bff.data import (
    Category,
    DeviceType,
    Event,
    ExploreRequest,
    ExploreResponse,
    SearchFilter,
    SpotlightParams,
)
from tymout_bff.directory import EventDirectory, HTTPEventDirectory
from tymout_bff.errors import EventDirectoryError, MalformedPayloadError
from tymout_bff.pipeline import (
    Call,
    ExploreAggregator,
    Failure,
    Outcome,
    Success,
    settle_all,
)

__all__ = [
    # Models
    "Category",
    "DeviceType",
    "Event",
    "ExploreRequest",
    "ExploreResponse",
    "SearchFilter",
    "SpotlightParams",
    # Protocols
    "EventDirectory",
    # Clients
    "HTTPEventDirectory",
    # Pipeline
    "Call",
    "ExploreAggregator",
    "Failure",
    "Outcome",
    "Success",
    "settle_all",
    # Errors
    "EventDirectoryError",
    "MalformedPayloadError",
    # Config / App
    "BffConfig",
    "create_app",
    "create_from_config",
    "load_config",
]
