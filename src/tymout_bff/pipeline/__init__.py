"""Fan-out/fan-in pipeline for the Explore page."""

from tymout_bff.pipeline.explore import COMPOSITION_ERROR, ExploreAggregator
from tymout_bff.pipeline.settle import Call, Failure, Outcome, Success, settle_all

__all__ = [
    "COMPOSITION_ERROR",
    "Call",
    "ExploreAggregator",
    "Failure",
    "Outcome",
    "Success",
    "settle_all",
]
