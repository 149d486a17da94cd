"""Factory functions to create components from configuration."""

from tymout_bff.config.models import BffConfig, EventDirectoryConfig, ExploreConfig
from tymout_bff.directory.base import EventDirectory
from tymout_bff.directory.http import HTTPEventDirectory
from tymout_bff.pipeline.explore import ExploreAggregator


def create_directory(config: EventDirectoryConfig) -> EventDirectory:
    """Create an Event Directory client from config."""
    return HTTPEventDirectory(base_url=config.base_url, timeout=config.timeout_seconds)


def create_aggregator(config: ExploreConfig, directory: EventDirectory) -> ExploreAggregator:
    """Create the Explore aggregator from config."""
    return ExploreAggregator(directory, spotlight_limit=config.spotlight_limit)


def create_from_config(config: BffConfig) -> ExploreAggregator:
    """Create a fully wired aggregator from root config.

    Args:
        config: Root configuration.

    Returns:
        ExploreAggregator backed by an HTTP Event Directory client.
    """
    directory = create_directory(config.event_directory)
    return create_aggregator(config.explore, directory)
