"""
Performers Module
Per-country performer counts aggregated from pluggable listing providers

Public API:
    - PerformerAggregator: Fan-out fetch and country tally
    - Data sources: stripchat
    - Router: FastAPI endpoints
"""

from .performer_aggregator import (
    PerformerAggregator,
    SourceResult,
    AggregatedData,
    normalize_country_code,
    count_by_country
)
from .performer_router import router
from .errors import (
    PerformerSourceError,
    ConfigurationError,
    RemoteAPIError,
    MalformedResponseError
)
from .data_sources.base import PerformerDataSource, Model
from .data_sources.registry import (
    get_source,
    register_source,
    configure_source,
    list_sources
)

__all__ = [
    # Main orchestrator
    'PerformerAggregator',
    'SourceResult',
    'AggregatedData',
    'normalize_country_code',
    'count_by_country',

    # Data models
    'PerformerDataSource',
    'Model',

    # Errors
    'PerformerSourceError',
    'ConfigurationError',
    'RemoteAPIError',
    'MalformedResponseError',

    # Registry functions
    'get_source',
    'register_source',
    'configure_source',
    'list_sources',

    # FastAPI router
    'router',
]

__version__ = '0.1.0'
