"""
Performer Data Sources
Pluggable listing provider implementations
"""

from .base import PerformerDataSource, Model
from .stripchat import StripchatSource
from .registry import (
    get_source,
    register_source,
    configure_source,
    list_sources,
    get_source_info
)

__all__ = [
    # Base classes
    'PerformerDataSource',
    'Model',

    # Implementations
    'StripchatSource',

    # Registry
    'get_source',
    'register_source',
    'configure_source',
    'list_sources',
    'get_source_info',
]
