"""
Performer Data Source Registry
Maps the names used in DATA_SOURCES to provider classes
"""

import logging
from typing import Dict, Any, Optional, Type, List

from .base import PerformerDataSource
from .stripchat import StripchatSource
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


_SOURCES: Dict[str, Type[PerformerDataSource]] = {
    'stripchat': StripchatSource,
}

# Non-secret per-provider settings (api_url, timeout); filled at app startup
_SOURCE_CONFIGS: Dict[str, Dict[str, Any]] = {}


def _source_class(name: str) -> Type[PerformerDataSource]:
    try:
        return _SOURCES[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown performer source: '{name}'. "
            f"Available sources: {', '.join(_SOURCES)}"
        ) from None


def register_source(name: str, source_class: Type[PerformerDataSource]) -> None:
    """
    Make another listing provider selectable through DATA_SOURCES

    Example:
        register_source('chaturbate', ChaturbateSource)
    """
    if not issubclass(source_class, PerformerDataSource):
        raise TypeError(
            f"{source_class.__name__} must inherit from PerformerDataSource"
        )

    _SOURCES[name] = source_class
    logger.info(f"Registered performer source: {name}")


def configure_source(name: str, config: Dict[str, Any]) -> None:
    """
    Store endpoint/timeout settings for a provider

    Credentials never go here; they travel with env on every fetch.
    """
    _source_class(name)
    _SOURCE_CONFIGS[name] = config
    logger.info(f"Configured source: {name}")


def get_source(name: str, config: Optional[Dict[str, Any]] = None) -> PerformerDataSource:
    """
    Instantiate a provider by its DATA_SOURCES name

    An explicit config wins over the one stored by configure_source.

    Raises:
        ConfigurationError: Name is not registered
    """
    source_class = _source_class(name)
    instance = source_class(config=config or _SOURCE_CONFIGS.get(name, {}))
    logger.info(f"Created {name} source instance ({instance.source_name})")
    return instance


def list_sources() -> List[str]:
    return list(_SOURCES)


def get_source_info() -> Dict[str, Dict[str, Any]]:
    """Class, display name, country field and configured flag per provider"""
    info = {}
    for name, source_class in _SOURCES.items():
        source = source_class(config=_SOURCE_CONFIGS.get(name, {}))
        info[name] = {
            'class': source_class.__name__,
            'name': source.source_name,
            'country_field': source.country_field,
            'configured': name in _SOURCE_CONFIGS
        }
    return info
