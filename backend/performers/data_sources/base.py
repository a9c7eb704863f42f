"""
Base class for performer data sources
Defines the interface that all listing providers must implement
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional


# One provider record. Only the country field is read by the aggregator,
# everything else is provider-specific.
Model = Dict[str, Any]


class PerformerDataSource(ABC):
    """
    Abstract base class for performer listing providers

    All providers must inherit from this class and implement fetch_models.
    The aggregator only ever holds this type, so adding a provider never
    touches aggregation logic.
    """

    #: Name of the record field holding the two-letter country code
    country_field: str = "countryCode"

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the data source with optional configuration

        Args:
            config: Provider-specific configuration (api_url, timeout, transport, etc.)
        """
        self.config = config or {}

    @abstractmethod
    async def fetch_models(self, env: Any) -> List[Model]:
        """
        Fetch the current model listing from the provider

        Args:
            env: Settings object holding provider credentials. Read only.

        Returns:
            List of model records, unaltered

        Raises:
            ConfigurationError: A required credential is missing
            RemoteAPIError: Provider returned a non-success status
            MalformedResponseError: Provider payload has the wrong shape
        """
        pass

    @property
    @abstractmethod
    def source_name(self) -> str:
        """
        Human-readable name of this data source

        Returns:
            Name like "Stripchat"
        """
        pass
