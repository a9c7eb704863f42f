"""
Performer Aggregator
Fans out to every configured data source and tallies models per country code
"""

import asyncio
import logging
import re
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional, Iterable, Sequence

from .data_sources.base import PerformerDataSource, Model
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# Format check only, not an ISO-3166 lookup
COUNTRY_CODE_PATTERN = re.compile(r"[A-Z]{2}")

AggregatedData = Dict[str, int]


@dataclass
class SourceResult:
    """Outcome of one source's fetch; failed sources carry no models"""
    source_name: str
    country_field: str
    models: List[Model] = field(default_factory=list)
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def normalize_country_code(value: Any) -> Optional[str]:
    """
    Trim and uppercase a raw country value

    Returns:
        The two-letter code, or None if the value is absent or not [A-Z]{2}
    """
    if not isinstance(value, str):
        return None
    code = value.strip().upper()
    if len(code) == 2 and COUNTRY_CODE_PATTERN.fullmatch(code):
        return code
    return None


def count_by_country(values: Iterable[Any]) -> AggregatedData:
    """Count valid country codes; invalid or missing values are skipped"""
    counts: AggregatedData = {}
    for value in values:
        code = normalize_country_code(value)
        if code is not None:
            counts[code] = counts.get(code, 0) + 1
    return counts


class PerformerAggregator:
    """
    Aggregates model listings from multiple data sources

    Responsibilities:
    - Dispatch every source concurrently with the shared env
    - Contain each source's failure to an empty result
    - Count models per two-letter country code
    """

    def __init__(self, data_sources: Optional[Sequence[PerformerDataSource]]):
        """
        Args:
            data_sources: Non-empty collection of data sources

        Raises:
            ConfigurationError: If no data sources are given
        """
        if not data_sources:
            raise ConfigurationError("Aggregator requires at least one data source.")
        self._data_sources = tuple(data_sources)
        logger.info(f"PerformerAggregator initialized with {len(self._data_sources)} source(s)")

    @property
    def data_sources(self) -> List[PerformerDataSource]:
        return list(self._data_sources)

    async def _fetch_isolated(self, source: PerformerDataSource, env: Any) -> SourceResult:
        """Run one source's fetch, converting any failure into an empty result"""
        try:
            models = await source.fetch_models(env)
        except Exception as e:
            logger.error(f"Error fetching data from {source.source_name}: {e!r}")
            return SourceResult(source.source_name, source.country_field, error=e)
        return SourceResult(source.source_name, source.country_field, models=list(models))

    async def fetch_all(self, env: Any) -> List[SourceResult]:
        """
        Fetch from all sources concurrently and wait for every one to settle

        Returns:
            One SourceResult per configured source, in configuration order
        """
        logger.info(f"Aggregating data from {len(self._data_sources)} source(s)...")
        return list(await asyncio.gather(
            *(self._fetch_isolated(source, env) for source in self._data_sources)
        ))

    async def get_aggregated_data(self, env: Any) -> AggregatedData:
        """
        Fetch data from all configured sources and count models per country

        Args:
            env: Settings object with provider credentials

        Returns:
            Mapping of uppercase two-letter country code to model count.
            Empty when no model carries a valid code.
        """
        results = await self.fetch_all(env)

        failed = [r.source_name for r in results if not r.ok]
        if failed:
            logger.warning(f"{len(failed)} source(s) failed and contributed no models: {', '.join(failed)}")

        country_values = [
            model.get(result.country_field) if isinstance(model, dict) else None
            for result in results
            for model in result.models
        ]
        logger.info(f"Total models fetched across all sources: {len(country_values)}")

        counts = count_by_country(country_values)

        logger.info(f"Aggregation complete. Found models in {len(counts)} unique countries.")
        return counts
