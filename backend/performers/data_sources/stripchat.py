"""
Stripchat listing provider
Fetches the online model list from the Stripchat models-ext API
"""

import logging
from typing import List, Dict, Any, Optional

import httpx

from .base import PerformerDataSource, Model
from ..errors import ConfigurationError, RemoteAPIError, MalformedResponseError

logger = logging.getLogger(__name__)

STRIPCHAT_API_URL = "https://go.rmhfrtnd.com/app/models-ext/models"
DEFAULT_TIMEOUT = 30.0  # seconds


class StripchatSource(PerformerDataSource):
    """
    Stripchat models-ext API

    Credentials are read from env at call time:
        STRIPCHAT_USERID  - sent as the userId query parameter
        STRIPCHAT_BEARER  - sent as a bearer Authorization header

    Config keys:
        api_url:   Endpoint override
        timeout:   Request timeout in seconds
        transport: httpx transport (tests use httpx.MockTransport)
    """

    country_field = "modelsCountry"

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        self.api_url = self.config.get('api_url', STRIPCHAT_API_URL)
        self.timeout = self.config.get('timeout', DEFAULT_TIMEOUT)
        self.transport = self.config.get('transport')

    @property
    def source_name(self) -> str:
        return "Stripchat"

    async def fetch_models(self, env: Any) -> List[Model]:
        user_id = getattr(env, 'STRIPCHAT_USERID', None)
        bearer_token = getattr(env, 'STRIPCHAT_BEARER', None)

        if not user_id:
            raise ConfigurationError("Stripchat User ID secret (STRIPCHAT_USERID) is not configured.")
        if not bearer_token:
            raise ConfigurationError("Stripchat Bearer Token secret (STRIPCHAT_BEARER) is not configured.")

        logger.info(f"Fetching Stripchat models from: {self.api_url}")

        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
            follow_redirects=True,
        ) as client:
            response = await client.get(
                self.api_url,
                params={'userId': user_id},
                headers={
                    'Authorization': f"Bearer {bearer_token}",
                    'Accept': 'application/json',
                },
            )

        if not response.is_success:
            logger.error(f"Stripchat API request failed with status {response.status_code}: {response.text[:200]}")
            raise RemoteAPIError(
                self.source_name,
                status_code=response.status_code,
                reason=response.reason_phrase,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Stripchat API returned a non-JSON body: {e}") from e

        # Basic validation of the response structure
        if not isinstance(data, dict) or not isinstance(data.get('models'), list):
            logger.error("Stripchat API response is missing or has invalid \"models\" array")
            raise MalformedResponseError("Invalid response structure from Stripchat API.")

        models = data['models']
        logger.info(f"Successfully fetched {len(models)} models from Stripchat.")
        return models
