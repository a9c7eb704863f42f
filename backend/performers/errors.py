"""
Performer source errors
Raised by data sources and the aggregator; per-source errors are isolated
inside the aggregator and never reach the HTTP layer
"""

from typing import Optional


class PerformerSourceError(Exception):
    """Base class for all data source failures"""


class ConfigurationError(PerformerSourceError):
    """Missing credential, unknown source, or an empty source list"""


class RemoteAPIError(PerformerSourceError):
    """
    Provider answered with a non-success HTTP status

    Attributes:
        status_code: HTTP status returned by the provider
        reason: Reason phrase (may be empty)
        body_excerpt: First characters of the response body
    """

    BODY_EXCERPT_LENGTH = 500

    def __init__(self, source_name: str, status_code: int, reason: str = "", body: Optional[str] = None):
        self.source_name = source_name
        self.status_code = status_code
        self.reason = reason
        self.body_excerpt = (body or "")[:self.BODY_EXCERPT_LENGTH]
        super().__init__(f"{source_name} API request failed: {status_code} {reason}".rstrip())


class MalformedResponseError(PerformerSourceError):
    """Provider payload is not the structure we expect"""
