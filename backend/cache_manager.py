# cache_manager.py
import hashlib
from dataclasses import dataclass, field
from typing import Dict, Optional

from cachetools import TTLCache
from starlette.requests import Request
from starlette.responses import Response


@dataclass
class CachedResponse:
    """Everything needed to rebuild a Response later"""
    status_code: int
    body: bytes
    headers: Dict[str, str] = field(default_factory=dict)
    media_type: Optional[str] = None

    @classmethod
    def from_response(cls, response: Response) -> "CachedResponse":
        return cls(
            status_code=response.status_code,
            body=bytes(response.body),
            headers=dict(response.headers),
            media_type=response.media_type,
        )

    def to_response(self) -> Response:
        # content-length is recomputed by Response
        headers = {k: v for k, v in self.headers.items() if k.lower() != "content-length"}
        return Response(
            content=self.body,
            status_code=self.status_code,
            headers=headers,
            media_type=self.media_type,
        )


class ResponseCache:
    """
    Short-lived in-memory response cache with per-entry expiry.

    Usage
    -----
    cache = ResponseCache(ttl_seconds=60, max_entries=128)

    key = request_key(request)          # (method, full url)
    cached = cache.get("response", key)
    if cached is None:
        response = build_response(...)
        cache.set("response", key, CachedResponse.from_response(response))
    """

    def __init__(self, ttl_seconds: int = 60, max_entries: int = 128):
        self.ttl_seconds = ttl_seconds
        self.mem = TTLCache(maxsize=max_entries, ttl=ttl_seconds)

    # ---------- helpers --------------------------------------------------
    @staticmethod
    def _hash_key(kind: str, key_tuple: tuple) -> str:
        """Stable SHA-256 hash of (kind, *key_tuple)."""
        raw = (kind, *key_tuple)
        return hashlib.sha256(repr(raw).encode()).hexdigest()

    # ---------- public API ----------------------------------------------
    def get(self, kind: str, key_tuple: tuple) -> Optional[CachedResponse]:
        """Return the cached entry, or None on miss or expiry."""
        return self.mem.get(self._hash_key(kind, key_tuple))

    def set(self, kind: str, key_tuple: tuple, obj: CachedResponse):
        self.mem[self._hash_key(kind, key_tuple)] = obj

    def clear(self):
        self.mem.clear()

    def __len__(self) -> int:
        return len(self.mem)


def request_key(request: Request) -> tuple:
    """Cache key for a request: method plus the full URL, query included."""
    return (request.method, str(request.url))
