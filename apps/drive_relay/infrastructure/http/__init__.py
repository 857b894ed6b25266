"""HTTP adapters."""

from apps.drive_relay.infrastructure.http.client import close_http_client, get_http_client
from apps.drive_relay.infrastructure.http.upstream_fetcher_httpx import (
    HttpxUpstreamFetcher,
    declared_length,
    parse_content_length,
)

__all__ = [
    "HttpxUpstreamFetcher",
    "close_http_client",
    "declared_length",
    "get_http_client",
    "parse_content_length",
]
