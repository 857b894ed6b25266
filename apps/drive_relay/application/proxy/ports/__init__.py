"""Proxy ports."""

from apps.drive_relay.application.proxy.ports.upstream_fetcher import UpstreamFetcher

__all__ = ["UpstreamFetcher"]
