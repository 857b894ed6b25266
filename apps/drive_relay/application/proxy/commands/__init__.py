"""Proxy commands."""

from apps.drive_relay.application.proxy.commands.fetch import ProxyFetchCommand

__all__ = ["ProxyFetchCommand"]
