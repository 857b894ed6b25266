"""Proxy exceptions."""

from apps.drive_relay.application.proxy.exceptions.proxy import ProxyPayloadTooLargeError

__all__ = ["ProxyPayloadTooLargeError"]
