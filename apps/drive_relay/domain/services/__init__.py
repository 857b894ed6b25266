"""Domain Services."""

from apps.drive_relay.domain.services.file_classifier import (
    DEFAULT_CONTENT_TYPE,
    FileKind,
    classify_mime_type,
    format_file_size,
    resolve_content_type,
)
from apps.drive_relay.domain.services.proxy_target import (
    is_host_allowed,
    resolve_proxy_target,
    rewrite_share_link,
)

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "FileKind",
    "classify_mime_type",
    "format_file_size",
    "resolve_content_type",
    "is_host_allowed",
    "resolve_proxy_target",
    "rewrite_share_link",
]
