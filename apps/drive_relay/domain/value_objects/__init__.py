"""Domain Value Objects."""

from apps.drive_relay.domain.value_objects.composite_state import (
    STATE_SEPARATOR,
    CompositeState,
)
from apps.drive_relay.domain.value_objects.file_id import FileId

__all__ = ["CompositeState", "FileId", "STATE_SEPARATOR"]
