"""Background tasks."""

from apps.drive_relay.presentation.background.sweep_loop import SweepLoop

__all__ = ["SweepLoop"]
