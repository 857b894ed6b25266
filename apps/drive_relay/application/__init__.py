"""Drive Relay Application Layer."""
