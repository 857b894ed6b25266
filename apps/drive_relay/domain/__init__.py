"""Drive Relay Domain Layer."""
