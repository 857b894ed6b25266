"""Drive Relay API."""
