"""Drive controllers."""
