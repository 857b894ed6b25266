"""OAuth relay controllers."""
