"""OAuth relay application package."""
