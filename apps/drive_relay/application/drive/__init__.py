"""Drive application package."""
