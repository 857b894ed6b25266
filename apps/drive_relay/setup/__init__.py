"""Application setup (config, DI, logging)."""
