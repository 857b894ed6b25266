"""Proxy application package."""
