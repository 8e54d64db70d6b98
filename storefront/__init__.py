"""Storefront backend: product catalog, cart aggregate and view routes."""

__version__ = "1.0.0"
