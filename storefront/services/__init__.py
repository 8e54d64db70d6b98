"""Shared services: money helpers and domain models."""
