"""API v1 endpoints."""

from . import extensions, health, news

__all__ = ["extensions", "health", "news"]
