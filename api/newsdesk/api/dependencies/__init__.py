"""FastAPI dependency providers."""

from .providers import get_extension_condition, get_news_repository

__all__ = ["get_news_repository", "get_extension_condition"]
