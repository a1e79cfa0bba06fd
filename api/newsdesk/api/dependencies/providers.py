"""Dependency providers for repositories and services."""

from newsdesk.config.settings import get_settings
from newsdesk.db.redis import get_redis_client
from newsdesk.repositories.news import NewsRepository
from newsdesk.services.extensions import ExtensionLoadedCondition, lookup_from_keys


def get_news_repository() -> NewsRepository:
    """News repository on the shared Redis client."""
    return NewsRepository(get_redis_client())


def get_extension_condition() -> ExtensionLoadedCondition:
    """Extension condition answering from the configured extension keys."""
    return ExtensionLoadedCondition(
        lookup_from_keys(get_settings().loaded_extension_keys)
    )
