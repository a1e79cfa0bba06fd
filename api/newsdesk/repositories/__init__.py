"""Repositories package for data access layer."""

from .news import NewsQueryResult, NewsRepository
from .redis_base import RedisRepository

__all__ = ["RedisRepository", "NewsRepository", "NewsQueryResult"]
