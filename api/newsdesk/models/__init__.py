"""Domain models."""

from .news import News, NewsDemand, OrderDirection

__all__ = ["News", "NewsDemand", "OrderDirection"]
