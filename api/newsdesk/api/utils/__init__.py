"""API utilities."""

from .pagination import PaginatedResponse, build_paginated_response

__all__ = ["PaginatedResponse", "build_paginated_response"]
