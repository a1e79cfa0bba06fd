"""Pagination of countable query results."""

from .exceptions import CURRENT_PAGE_LOWER_THAN_ONE, InvalidArgumentError
from .pagination import NumberedPagination, SimplePagination
from .paginator import DEFAULT_ITEMS_PER_PAGE, QueryResultPaginator
from .source import PaginationSource, SequenceSource, as_source

__all__ = [
    "QueryResultPaginator",
    "DEFAULT_ITEMS_PER_PAGE",
    "SimplePagination",
    "NumberedPagination",
    "PaginationSource",
    "SequenceSource",
    "as_source",
    "InvalidArgumentError",
    "CURRENT_PAGE_LOWER_THAN_ONE",
]
