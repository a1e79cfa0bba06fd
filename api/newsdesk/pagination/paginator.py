"""Paginator over a countable query result.

The source handed to the paginator may already be windowed by an upstream
``limit``/``offset`` (for example a repository query built from a
``NewsDemand``). The paginator only ever indexes into that windowed source:
``count()`` is taken as the total, and every key it reports is relative to
the source. The upstream ``limit``/``offset`` values are kept so callers can
translate keys back to row numbers of the unwindowed data.
"""

from math import ceil
from typing import Any, List, Optional

from newsdesk.core.logging import get_logger
from newsdesk.pagination.exceptions import (
    CURRENT_PAGE_LOWER_THAN_ONE,
    InvalidArgumentError,
)
from newsdesk.pagination.source import PaginationSource, as_source

logger = get_logger(__name__)

DEFAULT_ITEMS_PER_PAGE = 10


class QueryResultPaginator:
    """Computes the page window and paginated items for a source."""

    def __init__(
        self,
        source: Any,
        current_page_number: int = 1,
        items_per_page: int = DEFAULT_ITEMS_PER_PAGE,
        limit: int = 0,
        offset: int = 0,
    ):
        self._items_per_page = (
            items_per_page if items_per_page > 0 else DEFAULT_ITEMS_PER_PAGE
        )
        self._limit = max(0, limit)
        self._offset = max(0, offset)
        self._requested_page_number = (
            current_page_number if current_page_number >= 1 else 1
        )
        self._paginated_items: Optional[List[Any]] = None

        self.source = source

    # ------------------------------------------------------------------
    # Source
    # ------------------------------------------------------------------

    @property
    def source(self) -> PaginationSource:
        return self._source

    @source.setter
    def source(self, source: Any) -> None:
        """Replace the source, recount it and re-clamp the current page.

        If counting the new source fails, the previous source stays in place.
        """
        new_source = as_source(source)
        source_size = new_source.count()

        self._source = new_source
        self._source_size = source_size
        self._number_of_pages = max(1, ceil(source_size / self._items_per_page))
        self._current_page_number = self._clamp(self._requested_page_number)
        self._paginated_items = None

    # ------------------------------------------------------------------
    # Window metadata
    # ------------------------------------------------------------------

    @property
    def items_per_page(self) -> int:
        return self._items_per_page

    @property
    def limit(self) -> int:
        """Limit the source query applied upstream, 0 means none."""
        return self._limit

    @property
    def offset(self) -> int:
        """Offset the source query applied upstream."""
        return self._offset

    @property
    def source_size(self) -> int:
        return self._source_size

    def get_number_of_pages(self) -> int:
        return self._number_of_pages

    def get_current_page_number(self) -> int:
        return self._current_page_number

    def get_key_of_first_paginated_item(self) -> int:
        if self._source_size == 0:
            return 0
        return (self._current_page_number - 1) * self._items_per_page

    def get_key_of_last_paginated_item(self) -> int:
        if self._source_size == 0:
            return 0
        return min(
            self.get_key_of_first_paginated_item() + self._items_per_page - 1,
            self._source_size - 1,
        )

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def get_paginated_items(self) -> List[Any]:
        """Items of the current page, in source order."""
        if self._paginated_items is None:
            self._paginated_items = self._read_current_page()
        return list(self._paginated_items)

    def _read_current_page(self) -> List[Any]:
        if self._source_size == 0:
            return []

        first = self.get_key_of_first_paginated_item()
        last = self.get_key_of_last_paginated_item()
        return list(self._source[first : last + 1])

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def with_current_page_number(self, current_page_number: int) -> None:
        """Move to another page.

        Page numbers below 1 are rejected. Page numbers past the last page
        are clamped to the last page.
        """
        if current_page_number < 1:
            raise InvalidArgumentError(
                f"Current page number must be greater than 0, "
                f"got {current_page_number}",
                CURRENT_PAGE_LOWER_THAN_ONE,
            )

        self._requested_page_number = current_page_number
        self._current_page_number = self._clamp(current_page_number)
        self._paginated_items = None

    def _clamp(self, page_number: int) -> int:
        if page_number > self._number_of_pages:
            logger.debug(
                f"Page {page_number} exceeds {self._number_of_pages} pages, "
                "using last page",
                extra={"page": page_number, "items_per_page": self._items_per_page},
            )
            return self._number_of_pages
        return page_number

    def __repr__(self) -> str:
        return (
            f"QueryResultPaginator(page={self._current_page_number}/"
            f"{self._number_of_pages}, items_per_page={self._items_per_page}, "
            f"source_size={self._source_size}, limit={self._limit}, "
            f"offset={self._offset})"
        )
