"""Pagination response container for API endpoints."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from newsdesk.pagination import NumberedPagination, QueryResultPaginator
from newsdesk.pagination.pagination import DEFAULT_MAXIMUM_NUMBER_OF_LINKS


@dataclass
class PaginatedResponse:
    """Paginated response container."""

    items: List[Any]
    total: int
    page: int
    items_per_page: int
    total_pages: int
    first_key: int
    last_key: int
    start_record: int
    end_record: int
    previous_page: Optional[int]
    next_page: Optional[int]
    page_numbers: List[int] = field(default_factory=list)
    has_less_pages: bool = False
    has_more_pages: bool = False
    limit: int = 0
    offset: int = 0

    @property
    def has_next(self) -> bool:
        return self.next_page is not None

    @property
    def has_previous(self) -> bool:
        return self.previous_page is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": self.items,
            "pagination": {
                "total": self.total,
                "page": self.page,
                "itemsPerPage": self.items_per_page,
                "totalPages": self.total_pages,
                "firstKey": self.first_key,
                "lastKey": self.last_key,
                "startRecord": self.start_record,
                "endRecord": self.end_record,
                "previousPage": self.previous_page,
                "nextPage": self.next_page,
                "hasNext": self.has_next,
                "hasPrevious": self.has_previous,
                "pageNumbers": self.page_numbers,
                "hasLessPages": self.has_less_pages,
                "hasMorePages": self.has_more_pages,
                "limit": self.limit,
                "offset": self.offset,
            },
        }


def build_paginated_response(
    paginator: QueryResultPaginator,
    maximum_number_of_links: int = DEFAULT_MAXIMUM_NUMBER_OF_LINKS,
    serialize: Optional[Callable[[Any], Any]] = None,
) -> PaginatedResponse:
    """Collect the current page of ``paginator`` and its navigation."""
    pagination = NumberedPagination(paginator, maximum_number_of_links)
    items = paginator.get_paginated_items()
    if serialize is not None:
        items = [serialize(item) for item in items]

    return PaginatedResponse(
        items=items,
        total=paginator.source_size,
        page=paginator.get_current_page_number(),
        items_per_page=paginator.items_per_page,
        total_pages=paginator.get_number_of_pages(),
        first_key=paginator.get_key_of_first_paginated_item(),
        last_key=paginator.get_key_of_last_paginated_item(),
        start_record=pagination.start_record_number,
        end_record=pagination.end_record_number,
        previous_page=pagination.previous_page_number,
        next_page=pagination.next_page_number,
        page_numbers=pagination.all_page_numbers,
        has_less_pages=pagination.has_less_pages,
        has_more_pages=pagination.has_more_pages,
        limit=paginator.limit,
        offset=paginator.offset,
    )
