"""Page navigation built on top of a paginator."""

from typing import List, Optional, Tuple

from newsdesk.pagination.paginator import QueryResultPaginator

DEFAULT_MAXIMUM_NUMBER_OF_LINKS = 10


class SimplePagination:
    """Previous/next navigation and record numbers for the current page."""

    def __init__(self, paginator: QueryResultPaginator):
        self.paginator = paginator

    @property
    def previous_page_number(self) -> Optional[int]:
        previous_page = self.paginator.get_current_page_number() - 1
        return previous_page if previous_page >= self.first_page_number else None

    @property
    def next_page_number(self) -> Optional[int]:
        next_page = self.paginator.get_current_page_number() + 1
        return next_page if next_page <= self.last_page_number else None

    @property
    def first_page_number(self) -> int:
        return 1

    @property
    def last_page_number(self) -> int:
        return self.paginator.get_number_of_pages()

    @property
    def start_record_number(self) -> int:
        """1-based number of the first record shown, 0 when nothing is shown."""
        if self.paginator.source_size == 0:
            return 0
        return self.paginator.get_key_of_first_paginated_item() + 1

    @property
    def end_record_number(self) -> int:
        """1-based number of the last record shown, 0 when nothing is shown."""
        if self.paginator.source_size == 0:
            return 0
        return self.paginator.get_key_of_last_paginated_item() + 1

    @property
    def all_page_numbers(self) -> List[int]:
        return list(range(self.first_page_number, self.last_page_number + 1))


class NumberedPagination(SimplePagination):
    """Pagination showing a sliding window of page links around the current page.

    At most ``maximum_number_of_links`` page numbers are listed. The window is
    centred on the current page and shifted inwards when it would run past
    the first or the last page.
    """

    def __init__(
        self,
        paginator: QueryResultPaginator,
        maximum_number_of_links: int = DEFAULT_MAXIMUM_NUMBER_OF_LINKS,
    ):
        super().__init__(paginator)
        if maximum_number_of_links <= 0:
            maximum_number_of_links = DEFAULT_MAXIMUM_NUMBER_OF_LINKS
        self.maximum_number_of_links = maximum_number_of_links

    def _display_range(self) -> Tuple[int, int]:
        current_page = self.paginator.get_current_page_number()
        number_of_pages = self.paginator.get_number_of_pages()
        number_of_links = min(self.maximum_number_of_links, number_of_pages)

        delta = number_of_links // 2
        start = current_page - delta
        end = current_page + delta - (1 if number_of_links % 2 == 0 else 0)

        if start < 1:
            end -= start - 1
        if end > number_of_pages:
            start -= end - number_of_pages

        return max(start, 1), min(end, number_of_pages)

    @property
    def display_range_start(self) -> int:
        return self._display_range()[0]

    @property
    def display_range_end(self) -> int:
        return self._display_range()[1]

    @property
    def has_less_pages(self) -> bool:
        """Whether pages exist before the window beyond the first page link."""
        return self.display_range_start > 2

    @property
    def has_more_pages(self) -> bool:
        """Whether pages exist after the window beyond the last page link."""
        return self.display_range_end + 1 < self.last_page_number

    @property
    def all_page_numbers(self) -> List[int]:
        start, end = self._display_range()
        return list(range(start, end + 1))
