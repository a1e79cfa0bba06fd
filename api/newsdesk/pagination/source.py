"""Data sources a paginator can read from."""

from typing import Any, Protocol, Sequence, Union, runtime_checkable


@runtime_checkable
class PaginationSource(Protocol):
    """Countable source with stable, zero-based random access.

    ``count()`` reports the number of visible items, after any limit/offset
    the source itself already applied. Indexing accepts an ``int`` or a
    contiguous ``slice``.
    """

    def count(self) -> int: ...

    def __getitem__(self, key: Union[int, slice]) -> Any: ...


class SequenceSource:
    """Adapts an in-memory sequence to the ``PaginationSource`` interface."""

    def __init__(self, items: Sequence[Any]):
        self._items = items

    def count(self) -> int:
        return len(self._items)

    def __getitem__(self, key: Union[int, slice]) -> Any:
        return self._items[key]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SequenceSource(count={len(self._items)})"


def as_source(source: Any) -> PaginationSource:
    """Return ``source`` as a ``PaginationSource``.

    Plain sequences are wrapped, since ``list.count`` takes an argument and
    does not report a size.
    """
    if isinstance(source, (list, tuple, range)):
        return SequenceSource(source)
    if not isinstance(source, PaginationSource):
        raise TypeError(
            f"{type(source).__name__} does not provide count() and item access"
        )
    return source
