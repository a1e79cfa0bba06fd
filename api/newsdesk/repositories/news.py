"""News repository backed by Redis sorted sets.

Each record is stored as JSON under ``news:{uid}``. Ordering indexes are
sorted sets holding uids: ``news:all`` scored by uid and
``news:by_published`` scored by publish timestamp.
"""

from typing import Any, Dict, List, Optional, Union

from newsdesk.core.logging import get_logger
from newsdesk.models.news import News, NewsDemand, OrderDirection
from newsdesk.repositories.redis_base import RedisRepository

logger = get_logger(__name__)

NEWS_KEY = "news:{uid}"
INDEX_BY_UID = "news:all"
INDEX_BY_PUBLISHED = "news:by_published"

# Fields that can be ordered by, mapped to their index
ORDER_INDEXES: Dict[str, str] = {
    "uid": INDEX_BY_UID,
    "published_at": INDEX_BY_PUBLISHED,
}


class NewsQueryResult:
    """Lazily evaluated, windowed view over an ordered news index.

    ``offset`` and ``limit`` are applied to the index before anything else,
    so ``count()`` and item access only ever see the windowed rows. Reads go
    to Redis on every access; results are stable as long as the data is.
    """

    def __init__(
        self,
        repository: "NewsRepository",
        index_key: str = INDEX_BY_UID,
        descending: bool = False,
        limit: int = 0,
        offset: int = 0,
    ):
        self.repository = repository
        self.index_key = index_key
        self.descending = descending
        self.limit = max(0, limit)
        self.offset = max(0, offset)

    def count(self) -> int:
        total = self.repository.redis.zcard(self.index_key)
        available = max(total - self.offset, 0)
        if self.limit:
            return min(available, self.limit)
        return available

    def __len__(self) -> int:
        return self.count()

    def __getitem__(self, key: Union[int, slice]) -> Union[News, List[News]]:
        """Read by window-relative index or contiguous slice.

        Non-negative keys are resolved against the window bounds in a single
        ``ZRANGE``. Negative keys need the size and cost an extra ``ZCARD``.
        """
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise ValueError("NewsQueryResult only supports contiguous slices")

            start = 0 if key.start is None else key.start
            stop = key.stop
            if start < 0 or (stop is not None and stop < 0):
                start, stop, _ = key.indices(self.count())
            if self.limit:
                stop = self.limit if stop is None else min(stop, self.limit)
            if stop is not None and stop <= start:
                return []
            return self._fetch(start, None if stop is None else stop - 1)

        index = key
        if index < 0:
            index += self.count()
        if index < 0 or (self.limit and index >= self.limit):
            raise IndexError(f"News index {key} out of range")

        items = self._fetch(index, index)
        if not items:
            raise IndexError(f"News index {key} out of range")
        return items[0]

    def __iter__(self):
        return iter(self[:])

    def _fetch(self, start: int, end: Optional[int]) -> List[News]:
        """Fetch window-relative positions ``start``..``end`` inclusive.

        ``end`` of None reads to the end of the index.
        """
        uids = self.repository.redis.zrange(
            self.index_key,
            self.offset + start,
            -1 if end is None else self.offset + end,
            desc=self.descending,
        )
        return self.repository.find_by_uids([int(uid) for uid in uids])

    def __repr__(self) -> str:
        return (
            f"NewsQueryResult(index={self.index_key!r}, descending={self.descending}, "
            f"limit={self.limit}, offset={self.offset})"
        )


class NewsRepository(RedisRepository):
    """Repository for news records."""

    def add(self, news: News) -> None:
        """Store a news record and index it."""
        self.set_json(NEWS_KEY.format(uid=news.uid), news.model_dump(mode="json"))

        published_score = news.published_at.timestamp() if news.published_at else 0
        pipeline = self.redis.pipeline()
        pipeline.zadd(INDEX_BY_UID, {str(news.uid): news.uid})
        pipeline.zadd(INDEX_BY_PUBLISHED, {str(news.uid): published_score})
        pipeline.execute()

    def find_by_uid(self, uid: int) -> Optional[News]:
        data = self.get_json(NEWS_KEY.format(uid=uid))
        return self._to_news(data) if data else None

    def find_by_uids(self, uids: List[int]) -> List[News]:
        """Fetch records preserving the order of ``uids``, skipping missing ones."""
        keys = [NEWS_KEY.format(uid=uid) for uid in uids]
        results = self.batch_get_json(keys)

        news = []
        for key in keys:
            record = self._to_news(results.get(key))
            if record is not None:
                news.append(record)
            else:
                logger.warning(f"Indexed news {key} has no readable record")
        return news

    def count_all(self) -> int:
        return self.redis.zcard(INDEX_BY_UID)

    def find_all(self) -> NewsQueryResult:
        """All news ordered by uid ascending."""
        return NewsQueryResult(self)

    def find_demanded(self, demand: NewsDemand) -> NewsQueryResult:
        """News matching ``demand``, windowed by its limit and offset."""
        index_key = INDEX_BY_UID
        descending = False

        ordering = demand.get_ordering()
        if ordering is not None:
            field, direction = ordering
            if field in ORDER_INDEXES:
                index_key = ORDER_INDEXES[field]
                descending = direction == OrderDirection.DESC
            else:
                logger.warning(f"Ordering by {field} is not supported, using uid")

        return NewsQueryResult(
            self,
            index_key=index_key,
            descending=descending,
            limit=demand.limit,
            offset=demand.offset,
        )

    @staticmethod
    def _to_news(data: Optional[Dict[str, Any]]) -> Optional[News]:
        if not data:
            return None
        return News.model_validate(data)
