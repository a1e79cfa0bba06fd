"""
News routes - paginated listing and single record lookup.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from newsdesk.api.dependencies import get_news_repository
from newsdesk.api.utils.pagination import build_paginated_response
from newsdesk.config.settings import settings
from newsdesk.core.logging import get_logger
from newsdesk.models.news import News, NewsDemand
from newsdesk.pagination import QueryResultPaginator
from newsdesk.repositories.news import ORDER_INDEXES, NewsRepository

logger = get_logger(__name__)

router = APIRouter()


def _serialize_news(news: News) -> Dict[str, Any]:
    return news.model_dump(mode="json")


# ============================================================================
# API ENDPOINTS
# ============================================================================


@router.get("", response_model=Dict[str, Any])
async def list_news(
    page: int = Query(1, description="Page number, 1-based"),
    items_per_page: Optional[int] = Query(
        None, alias="itemsPerPage", description="Items per page"
    ),
    limit: int = Query(0, ge=0, description="Limit applied to the query, 0 for none"),
    offset: int = Query(0, ge=0, description="Offset applied to the query"),
    order: str = Query("", description="Ordering, e.g. 'uid asc'"),
    maximum_number_of_links: Optional[int] = Query(
        None, alias="maximumNumberOfLinks", description="Page links to list"
    ),
    repo: NewsRepository = Depends(get_news_repository),
) -> Dict[str, Any]:
    """
    List news one page at a time.

    The query is windowed by ``limit``/``offset`` first, then paginated.
    Pages past the last one return the last page. Page numbers below 1 are
    rejected with 400.
    """
    if items_per_page is None:
        items_per_page = settings.default_items_per_page
    items_per_page = min(items_per_page, settings.maximum_items_per_page)

    demand = NewsDemand(
        order=order,
        order_by_allowed=",".join(ORDER_INDEXES),
        limit=limit,
        offset=offset,
    )

    paginator = QueryResultPaginator(
        repo.find_demanded(demand),
        items_per_page=items_per_page,
        limit=demand.limit,
        offset=demand.offset,
    )
    paginator.with_current_page_number(page)

    response = build_paginated_response(
        paginator,
        maximum_number_of_links or settings.maximum_number_of_links,
        serialize=_serialize_news,
    )

    logger.info(
        f"Listed page {response.page}/{response.total_pages} "
        f"with {len(response.items)} news",
        extra={"page": response.page, "items_per_page": response.items_per_page},
    )
    return response.to_dict()


@router.get("/{uid}", response_model=Dict[str, Any])
async def get_news(
    uid: int,
    repo: NewsRepository = Depends(get_news_repository),
) -> Dict[str, Any]:
    """Get a single news record."""
    news = repo.find_by_uid(uid)
    if news is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"News {uid} not found",
        )
    return _serialize_news(news)
