"""News models."""

from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, validator


class OrderDirection(str, Enum):
    """Sort direction of a demand."""

    ASC = "asc"
    DESC = "desc"


class News(BaseModel):
    """A single news record."""

    uid: int = Field(..., ge=1)
    title: str
    teaser: Optional[str] = None
    author: Optional[str] = None
    published_at: Optional[datetime] = None


class NewsDemand(BaseModel):
    """Query description handed to the news repository.

    ``order`` is ``"<field> <asc|desc>"`` and only takes effect when the
    field is listed in the comma separated ``order_by_allowed``. A ``limit``
    of 0 means no limit.
    """

    order: str = ""
    order_by_allowed: str = ""
    limit: int = 0
    offset: int = 0

    @validator("limit", "offset", pre=True)
    def non_negative(cls, v):
        """Negative windows are treated as no window."""
        if v is None:
            return 0
        return max(0, int(v))

    @property
    def allowed_order_fields(self) -> List[str]:
        return [
            field.strip()
            for field in self.order_by_allowed.split(",")
            if field.strip()
        ]

    def get_ordering(self) -> Optional[Tuple[str, OrderDirection]]:
        """Field and direction requested, or None when not allowed."""
        parts = self.order.split()
        if not parts or parts[0] not in self.allowed_order_fields:
            return None

        direction = OrderDirection.ASC
        if len(parts) > 1 and parts[1].lower() == OrderDirection.DESC.value:
            direction = OrderDirection.DESC
        return parts[0], direction
