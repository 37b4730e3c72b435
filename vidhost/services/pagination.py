"""
Offset pagination over SQLAlchemy queries
"""

import math
from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

from sqlalchemy.orm import Query

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of results plus the counters clients use to navigate"""
    items: List[T]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total / self.limit))

    @property
    def paging_counter(self) -> int:
        # 1-based position of the first item on this page
        return (self.page - 1) * self.limit + 1

    @property
    def has_prev_page(self) -> bool:
        return self.page > 1

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def prev_page(self) -> Optional[int]:
        return self.page - 1 if self.has_prev_page else None

    @property
    def next_page(self) -> Optional[int]:
        return self.page + 1 if self.has_next_page else None


def paginate(count_query: Query, items_query: Query, page: int, limit: int) -> Page:
    total = count_query.count()
    items = items_query.offset((page - 1) * limit).limit(limit).all()
    return Page(items=items, total=total, page=page, limit=limit)
