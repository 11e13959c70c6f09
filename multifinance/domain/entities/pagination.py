"""Pagination value objects."""

import math
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageParams:
    """Page request with an optional status filter."""

    page: int = 1
    limit: int = 10
    status: Optional[str] = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class Page(Generic[T]):
    """A page of results along with the total match count."""

    total: int
    page: int
    limit: int
    data: List[T] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        if self.limit <= 0:
            return 0
        return math.ceil(self.total / self.limit)
