"""Paginated response wrapper."""

from dataclasses import dataclass
from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageResponse(Generic[T]):
    """A page of response DTOs."""

    data: List[T]
    total: int
    page: int
    limit: int
    total_pages: int

    @classmethod
    def from_page(cls, page, convert: Callable) -> "PageResponse":
        return cls(
            data=[convert(item) for item in page.data],
            total=page.total,
            page=page.page,
            limit=page.limit,
            total_pages=page.total_pages,
        )
