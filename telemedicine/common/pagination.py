"""
Offset/limit paging over an already-filtered collection.

A ``Paginator`` is built fresh for every request::

    paged = (
        Paginator.from_source(doctors)
        .get_range(offset, limit, lambda d: d.id, 1)
        .paginate(DoctorResponse.model_validate)
    )

``offset`` is a 1-based page number, not a row count. Bad ``offset``/``limit``
values are clamped rather than rejected so list endpoints never answer 400
for paging input.
"""

from collections.abc import Callable, Iterable
from typing import Any, Generic, Optional, TypeVar

from pydantic import Field

from telemedicine.common.schemas import CamelModel
from telemedicine.config import settings

T = TypeVar("T")
R = TypeVar("R")

ASCENDING = 1
DESCENDING = -1


class Paged(CamelModel, Generic[T]):
    current_page: int = Field(ge=1)
    page_size: int = Field(ge=1)
    total_items: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    items: list[T]

    @classmethod
    def create(cls, items: list, total_items: int, current_page: int, page_size: int) -> "Paged":
        total_pages = (total_items + page_size - 1) // page_size if total_items > 0 else 0
        return cls(
            items=items,
            total_items=total_items,
            current_page=current_page,
            page_size=page_size,
            total_pages=total_pages,
        )


class Paginator(Generic[T]):
    """Sorts, counts and slices one page out of ``source``."""

    def __init__(self, source: Optional[Iterable[T]] = None, default_limit: Optional[int] = None):
        self._source = source if source is not None else ()
        self._default_limit = default_limit or settings.default_page_limit
        self._page: Optional[Paged] = None

    @classmethod
    def from_source(cls, source: Optional[Iterable[T]], default_limit: Optional[int] = None) -> "Paginator[T]":
        # Only the reference is kept; the iterable is consumed by get_range.
        return cls(source, default_limit=default_limit)

    def get_range(
        self,
        offset: int,
        limit: int,
        sort_key: Callable[[T], Any],
        sort_direction: int = ASCENDING,
    ) -> "Paginator[T]":
        """Select page ``offset`` of size ``limit`` ordered by ``sort_key``.

        Only ``sort_direction == 1`` sorts ascending; any other value,
        including 0, sorts descending. Equal keys keep their source order
        in both directions. An ``offset`` past the last page gives an empty
        page, not an error.
        """
        if sort_key is None:
            raise ValueError("get_range() requires a sort_key callable to order the source")

        offset = offset if offset is not None and offset >= 1 else 1
        limit = limit if limit is not None and limit >= 1 else self._default_limit

        ordered = sorted(self._source, key=sort_key, reverse=sort_direction != ASCENDING)
        start = (offset - 1) * limit

        self._page = Paged.create(
            items=ordered[start:start + limit],
            total_items=len(ordered),
            current_page=offset,
            page_size=limit,
        )
        return self

    def paginate(self, projection: Callable[[T], R]) -> Paged[R]:
        """Project the selected page's items through ``projection``."""
        if self._page is None:
            raise RuntimeError("paginate() called before get_range()")
        items = [projection(item) for item in self._page.items]
        return self._page.model_copy(update={"items": items})
