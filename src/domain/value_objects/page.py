"""Paging value objects for catalog listings.

PageRequest describes which slice of the catalog a caller wants; Page carries
the slice back together with the total count.

Usage:
    from src.domain.value_objects import PageRequest

    page_request = PageRequest(page=0, size=20)
    page = await resource_repo.find_all(page_request)
    print(page.total_pages, page.has_next)
"""

from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

from src.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

T = TypeVar("T")
U = TypeVar("U")

SORTABLE_FIELDS: frozenset[str] = frozenset(
    {"created_at", "updated_at", "country_code", "type"}
)


@dataclass(frozen=True, slots=True, kw_only=True)
class PageRequest:
    """Requested page of a listing.

    Attributes:
        page: Zero-based page index.
        size: Maximum number of items per page.
        sort_by: Field to order by (see SORTABLE_FIELDS).
        descending: Sort direction. Newest first by default.

    Raises:
        ValueError: If page is negative, size is out of range, or the sort
            field is unknown.
    """

    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    sort_by: str = "created_at"
    descending: bool = True

    def __post_init__(self) -> None:
        """Validate paging parameters."""
        if self.page < 0:
            raise ValueError("Page index must not be negative")
        if not 1 <= self.size <= MAX_PAGE_SIZE:
            raise ValueError(f"Page size must be between 1 and {MAX_PAGE_SIZE}")
        if self.sort_by not in SORTABLE_FIELDS:
            raise ValueError(f"Cannot sort by '{self.sort_by}'")

    @property
    def offset(self) -> int:
        """Number of items to skip before this page."""
        return self.page * self.size


@dataclass(frozen=True, slots=True, kw_only=True)
class Page(Generic[T]):
    """One page of listing results.

    Attributes:
        items: Items on this page, in requested order.
        page: Zero-based page index.
        size: Requested page size.
        total_items: Number of items across all pages.
    """

    items: list[T] = field(default_factory=list)
    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    total_items: int = 0

    @property
    def total_pages(self) -> int:
        """Number of pages needed to hold every item."""
        if self.total_items == 0:
            return 0
        return (self.total_items + self.size - 1) // self.size

    @property
    def has_next(self) -> bool:
        """Whether a page follows this one."""
        return self.page + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        """Whether a page precedes this one."""
        return self.page > 0

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        """Return a page with every item transformed by fn."""
        return Page(
            items=[fn(item) for item in self.items],
            page=self.page,
            size=self.size,
            total_items=self.total_items,
        )
