#!/usr/bin/env python3
"""
Pagination - slice an ordered result list into pages.

Conventions:
- page and page_size are coerced to positive ints; missing, non-numeric,
  zero or negative values fall back to DEFAULT_PAGE / DEFAULT_PAGE_SIZE
- total_pages = ceil(total_items / page_size), so an empty list has 0 pages
- a page past the end is an empty slice, never an error
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Sequence, TypeVar

from core.utils import parse_positive_int

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus its metadata."""
    items: List[T] = field(default_factory=list)
    current_page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE
    total_pages: int = 0
    total_items: int = 0

    def to_pagination(self) -> Dict[str, int]:
        return {
            'current_page': self.current_page,
            'total_pages': self.total_pages,
            'total_items': self.total_items,
        }


def paginate(
    items: Sequence[T],
    page: Optional[Any] = DEFAULT_PAGE,
    page_size: Optional[Any] = DEFAULT_PAGE_SIZE
) -> Page[T]:
    """
    Return the requested page of items.

    Args:
        items: Ordered results
        page: 1-based page number (raw values accepted)
        page_size: Items per page (raw values accepted)

    Returns:
        Page with items[(page-1)*page_size : page*page_size]
    """
    current_page = parse_positive_int(page, DEFAULT_PAGE)
    size = parse_positive_int(page_size, DEFAULT_PAGE_SIZE)

    total_items = len(items)
    total_pages = math.ceil(total_items / size)

    start = (current_page - 1) * size
    end = start + size

    return Page(
        items=list(items[start:end]),
        current_page=current_page,
        page_size=size,
        total_pages=total_pages,
        total_items=total_items,
    )
