"""Pagination value objects.

Every list operation converts a (page, limit) pair into an offset window
and reports the total and page count alongside the rows it returns.
"""

import math
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field

from lostfound.domain.value.common import ValueObject

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def _positive_int(value: Any) -> int | None:
    """Return value as a positive int, or None if it cannot be one."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value.isdigit():
            return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


class PageWindow(ValueObject):
    """Offset window computed for a page of results."""

    skip: int = Field(ge=0)
    take: int = Field(ge=1)
    page_count: int = Field(ge=0)


def paginate(page: int, limit: int, total_count: int) -> PageWindow:
    """Compute the offset window and page count for a page.

    Args:
        page: 1-based page number
        limit: Page size
        total_count: Number of rows matching the filter

    Returns:
        Window with skip/take and the total number of pages

    Raises:
        ValueError: If page or limit is not positive, or total is negative
    """
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be positive")
    if total_count < 0:
        raise ValueError("total_count must not be negative")
    return PageWindow(
        skip=(page - 1) * limit,
        take=limit,
        page_count=math.ceil(total_count / limit),
    )


class PageRequest(ValueObject):
    """A validated (page, limit) pair."""

    page: int = Field(default=DEFAULT_PAGE, ge=1)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1)

    @classmethod
    def parse(
        cls,
        page: Any = None,
        limit: Any = None,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ) -> "PageRequest":
        """Build a page request from raw query parameters.

        Missing, non-numeric and non-positive values fall back to the
        defaults. The limit is clamped to max_limit.

        Args:
            page: Raw page value (int, numeric string or None)
            limit: Raw limit value (int, numeric string or None)
            default_limit: Limit used when none (or an invalid one) is given
            max_limit: Upper bound for the limit

        Returns:
            Normalized page request
        """
        parsed_page = _positive_int(page) or DEFAULT_PAGE
        parsed_limit = _positive_int(limit) or default_limit
        return cls(page=parsed_page, limit=min(parsed_limit, max_limit))


T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One page of an ordered result set."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    items: list[T]
    total: int = Field(ge=0)
    page: int = Field(ge=1)
    limit: int = Field(ge=1)
    pages: int = Field(ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def count(self) -> int:
        """Number of items on this page."""
        return len(self.items)
