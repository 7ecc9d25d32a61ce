"""Page bookkeeping shared by the paginated listings."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1


def page_count(total_rows: int, limit: int) -> int:
    """Number of pages needed to hold ``total_rows`` rows, ``limit`` per page."""
    if limit <= 0:
        raise ValueError(f"page limit must be positive, got {limit}")
    if total_rows < 0:
        raise ValueError(f"row count cannot be negative, got {total_rows}")
    return -(-total_rows // limit)


def _serialize(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.metadata.get("json", f.name): _serialize(getattr(value, f.name))
            for f in dataclasses.fields(value)
        }
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    if isinstance(value, dict):
        return {key: _serialize(item) for key, item in value.items()}
    return value


@dataclass
class Pagination:
    """One page of a listing together with its totals.

    A page or limit of zero falls back to the defaults (page 1, 10 rows).
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    total_rows: int = 0
    total_pages: int = 0
    data: Any = None

    def __post_init__(self) -> None:
        if self.page == 0:
            self.page = DEFAULT_PAGE
        if self.limit == 0:
            self.limit = DEFAULT_LIMIT

    def offset(self) -> int:
        """Index of the first row on the current page."""
        return (self.page - 1) * self.limit

    def apply_total(self, total_rows: int) -> None:
        """Record the total row count and derive the page count from it."""
        self.total_pages = page_count(total_rows, self.limit)
        self.total_rows = total_rows

    def to_json(self) -> dict[str, Any]:
        """The page as a JSON-ready mapping."""
        return {
            "limit": self.limit,
            "page": self.page,
            "total_rows": self.total_rows,
            "total_pages": self.total_pages,
            "data": _serialize(self.data),
        }