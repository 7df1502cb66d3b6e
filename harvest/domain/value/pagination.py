"""Pagination metadata for paged listings."""

import math

from pydantic import Field

from harvest.domain.value.common import ValueObject


class Pagination(ValueObject):
    """Page metadata returned alongside every paged listing.

    Always derived from a fresh count; never adjusted on its own.
    """

    total_items: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    current_page: int = Field(ge=1)
    page_size: int = Field(ge=1)

    @classmethod
    def from_total(cls, total_items: int, page: int, page_size: int) -> "Pagination":
        """Build pagination for ``page`` of a listing with ``total_items`` rows."""
        return cls(
            total_items=total_items,
            total_pages=math.ceil(total_items / page_size) if total_items else 0,
            current_page=page,
            page_size=page_size,
        )

    @property
    def offset(self) -> int:
        """Row offset of the first item on the current page."""
        return (self.current_page - 1) * self.page_size

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1
