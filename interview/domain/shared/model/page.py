"""Pagination primitives.

A ``PageRequest`` describes one sorted slice of a collection; a ``Page`` is the
slice plus the metadata a client needs to walk the remaining pages.
"""

import math
from enum import StrEnum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from interview.domain.shared.error import ValidationError
from interview.domain.shared.model.value import ValueObject

T = TypeVar("T")


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str) -> "SortDirection":
        """Parse a direction case-insensitively ("ASC", "desc", ...)."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValidationError(
                f"Invalid sort direction '{value}'. Allowed: asc, desc",
                field="sort_dir",
            ) from None


class PageRequest(ValueObject):
    page_number: int = Field(ge=0)
    page_size: int = Field(ge=1)
    sort_by: str
    sort_dir: SortDirection = SortDirection.ASC

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size


class Page(BaseModel, Generic[T]):
    content: list[T]
    page_number: int
    page_size: int
    total_elements: int
    total_pages: int
    last_page: bool

    @classmethod
    def of(cls, content: list[T], request: PageRequest, total_elements: int) -> "Page[T]":
        """Build a page from one store slice and the total row count."""
        total_pages = math.ceil(total_elements / request.page_size) if total_elements else 0
        last_page = total_elements == 0 or request.page_number == total_pages - 1
        return cls(
            content=content,
            page_number=request.page_number,
            page_size=request.page_size,
            total_elements=total_elements,
            total_pages=total_pages,
            last_page=last_page,
        )
