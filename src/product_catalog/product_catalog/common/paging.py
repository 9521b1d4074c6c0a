"""Paging primitives shared by repositories and controllers.

``Pageable`` describes the requested slice (0-based page number, page size and
an optional sort); ``Page`` carries one slice of results plus the metadata the
list endpoint serializes.
"""
from __future__ import annotations

from dataclasses import dataclass
from math import ceil
from typing import Any, Callable, Generic, Mapping, Optional, Sequence, TypeVar

from ..core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_NUMBER, MAX_PAGE_SIZE
from ..core.exceptions import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Sort:
    prop: str
    ascending: bool = True

    @property
    def direction(self) -> str:
        return "ASC" if self.ascending else "DESC"

    def to_dict(self) -> dict:
        return {"property": self.prop, "direction": self.direction}


@dataclass(frozen=True)
class Pageable:
    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    sort: Optional[Sort] = None

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def from_args(cls, args: Mapping[str, str], *, sortable: Sequence[str] = ()) -> "Pageable":
        """Build from query args: ``page``, ``size`` and ``sort=field[,asc|desc]``."""
        page = _parse_int(args.get("page"), "page", default=0)
        size = _parse_int(args.get("size"), "size", default=DEFAULT_PAGE_SIZE)
        if page < 0:
            raise ValidationError("page must not be negative")
        if page > MAX_PAGE_NUMBER:
            raise ValidationError(f"page must not exceed {MAX_PAGE_NUMBER}")
        if size < 1:
            raise ValidationError("size must be at least 1")
        size = min(size, MAX_PAGE_SIZE)

        sort = None
        raw_sort = (args.get("sort") or "").strip()
        if raw_sort:
            prop, _, direction = raw_sort.partition(",")
            prop = prop.strip()
            direction = direction.strip().lower() or "asc"
            if prop not in sortable:
                raise ValidationError(f"Cannot sort by '{prop}'")
            if direction not in ("asc", "desc"):
                raise ValidationError(f"Invalid sort direction '{direction}'")
            sort = Sort(prop=prop, ascending=direction == "asc")

        return cls(page=page, size=size, sort=sort)


@dataclass(frozen=True)
class Page(Generic[T]):
    content: Sequence[T]
    pageable: Pageable
    total_elements: int

    @property
    def total_pages(self) -> int:
        return ceil(self.total_elements / self.pageable.size)

    @property
    def number(self) -> int:
        return self.pageable.page

    @property
    def is_first(self) -> bool:
        return self.pageable.page == 0

    @property
    def is_last(self) -> bool:
        return self.pageable.page + 1 >= self.total_pages

    def to_dict(self, serialize: Callable[[T], Any]) -> dict:
        sort = [self.pageable.sort.to_dict()] if self.pageable.sort else []
        return {
            "content": [serialize(item) for item in self.content],
            "pageable": {
                "pageNumber": self.pageable.page,
                "pageSize": self.pageable.size,
                "offset": self.pageable.offset,
                "sort": sort,
            },
            "totalElements": self.total_elements,
            "totalPages": self.total_pages,
            "number": self.number,
            "size": self.pageable.size,
            "numberOfElements": len(self.content),
            "first": self.is_first,
            "last": self.is_last,
            "empty": not self.content,
            "sort": sort,
        }


def _parse_int(value: Optional[str], name: str, *, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{name} must be an integer")
