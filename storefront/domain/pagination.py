# storefront/domain/pagination.py
from dataclasses import dataclass
from enum import Enum

from storefront.domain.errors import ValidationFailed
from storefront.utils.settings import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT

DEFAULT_PAGE = 1


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class ProductSortBy(str, Enum):
    name = "name"
    price = "price"
    created_at = "created_at"


class UserSortBy(str, Enum):
    name = "name"
    email = "email"
    created_at = "created_at"


@dataclass(frozen=True)
class Ordering:
    column: str
    direction: SortDirection

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESC


@dataclass(frozen=True)
class PageRequest:
    page_index: int
    limit: int
    ordering: Ordering | None = None

    @property
    def offset(self) -> int:
        return self.page_index * self.limit


def create_page_request(
    page: int | None = None,
    limit: int | None = None,
    sort_direction: SortDirection | None = None,
    sort_by: str | Enum | None = None,
) -> PageRequest:
    """
    Turn raw query values into a bounded PageRequest.

    Missing page/limit fall back to 1 and DEFAULT_PAGE_LIMIT. Ordering is only
    built when both the direction and the column are given. Limits above
    MAX_PAGE_LIMIT are rejected.
    """
    actual_page = page if page is not None else DEFAULT_PAGE
    actual_limit = limit if limit is not None else DEFAULT_PAGE_LIMIT

    errors = {}
    if actual_page < 1:
        errors["page"] = "Page must be at least 1"
    if actual_limit < 1:
        errors["limit"] = "Limit must be at least 1"
    elif actual_limit > MAX_PAGE_LIMIT:
        errors["limit"] = f"Limit must be at most {MAX_PAGE_LIMIT}"
    if errors:
        raise ValidationFailed(errors)

    if isinstance(sort_by, Enum):
        sort_by = sort_by.value

    ordering = None
    if sort_direction is not None and sort_by:
        ordering = Ordering(column=sort_by, direction=SortDirection(sort_direction))

    return PageRequest(page_index=actual_page - 1, limit=actual_limit, ordering=ordering)
