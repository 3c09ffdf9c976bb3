# storefront/repos/base.py
from sqlalchemy import Select

from storefront.domain.pagination import PageRequest


def apply_page(stmt: Select, model, page: PageRequest) -> Select:
    """Add ORDER BY / OFFSET / LIMIT from a PageRequest to a select."""
    if page.ordering is not None:
        column = getattr(model, page.ordering.column)
        stmt = stmt.order_by(column.desc() if page.ordering.descending else column.asc())
    return stmt.offset(page.offset).limit(page.limit)
