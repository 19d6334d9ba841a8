"""Shared limit-offset pagination for the list endpoints.

Each entity service builds its own filtered query and hands it to
``paginate`` together with the ordering to apply. Count and page are
issued as separate queries.
"""

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

from sqlalchemy import ColumnElement
from sqlalchemy.orm import Query

from admin_backend.api.schemas import DEFAULT_PAGE_SIZE, PaginationMeta

T = TypeVar("T")

LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class PageParams:
    """Requested page. Bounds are enforced by the API contract."""

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass
class Page:
    """One page of mapped rows plus its metadata."""

    data: list[Any]
    meta: PaginationMeta


def total_pages(total: int, page_size: int) -> int:
    """Number of pages needed for ``total`` rows."""
    return math.ceil(total / page_size)


def paginate(
    query: Query,
    params: PageParams,
    order_by: Sequence[Any],
    mapper: Callable[[Any], T],
) -> Page:
    """Count, order and slice a filtered query.

    Args:
        query: Query with all filters applied.
        params: Requested page and page size.
        order_by: Ordering clauses for the page query.
        mapper: Converts each row to its response shape.

    Returns:
        Page with mapped rows and pagination metadata.
    """
    total = query.order_by(None).count()
    rows = (
        query.order_by(*order_by)
        .offset(params.offset)
        .limit(params.page_size)
        .all()
    )
    return Page(
        data=[mapper(row) for row in rows],
        meta=PaginationMeta(
            page=params.page,
            page_size=params.page_size,
            total=total,
            total_pages=total_pages(total, params.page_size),
        ),
    )


def contains(column: Any, term: str) -> ColumnElement[bool]:
    """Case-insensitive substring match of ``term`` against ``column``.

    LIKE wildcards in ``term`` are escaped, so ``_`` and ``%`` match
    themselves.
    """
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return column.ilike(f"%{escaped}%", escape=LIKE_ESCAPE)
