"""Pagination math: skip/take values, display range and a compact page list.

The page list collapses long ranges into gap markers, e.g. for page 10 of 100::

    1, 2, …, 9, 10, 11, …, 99, 100

Gap markers are their own entry type so they can never be mistaken for (or
filtered out as) page numbers.
"""

import logging
import math
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .core.config import Config


logger = logging.getLogger(__name__)

DEFAULT_ORDER_BY = "id"
FULL_LIST_LIMIT = 5


class OrderDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: Optional[str]) -> "OrderDirection":
        if value is not None and value.strip().lower() == "desc":
            return cls.DESC
        return cls.ASC


class PageNumber(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["page"] = "page"
    number: int


class Gap(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["gap"] = "gap"
    side: Literal["leading", "trailing"]


PageEntry = Annotated[Union[PageNumber, Gap], Field(discriminator="kind")]

LEADING_GAP = Gap(side="leading")
TRAILING_GAP = Gap(side="trailing")


class PageInfo(BaseModel):
    """Pagination metadata returned alongside a page of results."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    current_page: int
    page_size: int
    total_count: int
    total_pages: int
    showing_from: int
    showing_to: int
    pages: List[PageEntry]
    order_by: str
    order_type: OrderDirection


def _normalize_order_by(column: Optional[str]) -> str:
    if column is None or not column.strip():
        return DEFAULT_ORDER_BY
    return column.strip().lower()


class Paginator:
    """Translate a page request into query offsets and UI-ready page metadata.

    Invalid numbers are clamped rather than rejected: page and page size are
    at least 1, the total count is at least 0.
    """

    def __init__(
        self,
        page: int = 1,
        page_size: Optional[int] = None,
        order_by: Optional[str] = DEFAULT_ORDER_BY,
        order_type: Optional[str] = "asc",
    ) -> None:
        self.current_page = 1
        self.page_size = Config.default_page_size()
        self.total_count = 0
        self.order_by = DEFAULT_ORDER_BY
        self.order_type = OrderDirection.ASC
        self.set_data(page, self.page_size if page_size is None else page_size, order_by, order_type)

    def set_data(
        self,
        page: int,
        page_size: int,
        order_by: Optional[str] = DEFAULT_ORDER_BY,
        order_type: Optional[str] = "asc",
    ) -> "Paginator":
        self.set_page(page)
        self.set_per_page(page_size)
        self.set_order_by(order_by)
        self.order_type = OrderDirection.parse(order_type)
        return self

    def set_page(self, page: int) -> "Paginator":
        self.current_page = max(page, 1)
        return self

    def set_per_page(self, page_size: int) -> "Paginator":
        self.page_size = max(page_size, 1)
        return self

    def set_order_by(self, column: Optional[str]) -> "Paginator":
        self.order_by = _normalize_order_by(column)
        return self

    def set_total_count(self, count: int) -> "Paginator":
        self.total_count = max(count, 0)
        return self

    def set_ascending(self) -> "Paginator":
        self.order_type = OrderDirection.ASC
        return self

    def set_descending(self) -> "Paginator":
        self.order_type = OrderDirection.DESC
        return self

    @property
    def skip(self) -> int:
        return (self.current_page - 1) * self.page_size

    @property
    def take(self) -> int:
        return self.page_size

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def showing_from(self) -> int:
        return min(self.skip + 1, self.total_count)

    @property
    def showing_to(self) -> int:
        return min(self.current_page * self.page_size, self.total_count)

    def pages(self) -> List[Union[PageNumber, Gap]]:
        total_pages = self.total_pages
        if total_pages <= FULL_LIST_LIMIT:
            return [PageNumber(number=n) for n in range(1, total_pages + 1)]

        current = self.current_page
        candidates: List[Union[int, Gap]] = [1, 2]
        if current > 3:
            candidates.append(LEADING_GAP)
        if current > 2:
            candidates.append(current - 1)
        candidates.append(current)
        if current < total_pages:
            candidates.append(current + 1)
        if current < total_pages - 2:
            candidates.append(TRAILING_GAP)
        candidates.extend([total_pages - 1, total_pages])

        entries: List[Union[PageNumber, Gap]] = []
        seen = set()
        for candidate in candidates:
            if candidate in seen:
                continue
            seen.add(candidate)
            if isinstance(candidate, Gap):
                entries.append(candidate)
            elif 1 <= candidate <= total_pages:
                entries.append(PageNumber(number=candidate))
        return entries

    def page_info(self) -> PageInfo:
        info = PageInfo(
            current_page=self.current_page,
            page_size=self.page_size,
            total_count=self.total_count,
            total_pages=self.total_pages,
            showing_from=self.showing_from,
            showing_to=self.showing_to,
            pages=self.pages(),
            order_by=self.order_by,
            order_type=self.order_type,
        )
        logger.debug(
            f"Page {info.current_page}/{info.total_pages} "
            f"showing {info.showing_from}-{info.showing_to} of {info.total_count}"
        )
        return info
